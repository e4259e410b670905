"""Animation Types - descriptors, keyframes and geometry passed to presets."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

PropertyValue = Union[str, int, float]


class PresetConfigurationError(ValueError):
    """Raised when an author configures a preset with invalid options."""


@dataclass(frozen=True)
class KeyframeFrame:
    """A single keyframe: property values at one point of the timeline."""
    properties: Mapping[str, PropertyValue]
    offset: Optional[float] = None  # 0.0 to 1.0
    easing: Optional[str] = None

    def __post_init__(self) -> None:
        if self.offset is not None and not 0 <= self.offset <= 1:
            raise ValueError(f"Keyframe offset must be within [0, 1], got {self.offset}")

    def get(self, name: str, default: Any = None) -> Any:
        return self.properties.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        """Engine-facing mapping, e.g. {"offset": 0.3, "transform": "...", "easing": "..."}."""
        data: Dict[str, Any] = {}
        if self.offset is not None:
            data["offset"] = self.offset
        data.update(self.properties)
        if self.easing is not None:
            data["easing"] = self.easing
        return data


def frame(offset: Optional[float] = None, easing: Optional[str] = None, **properties: PropertyValue) -> KeyframeFrame:
    return KeyframeFrame(properties=dict(properties), offset=offset, easing=easing)


def _check_ascending(frames: Sequence[KeyframeFrame]) -> None:
    previous = None
    for kf in frames:
        if kf.offset is None:
            continue
        if previous is not None and kf.offset < previous:
            raise ValueError("Keyframe offsets must be ascending")
        previous = kf.offset


@dataclass(frozen=True)
class Dimensions:
    """Measured geometry of a target element inside its page."""
    target_x: float
    target_y: float
    target_width: float
    target_height: float
    page_width: float
    page_height: float

    @classmethod
    def coerce(cls, value: Union["Dimensions", Mapping[str, float]]) -> "Dimensions":
        """Accept a Dimensions instance or a mapping keyed targetX/target_x etc."""
        if isinstance(value, Dimensions):
            return value
        def pick(camel: str, snake: str) -> float:
            if camel in value:
                return float(value[camel])
            if snake in value:
                return float(value[snake])
            raise KeyError(f"Missing dimension: {camel}")
        return cls(
            target_x=pick("targetX", "target_x"),
            target_y=pick("targetY", "target_y"),
            target_width=pick("targetWidth", "target_width"),
            target_height=pick("targetHeight", "target_height"),
            page_width=pick("pageWidth", "page_width"),
            page_height=pick("pageHeight", "page_height"),
        )

    def scaled(self, factor: float) -> "Dimensions":
        """Copy with the target size multiplied by a uniform factor."""
        return replace(
            self,
            target_width=self.target_width * factor,
            target_height=self.target_height * factor,
        )


KeyframeGenerator = Callable[[Dimensions], List[KeyframeFrame]]


@dataclass(frozen=True)
class StaticKeyframes:
    frames: Tuple[KeyframeFrame, ...]

    is_generated = False

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("Static keyframes must not be empty")
        _check_ascending(self.frames)


@dataclass(frozen=True)
class GeneratedKeyframes:
    generator: KeyframeGenerator

    is_generated = True

    def __call__(self, dimensions: Union[Dimensions, Mapping[str, float]]) -> List[KeyframeFrame]:
        frames = list(self.generator(Dimensions.coerce(dimensions)))
        _check_ascending(frames)
        return frames


Keyframes = Union[StaticKeyframes, GeneratedKeyframes]
DimensionsLike = Union[Dimensions, Mapping[str, float]]


def resolve_frames(keyframes: Keyframes, dimensions: Optional[DimensionsLike] = None) -> List[KeyframeFrame]:
    """Concrete frames for either keyframe form; generated ones need the target geometry."""
    if isinstance(keyframes, StaticKeyframes):
        return list(keyframes.frames)
    if dimensions is None:
        raise ValueError("Generated keyframes require dimensions")
    return keyframes(dimensions)


@dataclass(frozen=True)
class AnimationDescriptor:
    """
    Resolved preset: duration, easing and keyframes.

    ``easing`` of None means the playback engine's linear default.
    """
    duration: int  # milliseconds
    keyframes: Keyframes
    easing: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.duration, int) or self.duration <= 0:
            raise ValueError(f"Duration must be a positive integer, got {self.duration!r}")
        if not isinstance(self.keyframes, (StaticKeyframes, GeneratedKeyframes)):
            raise ValueError("Keyframes must be StaticKeyframes or GeneratedKeyframes")

    @property
    def is_generated(self) -> bool:
        return self.keyframes.is_generated

    def frames(self, dimensions: Optional[DimensionsLike] = None) -> List[KeyframeFrame]:
        return resolve_frames(self.keyframes, dimensions)

    def to_dict(self, dimensions: Optional[DimensionsLike] = None) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "duration": self.duration,
            "keyframes": [kf.to_dict() for kf in self.frames(dimensions)],
        }
        if self.easing is not None:
            data["easing"] = self.easing
        return data


class PresetOptions(BaseModel):
    """Author options recognised by presets; unknown keys are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    translate_x: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("translateX", "translate-x", "translate_x"),
    )
    translate_y: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("translateY", "translate-y", "translate_y"),
    )
    scale_start: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("scaleStart", "scale-start", "scale_start"),
    )
    scale_end: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("scaleEnd", "scale-end", "scale_end"),
    )

    @classmethod
    def coerce(cls, options: Union["PresetOptions", Mapping[str, Any], None]) -> "PresetOptions":
        if options is None:
            return cls()
        if isinstance(options, PresetOptions):
            return options
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
            raise PresetConfigurationError(f"Invalid animation option value: {fields}") from exc
