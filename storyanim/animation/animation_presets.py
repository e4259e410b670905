"""Animation presets: name -> descriptor builders, plus full-bleed styling.

The first keyframe of every preset is treated as offset 0 and is applied to the
element before its animation starts.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Union
from xml.etree import ElementTree as ET

from storyanim.animation.animation_types import (
    AnimationDescriptor,
    Dimensions,
    GeneratedKeyframes,
    KeyframeFrame,
    PresetConfigurationError,
    PresetOptions,
    StaticKeyframes,
    frame,
)
from storyanim.animation.presets_utils import (
    calculate_target_scaling_factor,
    rotate_and_translate,
    scale_and_translate,
    translate2d,
    whoosh_in,
)
from storyanim.utils.style import ensure_class, format_number, has_class, px, remove_class

logger = logging.getLogger(__name__)

FULL_BLEED_CATEGORY = "full-bleed"
FILL_TEMPLATE_LAYOUT = "fill"
SCALE_HIGH_DEFAULT = 3
SCALE_LOW_DEFAULT = 1
DROP_MIN_BOUNCE_HEIGHT = 160

EASE_STANDARD = "cubic-bezier(0.4, 0.0, 0.2, 1)"
EASE_DECELERATE = "cubic-bezier(0.0, 0.0, 0.2, 1)"
EASE_BOUNCE_IN = "cubic-bezier(.75,.05,.86,.08)"
EASE_BOUNCE_OUT = "cubic-bezier(.22,.61,.35,1)"
EASE_TWIRL = "cubic-bezier(.2,.75,.4,1)"
EASE_LINEAR = "linear"

GRID_LAYER_TEMPLATE_CLASS_NAMES = MappingProxyType({
    "fill": "i-amphtml-story-grid-template-fill",
    "vertical": "i-amphtml-story-grid-template-vertical",
    "horizontal": "i-amphtml-story-grid-template-horizontal",
    "thirds": "i-amphtml-story-grid-template-thirds",
})

# Presets whose target fills its container
FULL_BLEED_ANIMATION_NAMES = frozenset({
    "pan-up",
    "pan-down",
    "pan-right",
    "pan-left",
    "zoom-in",
    "zoom-out",
})

ANIMATION_CSS_CLASS_NAMES = MappingProxyType({
    FULL_BLEED_CATEGORY: "i-amphtml-story-grid-template-with-full-bleed-animation",
})

OptionsLike = Union[PresetOptions, Mapping[str, Any], None]
PresetBuilder = Callable[[PresetOptions], AnimationDescriptor]


def _static(*frames: KeyframeFrame) -> StaticKeyframes:
    return StaticKeyframes(frames=tuple(frames))


# ---------------------------------------------------------------------------
# Entrance offsets
# ---------------------------------------------------------------------------

def _offscreen_left(dimensions: Dimensions) -> float:
    return -(dimensions.target_x + dimensions.target_width)


def _offscreen_right(dimensions: Dimensions) -> float:
    return dimensions.page_width - dimensions.target_x


def _offscreen_top(dimensions: Dimensions) -> float:
    return -(dimensions.target_y + dimensions.target_height)


def _offscreen_bottom(dimensions: Dimensions) -> float:
    return dimensions.page_height - dimensions.target_y


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def _pulse(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=400,
        easing=EASE_STANDARD,
        keyframes=_static(
            frame(offset=0, transform="scale(1)"),
            frame(offset=0.25, transform="scale(0.95)"),
            frame(offset=0.75, transform="scale(1.05)"),
            frame(offset=1, transform="scale(1)"),
        ),
    )


def _fly_in_left(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=400,
        easing=EASE_DECELERATE,
        keyframes=GeneratedKeyframes(lambda d: translate2d(_offscreen_left(d), 0, 0, 0)),
    )


def _fly_in_right(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=400,
        easing=EASE_DECELERATE,
        keyframes=GeneratedKeyframes(lambda d: translate2d(_offscreen_right(d), 0, 0, 0)),
    )


def _fly_in_top(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=400,
        easing=EASE_DECELERATE,
        keyframes=GeneratedKeyframes(lambda d: translate2d(0, _offscreen_top(d), 0, 0)),
    )


def _fly_in_bottom(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=400,
        easing=EASE_DECELERATE,
        keyframes=GeneratedKeyframes(lambda d: translate2d(0, _offscreen_bottom(d), 0, 0)),
    )


def _rotate_in_left(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=600,
        easing=EASE_DECELERATE,
        keyframes=GeneratedKeyframes(lambda d: rotate_and_translate(_offscreen_left(d), 0, 0, 0, -1)),
    )


def _rotate_in_right(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=600,
        easing=EASE_DECELERATE,
        keyframes=GeneratedKeyframes(lambda d: rotate_and_translate(_offscreen_right(d), 0, 0, 0, 1)),
    )


def _fade_in(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=400,
        easing=EASE_DECELERATE,
        keyframes=_static(frame(opacity=0), frame(opacity=1)),
    )


def _drop_frames(dimensions: Dimensions) -> List[KeyframeFrame]:
    max_bounce_height = max(DROP_MIN_BOUNCE_HEIGHT, dimensions.target_y + dimensions.target_height)
    logger.debug(f"drop: max bounce height {max_bounce_height}")

    def lifted(ratio: float) -> str:
        return f"translateY({px(-ratio * max_bounce_height)})"

    return [
        frame(offset=0, transform=lifted(1), easing=EASE_BOUNCE_IN),
        frame(offset=0.3, transform="translateY(0)", easing=EASE_BOUNCE_OUT),
        frame(offset=0.52, transform=lifted(0.6), easing=EASE_BOUNCE_IN),
        frame(offset=0.74, transform="translateY(0)", easing=EASE_BOUNCE_OUT),
        frame(offset=0.83, transform=lifted(0.3), easing=EASE_BOUNCE_IN),
        frame(offset=1, transform="translateY(0)", easing=EASE_BOUNCE_OUT),
    ]


def _drop(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(duration=1600, keyframes=GeneratedKeyframes(_drop_frames))


def _twirl_in(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=1000,
        easing=EASE_TWIRL,
        keyframes=_static(
            frame(transform="rotate(-540deg) scale(0.1)", opacity=0),
            frame(transform="none", opacity=1),
        ),
    )


def _whoosh_in_left(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=400,
        easing=EASE_DECELERATE,
        keyframes=GeneratedKeyframes(lambda d: whoosh_in(_offscreen_left(d), 0, 0, 0)),
    )


def _whoosh_in_right(options: PresetOptions) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=400,
        easing=EASE_DECELERATE,
        keyframes=GeneratedKeyframes(lambda d: whoosh_in(_offscreen_right(d), 0, 0, 0)),
    )


def _pan(generate: Callable[[Dimensions, Dimensions, float], List[KeyframeFrame]]) -> AnimationDescriptor:
    """Wrap a pan generator so it receives the target scaled to cover the page."""
    def keyframes(dimensions: Dimensions) -> List[KeyframeFrame]:
        scaling_factor = calculate_target_scaling_factor(dimensions)
        scaled = dimensions.scaled(scaling_factor)
        logger.debug(f"pan: scaling factor {scaling_factor} -> {scaled.target_width}x{scaled.target_height}")
        return generate(dimensions, scaled, scaling_factor)

    return AnimationDescriptor(duration=1000, easing=EASE_LINEAR, keyframes=GeneratedKeyframes(keyframes))


def _pan_left(options: PresetOptions) -> AnimationDescriptor:
    translate_x = options.translate_x

    def generate(page: Dimensions, scaled: Dimensions, factor: float) -> List[KeyframeFrame]:
        offset_x = page.page_width - scaled.target_width
        offset_y = (page.page_height - scaled.target_height) / 2
        end_x = offset_x + translate_x if translate_x else offset_x
        return scale_and_translate(offset_x, offset_y, end_x, offset_y, factor)

    return _pan(generate)


def _pan_right(options: PresetOptions) -> AnimationDescriptor:
    translate_x = options.translate_x

    def generate(page: Dimensions, scaled: Dimensions, factor: float) -> List[KeyframeFrame]:
        offset_x = page.page_width - scaled.target_width
        offset_y = (page.page_height - scaled.target_height) / 2
        # A given translateX is mirrored here rather than added to the offset
        end_x = -translate_x if translate_x else offset_x
        return scale_and_translate(0, offset_y, end_x, offset_y, factor)

    return _pan(generate)


def _pan_down(options: PresetOptions) -> AnimationDescriptor:
    translate_y = options.translate_y

    def generate(page: Dimensions, scaled: Dimensions, factor: float) -> List[KeyframeFrame]:
        offset_x = -scaled.target_width / 2
        offset_y = page.page_height - scaled.target_height
        end_y = -translate_y if translate_y else offset_y
        return scale_and_translate(offset_x, 0, offset_x, end_y, factor)

    return _pan(generate)


def _pan_up(options: PresetOptions) -> AnimationDescriptor:
    translate_y = options.translate_y

    def generate(page: Dimensions, scaled: Dimensions, factor: float) -> List[KeyframeFrame]:
        offset_x = -scaled.target_width / 2
        offset_y = page.page_height - scaled.target_height
        end_y = offset_y + translate_y if translate_y else 0
        return scale_and_translate(offset_x, offset_y, offset_x, end_y, factor)

    return _pan(generate)


def _zoom(start: float, end: float) -> AnimationDescriptor:
    return AnimationDescriptor(
        duration=1000,
        easing=EASE_LINEAR,
        keyframes=_static(
            frame(transform=f"scale({format_number(start)})"),
            frame(transform=f"scale({format_number(end)})"),
        ),
    )


def _zoom_in(options: PresetOptions) -> AnimationDescriptor:
    scale_start, scale_end = options.scale_start, options.scale_end
    if scale_start and (scale_end is None or not scale_end > scale_start):
        raise PresetConfigurationError(
            '"scale-end" value must be greater than "scale-start" value '
            'when using "zoom-in" animation.'
        )
    return _zoom(scale_start or SCALE_LOW_DEFAULT, scale_end or SCALE_HIGH_DEFAULT)


def _zoom_out(options: PresetOptions) -> AnimationDescriptor:
    scale_start, scale_end = options.scale_start, options.scale_end
    if scale_start and (scale_end is None or not scale_start > scale_end):
        raise PresetConfigurationError(
            '"scale-start" value must be higher than "scale-end" value '
            'when using "zoom-out" animation.'
        )
    return _zoom(scale_start or SCALE_HIGH_DEFAULT, scale_end or SCALE_LOW_DEFAULT)


PRESET_BUILDERS: Mapping[str, PresetBuilder] = MappingProxyType({
    "pulse": _pulse,
    "fly-in-left": _fly_in_left,
    "fly-in-right": _fly_in_right,
    "fly-in-top": _fly_in_top,
    "fly-in-bottom": _fly_in_bottom,
    "rotate-in-left": _rotate_in_left,
    "rotate-in-right": _rotate_in_right,
    "fade-in": _fade_in,
    "drop": _drop,
    "twirl-in": _twirl_in,
    "whoosh-in-left": _whoosh_in_left,
    "whoosh-in-right": _whoosh_in_right,
    "pan-left": _pan_left,
    "pan-right": _pan_right,
    "pan-down": _pan_down,
    "pan-up": _pan_up,
    "zoom-in": _zoom_in,
    "zoom-out": _zoom_out,
})


def preset_names() -> List[str]:
    return list(PRESET_BUILDERS)


def is_full_bleed(name: str) -> bool:
    return name in FULL_BLEED_ANIMATION_NAMES


def resolve_preset(name: str, options: OptionsLike = None) -> Optional[AnimationDescriptor]:
    """
    Resolve a preset name and author options into an animation descriptor.

    Returns None for unknown names. Raises PresetConfigurationError when the
    options are invalid for the preset (e.g. zoom-in with scale-end <= scale-start).
    """
    builder = PRESET_BUILDERS.get(name)
    if builder is None:
        logger.debug(f"Unknown animation preset: {name!r}")
        return None
    return builder(PresetOptions.coerce(options))


# ---------------------------------------------------------------------------
# Style classifier
# ---------------------------------------------------------------------------

def find_parent(root: ET.Element, target: ET.Element) -> Optional[ET.Element]:
    for parent in root.iter():
        for child in list(parent):
            if child is target:
                return parent
    return None


def apply_preset_style(
    element: ET.Element,
    preset_name: str,
    parent: Optional[ET.Element] = None,
) -> None:
    """Switch the parent layer from the fill layout to the full-bleed animation layout.

    ElementTree elements do not know their parent, so callers pass it directly
    (see find_parent). Presets outside the full-bleed category are ignored.
    """
    if not is_full_bleed(preset_name):
        return
    if parent is None:
        raise ValueError(f"Preset {preset_name!r} on <{element.tag}> needs the element's parent")
    fill_class = GRID_LAYER_TEMPLATE_CLASS_NAMES[FILL_TEMPLATE_LAYOUT]
    if has_class(parent, fill_class):
        remove_class(parent, fill_class)
    ensure_class(parent, ANIMATION_CSS_CLASS_NAMES[FULL_BLEED_CATEGORY])
