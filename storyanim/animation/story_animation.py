"""Read animation configuration off story elements and measure their geometry."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional
from xml.etree import ElementTree as ET

from storyanim.animation.animation_presets import resolve_preset
from storyanim.animation.animation_types import (
    Dimensions,
    DimensionsLike,
    KeyframeFrame,
    Keyframes,
    PresetConfigurationError,
    PresetOptions,
    resolve_frames,
)
from storyanim.utils.time_utils import time_str_to_millis

logger = logging.getLogger(__name__)

ANIMATE_IN_ATTRIBUTE = "animate-in"
ANIMATE_IN_DURATION_ATTRIBUTE = "animate-in-duration"
ANIMATE_IN_DELAY_ATTRIBUTE = "animate-in-delay"
ANIMATE_IN_TIMING_FUNCTION_ATTRIBUTE = "animate-in-timing-function"
ANIMATE_IN_AFTER_ATTRIBUTE = "animate-in-after"

OPTION_ATTRIBUTES = ("translate-x", "translate-y", "scale-start", "scale-end")


class LayoutRect(NamedTuple):
    left: float
    top: float
    width: float
    height: float


def dimensions_from_rects(page: LayoutRect, target: LayoutRect) -> Dimensions:
    """Target geometry relative to the page's top-left corner."""
    return Dimensions(
        target_x=target.left - page.left,
        target_y=target.top - page.top,
        target_width=target.width,
        target_height=target.height,
        page_width=page.width,
        page_height=page.height,
    )


@dataclass
class StoryAnimationDef:
    target_id: Optional[str]
    preset: str
    duration: int  # milliseconds
    keyframes: Keyframes
    delay: int = 0
    easing: Optional[str] = None
    start_after_id: Optional[str] = None

    def concrete_frames(self, dimensions: Optional[DimensionsLike] = None) -> List[KeyframeFrame]:
        return resolve_frames(self.keyframes, dimensions)


def options_from_attributes(element: ET.Element) -> PresetOptions:
    values = {name: element.get(name) for name in OPTION_ATTRIBUTES if element.get(name) is not None}
    return PresetOptions.coerce(values)


def _time_attribute(element: ET.Element, name: str) -> Optional[int]:
    raw = element.get(name)
    if raw is None:
        return None
    millis = time_str_to_millis(raw)
    if millis is None or millis < 0:
        raise PresetConfigurationError(f'"{name}" must be a CSS time value, got {raw!r}')
    return millis


def animation_def_from_element(element: ET.Element) -> Optional[StoryAnimationDef]:
    """
    Build the animation definition declared on an element.

    Attribute overrides (duration, timing function) take precedence over the
    preset's own values.
    """
    preset_name = element.get(ANIMATE_IN_ATTRIBUTE)
    if not preset_name:
        return None

    descriptor = resolve_preset(preset_name, options_from_attributes(element))
    if descriptor is None:
        logger.warning(f"Skipping element {element.get('id')!r}: unknown animation preset {preset_name!r}")
        return None

    duration = _time_attribute(element, ANIMATE_IN_DURATION_ATTRIBUTE)
    if duration == 0:
        raise PresetConfigurationError(f'"{ANIMATE_IN_DURATION_ATTRIBUTE}" must be greater than zero')
    delay = _time_attribute(element, ANIMATE_IN_DELAY_ATTRIBUTE)

    return StoryAnimationDef(
        target_id=element.get("id"),
        preset=preset_name,
        duration=duration or descriptor.duration,
        keyframes=descriptor.keyframes,
        delay=delay or 0,
        easing=element.get(ANIMATE_IN_TIMING_FUNCTION_ATTRIBUTE) or descriptor.easing,
        start_after_id=element.get(ANIMATE_IN_AFTER_ATTRIBUTE),
    )
