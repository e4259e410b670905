"""Keyframe builders and geometry math used by the animation presets."""
from __future__ import annotations

from typing import List

from storyanim.animation.animation_types import Dimensions, KeyframeFrame, frame
from storyanim.utils.style import deg, format_number, px

# Starting rotation for rotate-in presets, signed by direction
ROTATE_IN_ANGLE = 120
WHOOSH_IN_START_SCALE = 0.15


def _translate(x: float, y: float) -> str:
    return f"translate({px(x)}, {px(y)})"


def translate2d(from_x: float, from_y: float, to_x: float, to_y: float) -> List[KeyframeFrame]:
    return [
        frame(transform=_translate(from_x, from_y)),
        frame(transform=_translate(to_x, to_y)),
    ]


def rotate_and_translate(
    from_x: float,
    from_y: float,
    to_x: float,
    to_y: float,
    direction: int,
) -> List[KeyframeFrame]:
    """Translate while unwinding a rotation.

    ``direction`` is -1 for entrances from the left and +1 from the right.
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be 1 or -1, got {direction!r}")
    return [
        frame(transform=f"{_translate(from_x, from_y)} rotate({deg(direction * ROTATE_IN_ANGLE)})"),
        frame(transform=f"{_translate(to_x, to_y)} rotate(0)"),
    ]


def scale_and_translate(
    from_x: float,
    from_y: float,
    to_x: float,
    to_y: float,
    scale: float,
) -> List[KeyframeFrame]:
    """Pan a uniformly scaled target; offsets are relative to its top-left corner."""
    factor = format_number(scale)
    scale3d = f"scale3d({factor}, {factor}, 1)"
    return [
        frame(
            transform=f"translate3d({px(from_x)}, {px(from_y)}, 0) {scale3d}",
            transformOrigin="left top",
        ),
        frame(
            transform=f"translate3d({px(to_x)}, {px(to_y)}, 0) {scale3d}",
            transformOrigin="left top",
        ),
    ]


def whoosh_in(from_x: float, from_y: float, to_x: float, to_y: float) -> List[KeyframeFrame]:
    return [
        frame(
            opacity=0,
            transform=f"{_translate(from_x, from_y)} scale({format_number(WHOOSH_IN_START_SCALE)})",
        ),
        frame(
            opacity=1,
            transform=f"{_translate(to_x, to_y)} scale(1)",
        ),
    ]


def calculate_target_scaling_factor(dimensions: Dimensions) -> float:
    """
    Smallest uniform factor for which the target covers the whole page.

    A target with no area cannot be scaled to cover anything, so the neutral
    factor 1 is returned instead.
    """
    if dimensions.target_width <= 0 or dimensions.target_height <= 0:
        return 1
    width_factor = dimensions.page_width / dimensions.target_width
    height_factor = dimensions.page_height / dimensions.target_height
    return max(width_factor, height_factor)
