"""Serialize resolved presets into CSS @keyframes and animation rules."""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from storyanim.animation.animation_types import AnimationDescriptor, Dimensions, KeyframeFrame
from storyanim.utils.style import css_property_name, format_number

logger = logging.getLogger(__name__)

# One compound selector: optional tag name followed by #id / .class parts
SELECTOR_PART_RE = re.compile(r"^(?:[a-zA-Z][a-zA-Z0-9-]*|(?=[#.]))(?:[#.][a-zA-Z_][a-zA-Z0-9_-]*)*$")
KEYFRAMES_NAME_RE = re.compile(r"[^A-Za-z0-9_-]")


def _is_valid_css_selector(selector: str) -> bool:
    """Accept descendant chains of tag, #id and .class parts (e.g. "amp-story-page img.hero")."""
    parts = (selector or "").split()
    return bool(parts) and all(SELECTOR_PART_RE.match(part) for part in parts)


def keyframes_name(prefix: str, preset: str) -> str:
    return KEYFRAMES_NAME_RE.sub("_", f"{prefix}-{preset}")


def compute_offsets(frames: Sequence[KeyframeFrame]) -> List[float]:
    """
    Fill in missing frame offsets.

    The first frame defaults to 0 and the last to 1; frames without an offset
    are spaced evenly between their nearest neighbours that have one.
    """
    count = len(frames)
    if count == 0:
        return []
    offsets: List[Optional[float]] = [kf.offset for kf in frames]
    if offsets[0] is None:
        offsets[0] = 0.0
    if count > 1 and offsets[-1] is None:
        offsets[-1] = 1.0

    start = 0
    for index in range(1, count):
        if offsets[index] is None:
            continue
        gap = index - start
        for step in range(1, gap):
            offsets[start + step] = offsets[start] + (offsets[index] - offsets[start]) * step / gap
        start = index
    return [float(o) for o in offsets]


def _percent(offset: float) -> str:
    return f"{format_number(round(offset * 100, 4))}%"


def build_keyframes_css(name: str, frames: Sequence[KeyframeFrame]) -> str:
    """Generate an @keyframes block; per-frame easing maps to animation-timing-function."""
    lines: List[str] = [f"@keyframes {name} {{"]
    for offset, kf in zip(compute_offsets(frames), frames):
        decls = [f"{css_property_name(prop)}: {value}" for prop, value in kf.properties.items()]
        if kf.easing:
            decls.append(f"animation-timing-function: {kf.easing}")
        lines.append(f"  {_percent(offset)} {{ {'; '.join(decls)}; }}")
    lines.append("}")
    return "\n".join(lines)


def build_animation_rule(
    selector: str,
    name: str,
    duration: int,
    easing: Optional[str] = None,
    delay: int = 0,
) -> str:
    if not _is_valid_css_selector(selector):
        logger.warning(f"Invalid selector for animation rule: {selector}")
        raise ValueError(f"Invalid CSS selector: {selector!r}")
    return f"{selector} {{ animation: {name} {duration}ms {easing or 'linear'} {delay}ms both; }}"


def descriptor_to_css(
    selector: str,
    name: str,
    descriptor: AnimationDescriptor,
    dimensions: Optional[Dimensions] = None,
    delay: int = 0,
) -> str:
    """Render a resolved descriptor (and target geometry, if it needs it) to CSS."""
    frames = descriptor.frames(dimensions)
    return "\n".join([
        build_keyframes_css(name, frames),
        build_animation_rule(selector, name, descriptor.duration, descriptor.easing, delay),
    ])
