"""Story Animation Module.

This module resolves named animation presets into keyframe descriptors.

Components:
- animation_types: descriptor, keyframe and geometry data structures
- presets_utils: keyframe builders and the page-cover scaling math
- animation_presets: the preset registry and full-bleed styling
- story_animation: animation definitions read from element attributes
- css_keyframes: CSS serialization of resolved presets
"""

from storyanim.animation.animation_types import (
    AnimationDescriptor,
    Dimensions,
    GeneratedKeyframes,
    KeyframeFrame,
    PresetConfigurationError,
    PresetOptions,
    StaticKeyframes,
    resolve_frames,
)

from storyanim.animation.presets_utils import (
    calculate_target_scaling_factor,
    rotate_and_translate,
    scale_and_translate,
    translate2d,
    whoosh_in,
)

from storyanim.animation.animation_presets import (
    FULL_BLEED_ANIMATION_NAMES,
    apply_preset_style,
    find_parent,
    is_full_bleed,
    preset_names,
    resolve_preset,
)

from storyanim.animation.story_animation import (
    LayoutRect,
    StoryAnimationDef,
    animation_def_from_element,
    dimensions_from_rects,
    options_from_attributes,
)

from storyanim.animation.css_keyframes import (
    build_animation_rule,
    build_keyframes_css,
    compute_offsets,
    descriptor_to_css,
)

__all__ = [
    # Types
    "AnimationDescriptor",
    "Dimensions",
    "GeneratedKeyframes",
    "KeyframeFrame",
    "PresetConfigurationError",
    "PresetOptions",
    "StaticKeyframes",
    "resolve_frames",
    # Geometry
    "calculate_target_scaling_factor",
    "rotate_and_translate",
    "scale_and_translate",
    "translate2d",
    "whoosh_in",
    # Registry
    "FULL_BLEED_ANIMATION_NAMES",
    "apply_preset_style",
    "find_parent",
    "is_full_bleed",
    "preset_names",
    "resolve_preset",
    # Element definitions
    "LayoutRect",
    "StoryAnimationDef",
    "animation_def_from_element",
    "dimensions_from_rects",
    "options_from_attributes",
    # CSS
    "build_animation_rule",
    "build_keyframes_css",
    "compute_offsets",
    "descriptor_to_css",
]
