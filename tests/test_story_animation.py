from xml.etree import ElementTree as ET

import pytest

from storyanim.animation.animation_presets import resolve_preset
from storyanim.animation.animation_types import Dimensions, PresetConfigurationError
from storyanim.animation.story_animation import (
    LayoutRect,
    animation_def_from_element,
    dimensions_from_rects,
    options_from_attributes,
)


def _element(attrs: str) -> ET.Element:
    return ET.fromstring(f"<amp-img {attrs}/>")


def test_dimensions_relative_to_page():
    dims = dimensions_from_rects(LayoutRect(100, 50, 400, 800), LayoutRect(150, 70, 120, 60))
    assert dims == Dimensions(
        target_x=50, target_y=20, target_width=120, target_height=60, page_width=400, page_height=800
    )


def test_options_from_attributes():
    options = options_from_attributes(_element('scale-start="1.5" scale-end="4" translate-x="12"'))
    assert options.scale_start == 1.5
    assert options.scale_end == 4
    assert options.translate_x == 12
    assert options.translate_y is None


def test_definition_uses_preset_defaults():
    anim = animation_def_from_element(_element('id="title" animate-in="fly-in-left"'))
    assert anim.target_id == "title"
    assert anim.duration == 400
    assert anim.delay == 0
    assert anim.easing == "cubic-bezier(0.0, 0.0, 0.2, 1)"
    frames = anim.concrete_frames(Dimensions(50, 0, 100, 40, 400, 800))
    assert frames[0].get("transform") == "translate(-150px, 0px)"


def test_definition_attribute_overrides():
    anim = animation_def_from_element(_element(
        'id="bg" animate-in="zoom-in" scale-start="1" scale-end="2" '
        'animate-in-duration="2s" animate-in-delay="250ms" '
        'animate-in-timing-function="ease-out" animate-in-after="title"'
    ))
    assert anim.duration == 2000
    assert anim.delay == 250
    assert anim.easing == "ease-out"
    assert anim.start_after_id == "title"
    assert [f.get("transform") for f in anim.concrete_frames()] == ["scale(1)", "scale(2)"]


def test_generated_definition_needs_dimensions():
    anim = animation_def_from_element(_element('animate-in="drop"'))
    with pytest.raises(ValueError):
        anim.concrete_frames()


def test_element_without_animation():
    assert animation_def_from_element(_element('id="plain"')) is None


def test_unknown_preset_is_skipped(caplog):
    assert animation_def_from_element(_element('id="x" animate-in="spin"')) is None
    assert "spin" in caplog.text


def test_invalid_zoom_attributes_raise():
    with pytest.raises(PresetConfigurationError):
        animation_def_from_element(_element('animate-in="zoom-in" scale-start="3" scale-end="2"'))


@pytest.mark.parametrize("value", ["fast", "2", "0s"])
def test_invalid_duration_raises(value):
    with pytest.raises(PresetConfigurationError):
        animation_def_from_element(_element(f'animate-in="fade-in" animate-in-duration="{value}"'))


@pytest.mark.parametrize("preset", ["drop", "pan-left", "zoom-out", "rotate-in-right"])
def test_definition_frames_match_descriptor_frames(preset):
    dims = Dimensions(50, 20, 100, 30, 400, 800)
    anim = animation_def_from_element(_element(f'animate-in="{preset}"'))
    descriptor = resolve_preset(preset)
    assert [f.to_dict() for f in anim.concrete_frames(dims)] == [f.to_dict() for f in descriptor.frames(dims)]
    if descriptor.is_generated:
        with pytest.raises(ValueError, match="require dimensions"):
            anim.concrete_frames()
        with pytest.raises(ValueError, match="require dimensions"):
            descriptor.frames()
