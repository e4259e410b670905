import pytest

from storyanim.animation.animation_presets import resolve_preset
from storyanim.animation.animation_types import Dimensions, frame
from storyanim.animation.css_keyframes import (
    build_animation_rule,
    build_keyframes_css,
    compute_offsets,
    descriptor_to_css,
    keyframes_name,
)


def test_compute_offsets_spreads_missing_values():
    frames = [frame(opacity=0), frame(opacity=0.5), frame(opacity=1)]
    assert compute_offsets(frames) == [0.0, 0.5, 1.0]


def test_compute_offsets_between_known_values():
    frames = [frame(offset=0, opacity=0), frame(opacity=1), frame(opacity=0), frame(offset=0.6, opacity=1), frame(opacity=0)]
    assert compute_offsets(frames) == pytest.approx([0.0, 0.2, 0.4, 0.6, 1.0])


def test_keyframes_css_for_drop():
    frames = resolve_preset("drop").frames(Dimensions(0, 0, 100, 100, 400, 800))
    css = build_keyframes_css("story-anim-drop", frames)
    assert css.startswith("@keyframes story-anim-drop {")
    assert "  0% { transform: translateY(-160px); animation-timing-function: cubic-bezier(.75,.05,.86,.08); }" in css
    assert "  52% { transform: translateY(-96px);" in css
    assert css.endswith("}")


def test_keyframes_css_kebab_case_properties():
    frames = resolve_preset("pan-left").frames(Dimensions(0, 0, 500, 500, 1000, 800))
    css = build_keyframes_css("pan", frames)
    assert "transform-origin: left top" in css
    assert "100% {" in css


def test_animation_rule():
    rule = build_animation_rule("#hero", "story-anim-fade-in", 400, "ease-in", delay=200)
    assert rule == "#hero { animation: story-anim-fade-in 400ms ease-in 200ms both; }"
    assert "linear" in build_animation_rule(".title", "drop", 1600)


@pytest.mark.parametrize("selector", ["", "   ", "a {} b", "#hero; color: red", "#", "div > img", "#1st", "img { x: y }"])
def test_animation_rule_rejects_bad_selector(selector):
    with pytest.raises(ValueError):
        build_animation_rule(selector, "x", 100)


@pytest.mark.parametrize("selector", ["#hero", ".title", "amp-img", "amp-story-page img.hero", "#page .layer #bg"])
def test_animation_rule_accepts_descendant_selectors(selector):
    assert build_animation_rule(selector, "x", 100).startswith(f"{selector} {{ animation: x 100ms")


def test_descriptor_to_css():
    css = descriptor_to_css("#bg", keyframes_name("story-anim", "zoom-in"), resolve_preset("zoom-in"))
    assert "@keyframes story-anim-zoom-in" in css
    assert "0% { transform: scale(1); }" in css
    assert "100% { transform: scale(3); }" in css
    assert css.splitlines()[-1] == "#bg { animation: story-anim-zoom-in 1000ms linear 0ms both; }"
