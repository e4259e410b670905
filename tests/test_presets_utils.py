import pytest

from storyanim.animation.animation_types import Dimensions
from storyanim.animation.presets_utils import (
    calculate_target_scaling_factor,
    rotate_and_translate,
    scale_and_translate,
    translate2d,
    whoosh_in,
)


def _dims(**overrides) -> Dimensions:
    values = dict(target_x=0, target_y=0, target_width=500, target_height=500, page_width=1000, page_height=800)
    values.update(overrides)
    return Dimensions(**values)


def test_translate2d_two_frames():
    frames = translate2d(-150, 0, 0, 0)
    assert [f.get("transform") for f in frames] == ["translate(-150px, 0px)", "translate(0px, 0px)"]


def test_translate2d_keeps_fractional_pixels():
    frames = translate2d(12.5, -0.25, 0, 0)
    assert frames[0].get("transform") == "translate(12.5px, -0.25px)"


def test_rotate_and_translate_direction_sign():
    left = rotate_and_translate(-150, 0, 0, 0, -1)
    right = rotate_and_translate(350, 0, 0, 0, 1)
    assert left[0].get("transform") == "translate(-150px, 0px) rotate(-120deg)"
    assert right[0].get("transform") == "translate(350px, 0px) rotate(120deg)"
    assert left[-1].get("transform") == "translate(0px, 0px) rotate(0)"


def test_rotate_and_translate_rejects_bad_direction():
    with pytest.raises(ValueError):
        rotate_and_translate(0, 0, 0, 0, 0)


def test_scale_and_translate_uniform_scale():
    frames = scale_and_translate(500, 212.5, 520, 212.5, 1.25)
    assert frames[0].get("transform") == "translate3d(500px, 212.5px, 0) scale3d(1.25, 1.25, 1)"
    assert frames[1].get("transform") == "translate3d(520px, 212.5px, 0) scale3d(1.25, 1.25, 1)"
    assert all(f.get("transformOrigin") == "left top" for f in frames)


def test_whoosh_in_fades_and_grows():
    frames = whoosh_in(-150, 0, 0, 0)
    assert frames[0].get("opacity") == 0
    assert frames[0].get("transform") == "translate(-150px, 0px) scale(0.15)"
    assert frames[-1].get("opacity") == 1
    assert frames[-1].get("transform") == "translate(0px, 0px) scale(1)"


def test_scaling_factor_covers_page():
    dims = _dims()
    factor = calculate_target_scaling_factor(dims)
    assert factor == 2
    scaled = dims.scaled(factor)
    assert scaled.target_width >= dims.page_width
    assert scaled.target_height >= dims.page_height


def test_scaling_factor_for_tall_target():
    dims = _dims(target_width=100, target_height=1000, page_width=400, page_height=800)
    factor = calculate_target_scaling_factor(dims)
    assert factor == 4
    assert dims.target_height * factor >= dims.page_height


@pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (0, 0)])
def test_scaling_factor_degenerate_target(width, height):
    assert calculate_target_scaling_factor(_dims(target_width=width, target_height=height)) == 1


def test_scaled_returns_a_copy():
    dims = _dims()
    scaled = dims.scaled(2)
    assert dims.target_width == 500
    assert scaled.target_width == 1000
    assert scaled.page_width == dims.page_width
