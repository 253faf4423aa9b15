import pytest

import constants
from layout import compute_dimensions, initialize_radii, layout_for_viewport


@pytest.mark.parametrize(
    "viewport",
    [(1, 1), (40, 40), (100, 80), (320, 568), (840, 640), (1920, 1080), (3840, 2160), (10000, 50)],
)
def test_responsive_scale_is_clamped(viewport) -> None:
    _, _, scale = compute_dimensions(*viewport)
    assert constants.MIN_RESPONSIVE_SCALE <= scale <= constants.MAX_RESPONSIVE_SCALE


def test_canvas_fits_viewport_and_keeps_aspect() -> None:
    width, height, scale = compute_dimensions(540, 1000)
    assert width == pytest.approx(500.0)
    assert height == pytest.approx(375.0)
    assert scale == pytest.approx(0.625)


def test_large_viewport_never_upscales_canvas() -> None:
    width, height, scale = compute_dimensions(4000, 3000)
    assert (width, height) == (constants.BASE_WIDTH, constants.BASE_HEIGHT)
    assert scale == pytest.approx(1.0)


def test_gap_size_for_unit_scale() -> None:
    geometry = initialize_radii(1.0)
    assert geometry.dot_radius == pytest.approx(4.0)
    assert geometry.max_radius == pytest.approx(300.0)
    assert geometry.layer_thickness == pytest.approx(8.0)
    assert geometry.gap_size == pytest.approx((300 - 4 - 4 * 8) / 5)
    assert geometry.gap_size == pytest.approx(52.8)


@pytest.mark.parametrize("scale", [0.4, 0.55, 1.0, 1.23, 1.5])
def test_base_radii_layout(scale) -> None:
    geometry = initialize_radii(scale)
    radii = geometry.base_radii

    assert len(radii) == constants.NUM_LAYERS
    assert all(b > a for a, b in zip(radii, radii[1:]))
    assert radii[-1] == pytest.approx(geometry.max_radius)
    assert radii[0] - geometry.dot_radius == pytest.approx(geometry.gap_size)
    for i in range(1, constants.NUM_LAYERS):
        step = radii[i] - radii[i - 1]
        assert step == pytest.approx(geometry.gap_size + geometry.layer_thickness)


def test_center_is_middle_of_canvas() -> None:
    geometry = layout_for_viewport(840, 640)
    assert geometry.center_x == pytest.approx(geometry.canvas_width / 2)
    assert geometry.center_y == pytest.approx(geometry.canvas_height / 2)


def test_layout_is_idempotent() -> None:
    assert layout_for_viewport(1024, 768) == layout_for_viewport(1024, 768)
