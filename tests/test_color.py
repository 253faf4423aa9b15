import pytest

from color import BLACK, WHITE, Color, from_rgb, lerp_color, scale_rgb, to_int_tuple, with_alpha


def test_lerp_color_blends_each_channel() -> None:
    blended = lerp_color(Color(255, 100, 100), Color(100, 100, 255), 0.5)
    assert tuple(blended) == pytest.approx((177.5, 100, 177.5, 255))


def test_lerp_color_clamps_amount() -> None:
    assert lerp_color(BLACK, WHITE, 1.7) == WHITE
    assert lerp_color(BLACK, WHITE, -0.2) == BLACK


def test_scale_rgb_keeps_alpha_and_caps_channels() -> None:
    scaled = scale_rgb(Color(200, 100, 0, 40), 1.5)
    assert tuple(scaled) == pytest.approx((255, 150, 0, 40))


def test_with_alpha_and_int_conversion() -> None:
    color = with_alpha(from_rgb((10, 20, 30)), 127.6)
    assert color.a == 127.6
    assert to_int_tuple(color) == (10, 20, 30, 128)
    assert to_int_tuple(Color(-3, 300, 12.4, 0)) == (0, 255, 12, 0)
