# color.py

from collections import namedtuple

import constants

# An RGBA color with channels in [0, 255].
Color = namedtuple('Color', ['r', 'g', 'b', 'a'], defaults=[255])

WHITE = Color(*constants.WHITE)
BLACK = Color(*constants.BLACK)


def from_rgb(rgb, alpha=255):
    """Builds a Color from an (R, G, B) tuple."""
    return Color(rgb[0], rgb[1], rgb[2], alpha)


def lerp_color(c1: Color, c2: Color, amount: float) -> Color:
    """
    Linearly interpolates each channel, alpha included.
    The amount is clamped to [0, 1] so callers can pass raw progress values.
    """
    t = min(1.0, max(0.0, amount))
    return Color(
        c1.r + (c2.r - c1.r) * t,
        c1.g + (c2.g - c1.g) * t,
        c1.b + (c2.b - c1.b) * t,
        c1.a + (c2.a - c1.a) * t,
    )


def scale_rgb(color: Color, factor: float) -> Color:
    """Multiplies the RGB channels (brightness pulse); alpha is kept, channels capped at 255."""
    return Color(
        min(255.0, color.r * factor),
        min(255.0, color.g * factor),
        min(255.0, color.b * factor),
        color.a,
    )


def with_alpha(color: Color, alpha: float) -> Color:
    return color._replace(a=alpha)


def to_int_tuple(color: Color):
    """Rounds and clamps the channels for pygame, which only accepts integers."""
    return tuple(int(min(255, max(0, round(c)))) for c in color)
