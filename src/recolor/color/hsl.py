"""RGB <-> HSL conversion.

Hue, saturation and lightness are fractions in [0, 1]; hue is a fraction
of a full turn, not degrees.

Example:
    >>> rgb_to_hsl(255, 0, 0)
    (0.0, 1.0, 0.5)
    >>> hsl_to_rgb(0.0, 1.0, 0.5)
    (255.0, 0.0, 0.0)
"""

from __future__ import annotations

import numpy as np

from recolor.color.kernels import (
    hsl_to_rgb_array_numba,
    hsl_to_rgb_numba,
    rgb_to_hsl_array_numba,
    rgb_to_hsl_numba,
)
from recolor.validators import validate_channel, validate_color_array, validate_number


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert an 8-bit RGB color to HSL.

    A color with equal channels is achromatic and gets hue and saturation 0.

    :param r: Red in [0, 255]
    :param g: Green in [0, 255]
    :param b: Blue in [0, 255]
    :returns: (h, s, l), each in [0, 1]
    :raises InvalidInputError: If a channel is not an integer in [0, 255]
    """
    r = validate_channel(r, "r")
    g = validate_channel(g, "g")
    b = validate_channel(b, "b")
    return rgb_to_hsl_numba(float(r), float(g), float(b))


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to RGB.

    The result is neither rounded nor clamped. Hue wraps around the color
    wheel; saturation and lightness outside [0, 1] extrapolate and can give
    channels outside [0, 255].

    :param h: Hue as a fraction of a turn
    :param s: Saturation
    :param l: Lightness
    :returns: (r, g, b) floats, nominally in [0, 255]
    :raises InvalidInputError: If a component is not a finite number
    """
    h = validate_number(h, "h")
    s = validate_number(s, "s")
    l = validate_number(l, "l")
    return hsl_to_rgb_numba(h, s, l)


def rgb_to_hsl_array(rgb: np.ndarray) -> np.ndarray:
    """Convert an [N, 3] array of 8-bit colors to HSL.

    :param rgb: Colors with channels in [0, 255], any numeric dtype
    :returns: float64 array [N, 3]
    """
    rgb = validate_color_array(rgb, "rgb", channels=True)
    out = np.empty_like(rgb)
    rgb_to_hsl_array_numba(rgb, out)
    return out


def hsl_to_rgb_array(hsl: np.ndarray) -> np.ndarray:
    """Convert an [N, 3] HSL array to unrounded, unclamped RGB.

    :param hsl: HSL values
    :returns: float64 array [N, 3]
    """
    hsl = validate_color_array(hsl, "hsl")
    out = np.empty_like(hsl)
    hsl_to_rgb_array_numba(hsl, out)
    return out
