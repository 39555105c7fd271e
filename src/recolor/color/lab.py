"""RGB <-> CIE L*a*b* conversion (D65 white point).

The forward path linearizes sRGB, maps to XYZ with the Rec. 709 matrix,
normalizes by the D65 white point and applies the CIE nonlinearity. The
inverse path undoes each step and finishes with rounding and clamping, so
``lab_to_rgb(*rgb_to_lab(r, g, b)) == (r, g, b)`` for every 8-bit color.
"""

from __future__ import annotations

import numpy as np

from recolor.color.kernels import (
    lab_to_rgb_array_numba,
    lab_to_rgb_numba,
    rgb_to_lab_array_numba,
    rgb_to_lab_numba,
)
from recolor.validators import validate_channel, validate_color_array, validate_number


def rgb_to_lab(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert an 8-bit RGB color to CIE L*a*b*.

    :param r: Red in [0, 255]
    :param g: Green in [0, 255]
    :param b: Blue in [0, 255]
    :returns: (L, a, b) with L in [0, 100]
    :raises InvalidInputError: If a channel is not an integer in [0, 255]
    """
    r = validate_channel(r, "r")
    g = validate_channel(g, "g")
    b = validate_channel(b, "b")
    return rgb_to_lab_numba(float(r), float(g), float(b))


def lab_to_rgb(cl: float, ca: float, cb: float) -> tuple[int, int, int]:
    """Convert CIE L*a*b* to an 8-bit RGB color.

    Out-of-gamut colors are clamped per channel.

    :param cl: L*
    :param ca: a*
    :param cb: b*
    :returns: (r, g, b) ints in [0, 255]
    :raises InvalidInputError: If a component is not a finite number
    """
    cl = validate_number(cl, "L")
    ca = validate_number(ca, "a")
    cb = validate_number(cb, "b")
    return lab_to_rgb_numba(cl, ca, cb)


def rgb_to_lab_array(rgb: np.ndarray) -> np.ndarray:
    """Convert an [N, 3] array of 8-bit colors to Lab.

    :param rgb: Colors with channels in [0, 255]
    :returns: float64 array [N, 3]
    """
    rgb = validate_color_array(rgb, "rgb", channels=True)
    out = np.empty_like(rgb)
    rgb_to_lab_array_numba(rgb, out)
    return out


def lab_to_rgb_array(lab: np.ndarray) -> np.ndarray:
    """Convert an [N, 3] Lab array to 8-bit colors.

    :param lab: Lab values
    :returns: uint8 array [N, 3]
    """
    lab = validate_color_array(lab, "lab")
    out = np.empty(lab.shape, dtype=np.uint8)
    lab_to_rgb_array_numba(lab, out)
    return out
