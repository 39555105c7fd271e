"""Numba-compiled color conversion kernels.

Scalar kernels convert one color and are shared by the public converters,
the per-pixel correction and the image driver. Array kernels run the same
scalar kernels over ``[N, 3]`` arrays with ``prange``.

Conversions run without ``fastmath``: the Lab pair must round-trip every
8-bit color exactly.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from recolor.config.space import SPACE_CIELAB
from recolor.constants import (
    ACHROMATIC_EPSILON,
    CHANNEL_MAX,
    CIE_EPSILON,
    CIE_KAPPA_SLOPE,
    CIE_OFFSET,
    D65_XN,
    D65_YN,
    D65_ZN,
    RGB_TO_XYZ,
    SRGB_GAMMA,
    SRGB_INVERSE_THRESHOLD,
    SRGB_LINEAR_SLOPE,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Matrices
# =============================================================================

_M = np.array(RGB_TO_XYZ, dtype=np.float64)
# Exact inverse so rgb -> lab -> rgb is the identity on 8-bit colors
_M_INV = np.linalg.inv(_M)

M00, M01, M02 = float(_M[0, 0]), float(_M[0, 1]), float(_M[0, 2])
M10, M11, M12 = float(_M[1, 0]), float(_M[1, 1]), float(_M[1, 2])
M20, M21, M22 = float(_M[2, 0]), float(_M[2, 1]), float(_M[2, 2])

I00, I01, I02 = float(_M_INV[0, 0]), float(_M_INV[0, 1]), float(_M_INV[0, 2])
I10, I11, I12 = float(_M_INV[1, 0]), float(_M_INV[1, 1]), float(_M_INV[1, 2])
I20, I21, I22 = float(_M_INV[2, 0]), float(_M_INV[2, 1]), float(_M_INV[2, 2])

ONE_THIRD = 1.0 / 3.0
TWO_THIRDS = 2.0 / 3.0
ONE_SIXTH = 1.0 / 6.0


# =============================================================================
# Clamping / rounding
# =============================================================================


@njit(cache=True, nogil=True)
def round_clamp_channel(value: float) -> int:
    """Round half up and clamp to [0, 255]. NaN maps to 0."""
    if not value > 0.0:
        return 0
    if value >= CHANNEL_MAX:
        return CHANNEL_MAX
    return int(math.floor(value + 0.5))


@njit(cache=True, nogil=True)
def round_even_clamp_channel(value: float) -> int:
    """Round half to even and clamp to [0, 255]. NaN maps to 0.

    Same rounding as a clamped 8-bit canvas store.
    """
    if not value > 0.0:
        return 0
    if value >= CHANNEL_MAX:
        return CHANNEL_MAX
    whole = math.floor(value)
    frac = value - whole
    if frac > 0.5 or (frac == 0.5 and whole % 2 == 1):
        whole += 1
    return int(whole)


# =============================================================================
# HSL
# =============================================================================


@njit(cache=True, nogil=True)
def rgb_to_hsl_numba(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert an RGB color in [0, 255] to HSL in [0, 1].

    :param r: Red
    :param g: Green
    :param b: Blue
    :returns: (h, s, l)
    """
    rn = r / CHANNEL_MAX
    gn = g / CHANNEL_MAX
    bn = b / CHANNEL_MAX

    cmax = max(rn, gn, bn)
    cmin = min(rn, gn, bn)
    l = (cmax + cmin) / 2.0
    d = cmax - cmin

    if d <= ACHROMATIC_EPSILON:
        return 0.0, 0.0, l

    if l > 0.5:
        s = d / (2.0 - cmax - cmin)
    else:
        s = d / (cmax + cmin)

    if cmax == rn:
        h = (gn - bn) / d + (6.0 if gn < bn else 0.0)
    elif cmax == gn:
        h = (bn - rn) / d + 2.0
    else:
        h = (rn - gn) / d + 4.0

    return h / 6.0, s, l


@njit(cache=True, nogil=True)
def hue_to_channel(p: float, q: float, t: float) -> float:
    """Evaluate one RGB channel of the HSL hexcone at hue position t."""
    t = t % 1.0
    if t < ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6.0
    return p


@njit(cache=True, nogil=True)
def hsl_to_rgb_numba(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to RGB in nominal [0, 255], unrounded and unclamped.

    :param h: Hue as a fraction of a turn
    :param s: Saturation
    :param l: Lightness
    :returns: (r, g, b) floats
    """
    if s == 0.0:
        v = l * CHANNEL_MAX
        return v, v, v

    if l < 0.5:
        q = l * (1.0 + s)
    else:
        q = l + s - l * s
    p = 2.0 * l - q

    r = hue_to_channel(p, q, h + ONE_THIRD)
    g = hue_to_channel(p, q, h)
    b = hue_to_channel(p, q, h - ONE_THIRD)
    return r * CHANNEL_MAX, g * CHANNEL_MAX, b * CHANNEL_MAX


# =============================================================================
# CIE L*a*b*
# =============================================================================


@njit(cache=True, nogil=True)
def srgb_to_linear(c: float) -> float:
    if c > SRGB_LINEAR_THRESHOLD:
        return ((c + SRGB_OFFSET) / (1.0 + SRGB_OFFSET)) ** SRGB_GAMMA
    return c / SRGB_LINEAR_SLOPE


@njit(cache=True, nogil=True)
def linear_to_srgb(c: float) -> float:
    if c > SRGB_INVERSE_THRESHOLD:
        return (1.0 + SRGB_OFFSET) * c ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return SRGB_LINEAR_SLOPE * c


@njit(cache=True, nogil=True)
def lab_f(t: float) -> float:
    if t > CIE_EPSILON:
        return t ** (1.0 / 3.0)
    return CIE_KAPPA_SLOPE * t + CIE_OFFSET


@njit(cache=True, nogil=True)
def lab_f_inv(f: float) -> float:
    cube = f * f * f
    if cube > CIE_EPSILON:
        return cube
    return (f - CIE_OFFSET) / CIE_KAPPA_SLOPE


@njit(cache=True, nogil=True)
def rgb_to_lab_numba(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert an RGB color in [0, 255] to CIE L*a*b* (D65).

    :param r: Red
    :param g: Green
    :param b: Blue
    :returns: (L, a, b)
    """
    lr = srgb_to_linear(r / CHANNEL_MAX)
    lg = srgb_to_linear(g / CHANNEL_MAX)
    lb = srgb_to_linear(b / CHANNEL_MAX)

    fx = lab_f((lr * M00 + lg * M01 + lb * M02) / D65_XN)
    fy = lab_f((lr * M10 + lg * M11 + lb * M12) / D65_YN)
    fz = lab_f((lr * M20 + lg * M21 + lb * M22) / D65_ZN)

    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


@njit(cache=True, nogil=True)
def lab_to_rgb_numba(cl: float, ca: float, cb: float) -> tuple[int, int, int]:
    """Convert CIE L*a*b* (D65) to an 8-bit RGB color.

    :param cl: L*
    :param ca: a*
    :param cb: b*
    :returns: (r, g, b) rounded and clamped to [0, 255]
    """
    fy = (cl + 16.0) / 116.0
    fx = ca / 500.0 + fy
    fz = fy - cb / 200.0

    x = D65_XN * lab_f_inv(fx)
    y = D65_YN * lab_f_inv(fy)
    z = D65_ZN * lab_f_inv(fz)

    r = linear_to_srgb(x * I00 + y * I01 + z * I02)
    g = linear_to_srgb(x * I10 + y * I11 + z * I12)
    b = linear_to_srgb(x * I20 + y * I21 + z * I22)

    return (
        round_clamp_channel(r * CHANNEL_MAX),
        round_clamp_channel(g * CHANNEL_MAX),
        round_clamp_channel(b * CHANNEL_MAX),
    )


# =============================================================================
# Per-pixel correction
# =============================================================================


@njit(cache=True, nogil=True)
def correct_pixel_numba(
    r: float,
    g: float,
    b: float,
    d0: float,
    d1: float,
    d2: float,
    space: int,
) -> tuple[int, int, int]:
    """Shift one pixel by a delta in the given space.

    :param r: Red
    :param g: Green
    :param b: Blue
    :param d0: Delta of the first component (hue or L*)
    :param d1: Delta of the second component (saturation or a*)
    :param d2: Delta of the third component (lightness or b*)
    :param space: SPACE_HSL or SPACE_CIELAB
    :returns: Corrected (r, g, b) clamped to [0, 255]; Lab rounds half up,
        HSL rounds half to even
    """
    if space == SPACE_CIELAB:
        cl, ca, cb = rgb_to_lab_numba(r, g, b)
        return lab_to_rgb_numba(cl + d0, ca + d1, cb + d2)

    h, s, l = rgb_to_hsl_numba(r, g, b)
    rr, gg, bb = hsl_to_rgb_numba(h + d0, s + d1, l + d2)
    return (
        round_even_clamp_channel(rr),
        round_even_clamp_channel(gg),
        round_even_clamp_channel(bb),
    )


# =============================================================================
# Array kernels
# =============================================================================


@njit(parallel=True, cache=True, nogil=True)
def rgb_to_hsl_array_numba(rgb: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """Convert [N, 3] RGB to [N, 3] HSL."""
    for i in prange(rgb.shape[0]):
        h, s, l = rgb_to_hsl_numba(rgb[i, 0], rgb[i, 1], rgb[i, 2])
        out[i, 0] = h
        out[i, 1] = s
        out[i, 2] = l


@njit(parallel=True, cache=True, nogil=True)
def hsl_to_rgb_array_numba(hsl: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """Convert [N, 3] HSL to [N, 3] unclamped RGB."""
    for i in prange(hsl.shape[0]):
        r, g, b = hsl_to_rgb_numba(hsl[i, 0], hsl[i, 1], hsl[i, 2])
        out[i, 0] = r
        out[i, 1] = g
        out[i, 2] = b


@njit(parallel=True, cache=True, nogil=True)
def rgb_to_lab_array_numba(rgb: NDArray[np.float64], out: NDArray[np.float64]) -> None:
    """Convert [N, 3] RGB to [N, 3] Lab."""
    for i in prange(rgb.shape[0]):
        cl, ca, cb = rgb_to_lab_numba(rgb[i, 0], rgb[i, 1], rgb[i, 2])
        out[i, 0] = cl
        out[i, 1] = ca
        out[i, 2] = cb


@njit(parallel=True, cache=True, nogil=True)
def lab_to_rgb_array_numba(lab: NDArray[np.float64], out: NDArray[np.uint8]) -> None:
    """Convert [N, 3] Lab to [N, 3] 8-bit RGB."""
    for i in prange(lab.shape[0]):
        r, g, b = lab_to_rgb_numba(lab[i, 0], lab[i, 1], lab[i, 2])
        out[i, 0] = r
        out[i, 1] = g
        out[i, 2] = b


# =============================================================================
# Warmup
# =============================================================================


def warmup_color_kernels() -> None:
    """Warmup Numba JIT compilation for color kernels."""
    rgb = np.random.rand(64, 3) * CHANNEL_MAX
    hsl = np.empty_like(rgb)
    lab = np.empty_like(rgb)
    back = np.empty_like(rgb)
    back8 = np.empty(rgb.shape, dtype=np.uint8)

    rgb_to_hsl_array_numba(rgb, hsl)
    hsl_to_rgb_array_numba(hsl, back)
    rgb_to_lab_array_numba(rgb, lab)
    lab_to_rgb_array_numba(lab, back8)
    correct_pixel_numba(30.0, 99.0, 151.0, 0.1, 0.1, 0.1, 0)
    correct_pixel_numba(30.0, 99.0, 151.0, 1.0, 1.0, 1.0, SPACE_CIELAB)

    logger.debug("Color Numba kernels warmed up")


# Warmup on import
warmup_color_kernels()
