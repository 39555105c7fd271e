"""Numba-optimized RGBA buffer correction kernel.

Each pixel is independent, so the buffer is split across threads with
``prange`` and the delta is passed in as read-only scalars.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from recolor.color.kernels import correct_pixel_numba
from recolor.config.space import SPACE_CIELAB, SPACE_HSL
from recolor.constants import BACKGROUND_MAX_SUM, BACKGROUND_MIN_SUM

logger = logging.getLogger(__name__)


@njit(parallel=True, cache=True, nogil=True)
def correct_rgba_numba(
    pixels: NDArray[np.uint8],
    d0: float,
    d1: float,
    d2: float,
    space: int,
    min_sum: int,
    max_sum: int,
) -> int:
    """Correct a flat RGBA buffer in place.

    Pixels whose R+G+B lies outside [min_sum, max_sum] are left alone.
    Alpha is never written.

    :param pixels: Flat uint8 buffer, length a multiple of 4
    :param d0: Delta of the first component
    :param d1: Delta of the second component
    :param d2: Delta of the third component
    :param space: SPACE_HSL or SPACE_CIELAB
    :param min_sum: Smallest channel sum that is corrected
    :param max_sum: Largest channel sum that is corrected
    :returns: Number of corrected pixels
    """
    n = pixels.shape[0] // 4
    corrected = 0
    for i in prange(n):
        base = i * 4
        r = np.int64(pixels[base])
        g = np.int64(pixels[base + 1])
        b = np.int64(pixels[base + 2])
        total = r + g + b
        if min_sum <= total <= max_sum:
            nr, ng, nb = correct_pixel_numba(float(r), float(g), float(b), d0, d1, d2, space)
            pixels[base] = nr
            pixels[base + 1] = ng
            pixels[base + 2] = nb
            corrected += 1
    return corrected


def warmup_image_kernels() -> None:
    """Warmup Numba JIT compilation for the buffer kernel."""
    pixels = (np.random.rand(16 * 4) * 255).astype(np.uint8)
    correct_rgba_numba(pixels, 0.1, 0.0, 0.0, SPACE_HSL, BACKGROUND_MIN_SUM, BACKGROUND_MAX_SUM)
    correct_rgba_numba(pixels, 5.0, 0.0, 0.0, SPACE_CIELAB, BACKGROUND_MIN_SUM, BACKGROUND_MAX_SUM)

    logger.debug("Image Numba kernels warmed up")


# Warmup on import
warmup_image_kernels()
