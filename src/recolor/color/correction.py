"""Correction delta and per-pixel correction.

A correction maps a selected color exactly onto a target color by taking
their difference in HSL or Lab and adding that difference to every pixel.
Both steps of one pass must use the same color space.

Example:
    >>> delta = compute_delta((30, 99, 151), (168, 6, 64), ColorSpace.CIELAB)
    >>> apply_correction((30, 99, 151), delta, ColorSpace.CIELAB)
    (168, 6, 64)
"""

from __future__ import annotations

import logging

from recolor.color.kernels import correct_pixel_numba, rgb_to_hsl_numba, rgb_to_lab_numba
from recolor.config.space import ColorSpace
from recolor.validators import validate_rgb, validate_triple

logger = logging.getLogger(__name__)


def _to_space(color: tuple[int, int, int], space: ColorSpace) -> tuple[float, float, float]:
    r, g, b = (float(c) for c in color)
    if space is ColorSpace.CIELAB:
        return rgb_to_lab_numba(r, g, b)
    return rgb_to_hsl_numba(r, g, b)


def compute_delta(
    selected,
    target,
    space: ColorSpace | str = ColorSpace.HSL,
) -> tuple[float, float, float]:
    """Compute the color-space offset that maps selected onto target.

    :param selected: RGB color that should end up as target
    :param target: Desired RGB color
    :param space: ColorSpace or "hsl" / "cielab"
    :returns: target - selected, component-wise, unclamped
    :raises InvalidInputError: On malformed colors or an unknown space
    """
    space = ColorSpace.parse(space)
    start = _to_space(validate_rgb(selected, "selected"), space)
    end = _to_space(validate_rgb(target, "target"), space)
    delta = (end[0] - start[0], end[1] - start[1], end[2] - start[2])
    logger.debug("[compute_delta] space=%s delta=%s", space.value, delta)
    return delta


def apply_correction(
    pixel,
    delta,
    space: ColorSpace | str = ColorSpace.HSL,
) -> tuple[int, int, int]:
    """Shift one RGB color by a delta computed with :func:`compute_delta`.

    HSL intermediates are passed to the inverse conversion unclamped; the
    final RGB is rounded half up and clamped to [0, 255] in both spaces.

    :param pixel: RGB color to correct
    :param delta: Offset in the given space
    :param space: Same space the delta was computed in
    :returns: Corrected (r, g, b)
    :raises InvalidInputError: On malformed input or an unknown space
    """
    space = ColorSpace.parse(space)
    r, g, b = validate_rgb(pixel, "pixel")
    d0, d1, d2 = validate_triple(delta, "delta")
    return correct_pixel_numba(float(r), float(g), float(b), d0, d1, d2, space.code)
