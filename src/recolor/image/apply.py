"""Apply a color correction to an RGBA pixel buffer.

The driver validates its arguments once, computes the delta once and hands
the buffer to the parallel kernel, which rewrites R, G and B of every
foreground pixel in place. Near-black and near-white pixels (channel sum
below 20 or above 745) are treated as background and left untouched, as is
every alpha byte.
"""

from __future__ import annotations

import logging

import numpy as np

from recolor.color.correction import compute_delta
from recolor.config.correction import CORRECTION_CONFIG
from recolor.config.space import ColorSpace
from recolor.constants import CHANNELS_PER_PIXEL
from recolor.errors import InvalidInputError, InvalidInputKind
from recolor.image.kernels import correct_rgba_numba
from recolor.validators import validate_dimension, validate_rgb, validate_triple

logger = logging.getLogger(__name__)


def as_pixel_array(pixels) -> np.ndarray:
    """Wrap a byte buffer as a uint8 array without copying.

    NumPy arrays are returned unchanged; dtype and layout are checked by
    :func:`rgba_view`.

    :raises InvalidInputError: If pixels does not expose the buffer protocol
    """
    if isinstance(pixels, np.ndarray):
        return pixels
    try:
        return np.frombuffer(pixels, dtype=np.uint8)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            InvalidInputKind.BUFFER_TYPE,
            f"pixels must be a writable byte buffer, got {type(pixels).__name__}",
        ) from e


def rgba_view(pixels, width: int, height: int) -> np.ndarray:
    """Get a flat, writable uint8 view of an RGBA buffer without copying.

    Accepts a ``bytearray``, a writable ``memoryview`` (or any writable
    object exposing the buffer protocol) or a C-contiguous ``uint8``
    ``numpy.ndarray`` of any shape.

    :param pixels: Interleaved RGBA buffer
    :param width: Image width in pixels
    :param height: Image height in pixels
    :returns: 1-D uint8 array sharing memory with pixels
    :raises InvalidInputError: If the buffer cannot be corrected in place
    """
    width = validate_dimension(width, "width")
    height = validate_dimension(height, "height")

    arr = as_pixel_array(pixels)
    if arr.dtype != np.uint8:
        raise InvalidInputError(
            InvalidInputKind.BUFFER_TYPE,
            f"pixels must have dtype uint8, got {arr.dtype}",
        )
    if not arr.flags["C_CONTIGUOUS"]:
        raise InvalidInputError(InvalidInputKind.BUFFER_TYPE, "pixels must be C-contiguous")
    view = arr.reshape(-1)

    if not view.flags["WRITEABLE"]:
        raise InvalidInputError(InvalidInputKind.BUFFER_TYPE, "pixels buffer is read-only")

    if view.size % CHANNELS_PER_PIXEL != 0:
        raise InvalidInputError(
            InvalidInputKind.BUFFER_LENGTH,
            f"pixels length {view.size} is not a multiple of {CHANNELS_PER_PIXEL}",
        )

    expected = width * height * CHANNELS_PER_PIXEL
    if view.size != expected:
        raise InvalidInputError(
            InvalidInputKind.BUFFER_SIZE_MISMATCH,
            f"pixels length {view.size} does not match {width}x{height} RGBA ({expected})",
        )
    return view


def correct_image(
    pixels,
    width: int,
    height: int,
    selected,
    target,
    space: ColorSpace | str = ColorSpace.HSL,
):
    """Recolor an RGBA buffer so that selected maps onto target.

    :param pixels: Interleaved RGBA uint8 buffer, modified in place
    :param width: Image width in pixels
    :param height: Image height in pixels
    :param selected: RGB color picked from the image
    :param target: RGB color it should become
    :param space: ColorSpace or "hsl" / "cielab"
    :returns: The same pixels object
    :raises InvalidInputError: On a malformed buffer, colors or space

    Example:
        >>> buf = bytearray([30, 99, 151, 255])
        >>> correct_image(buf, 1, 1, (30, 99, 151), (168, 6, 64), "hsl")
        bytearray(b'\\xa8\\x06@\\xff')
    """
    space = ColorSpace.parse(space)
    selected = validate_rgb(selected, "selected")
    target = validate_rgb(target, "target")
    view = rgba_view(pixels, width, height)

    if selected == target:
        logger.debug("[correct_image] Selected equals target, skipping")
        return pixels

    delta = compute_delta(selected, target, space)
    _correct_view(view, delta, space)
    return pixels


def apply_delta(
    pixels,
    width: int,
    height: int,
    delta,
    space: ColorSpace | str = ColorSpace.HSL,
):
    """Shift every foreground pixel of an RGBA buffer by a precomputed delta.

    :param pixels: Interleaved RGBA uint8 buffer, modified in place
    :param width: Image width in pixels
    :param height: Image height in pixels
    :param delta: Offset from :func:`~recolor.color.correction.compute_delta`
    :param space: Space the delta was computed in
    :returns: The same pixels object
    """
    space = ColorSpace.parse(space)
    delta = validate_triple(delta, "delta")
    view = rgba_view(pixels, width, height)
    _correct_view(view, delta, space)
    return pixels


def _correct_view(
    view: np.ndarray, delta: tuple[float, float, float], space: ColorSpace
) -> int:
    d0, d1, d2 = delta
    fg = CORRECTION_CONFIG.foreground_sum
    corrected = correct_rgba_numba(
        view, d0, d1, d2, space.code, int(fg.min_value), int(fg.max_value)
    )
    logger.info(
        "[correct_image] Corrected %d of %d pixels (space=%s)",
        corrected,
        view.size // CHANNELS_PER_PIXEL,
        space.value,
    )
    return corrected


def pick_color(pixels, width: int, height: int, x: int, y: int) -> tuple[int, int, int]:
    """Read the RGB color of one pixel.

    :param pixels: Interleaved RGBA uint8 buffer
    :param width: Image width in pixels
    :param height: Image height in pixels
    :param x: Column, 0 <= x < width
    :param y: Row, 0 <= y < height
    :returns: (r, g, b)
    :raises InvalidInputError: If the buffer is malformed or (x, y) is outside it
    """
    view = rgba_view(pixels, width, height)
    for value, limit, name in ((x, width, "x"), (y, height, "y")):
        is_index = isinstance(value, int | np.integer) and not isinstance(value, bool)
        if not is_index or not 0 <= value < limit:
            raise InvalidInputError(
                InvalidInputKind.COORDINATE_OUT_OF_RANGE,
                f"{name}={value!r} is outside valid range [0, {limit})",
            )
    base = (int(y) * width + int(x)) * CHANNELS_PER_PIXEL
    return int(view[base]), int(view[base + 1]), int(view[base + 2])
