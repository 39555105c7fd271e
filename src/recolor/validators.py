"""Precondition checks for the public API.

Checks run once per public call and never inside the compiled kernels.
Every failure raises :class:`~recolor.errors.InvalidInputError` with a
message naming the parameter and the offending value.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Integral, Real

import numpy as np

from recolor.config.correction import CORRECTION_CONFIG
from recolor.constants import CHANNEL_MAX
from recolor.errors import InvalidInputError, InvalidInputKind


def validate_number(value, name: str) -> float:
    """Check that value is a finite real number.

    :param value: Value to check
    :param name: Parameter name used in the error message
    :returns: Value as float
    :raises InvalidInputError: NOT_A_COLOR for non-numbers, NON_FINITE for nan/inf
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            InvalidInputKind.NOT_A_COLOR,
            f"{name} must be a number, got {type(value).__name__}",
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(InvalidInputKind.NON_FINITE, f"{name}={value} is not finite")
    return value


def validate_channel(value, name: str) -> int:
    """Check that value is an integer-valued 8-bit channel.

    :param value: Channel value, expected in [0, 255]
    :param name: Parameter name used in the error message
    :returns: Channel as int
    :raises InvalidInputError: If the value is not an integral number in range
    """
    number = validate_number(value, name)
    if not number.is_integer():
        raise InvalidInputError(
            InvalidInputKind.RGB_OUT_OF_RANGE,
            f"{name}={value} is not an integer channel value",
        )
    if not CORRECTION_CONFIG.channel.contains(number):
        raise InvalidInputError(
            InvalidInputKind.RGB_OUT_OF_RANGE,
            f"{name}={value} is outside valid range [0, {CHANNEL_MAX}]",
        )
    return int(number)


def validate_triple(values, name: str) -> tuple[float, float, float]:
    """Check that values is a sequence of three finite numbers."""
    if isinstance(values, str | bytes) or not isinstance(values, Sequence | np.ndarray):
        raise InvalidInputError(
            InvalidInputKind.NOT_A_COLOR,
            f"{name} must be a sequence of 3 numbers, got {type(values).__name__}",
        )
    if len(values) != 3:
        raise InvalidInputError(
            InvalidInputKind.NOT_A_COLOR,
            f"{name} must have 3 components, got {len(values)}",
        )
    return tuple(validate_number(v, f"{name}[{i}]") for i, v in enumerate(values))


def validate_rgb(color, name: str = "color") -> tuple[int, int, int]:
    """Check an RGB triple and normalize it to a tuple of ints.

    :param color: Sequence of three channels in [0, 255]
    :param name: Parameter name used in the error message
    :returns: (r, g, b) as ints
    :raises InvalidInputError: If the color is malformed or out of range
    """
    validate_triple(color, name)
    return tuple(validate_channel(v, f"{name}[{i}]") for i, v in enumerate(color))


def validate_dimension(value, name: str) -> int:
    """Check that an image dimension is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
        raise InvalidInputError(
            InvalidInputKind.INVALID_DIMENSIONS,
            f"{name} must be a non-negative integer, got {value!r}",
        )
    return int(value)


def validate_color_array(values, name: str, channels: bool = False) -> np.ndarray:
    """Check an [N, 3] array of colors and return it as contiguous float64.

    :param values: Array-like of shape [N, 3]
    :param name: Parameter name used in the error message
    :param channels: If True, also require 8-bit channel values in [0, 255]
    :returns: C-contiguous float64 array (a copy when conversion is needed)
    :raises InvalidInputError: On wrong shape, non-finite or out-of-range values
    """
    try:
        arr = np.ascontiguousarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            InvalidInputKind.NOT_A_COLOR, f"{name} is not a numeric array: {e}"
        ) from e
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise InvalidInputError(
            InvalidInputKind.NOT_A_COLOR,
            f"{name} must have shape [N, 3], got {list(arr.shape)}",
        )
    if not np.isfinite(arr).all():
        raise InvalidInputError(InvalidInputKind.NON_FINITE, f"{name} contains non-finite values")
    if channels:
        spec = CORRECTION_CONFIG.channel
        if arr.size and (arr.min() < spec.min_value or arr.max() > spec.max_value):
            raise InvalidInputError(
                InvalidInputKind.RGB_OUT_OF_RANGE,
                f"{name} has values outside valid range [{spec.min_value}, {spec.max_value}]",
            )
        if not np.array_equal(arr, np.round(arr)):
            raise InvalidInputError(
                InvalidInputKind.RGB_OUT_OF_RANGE,
                f"{name} has non-integer channel values",
            )
    return arr
