"""Exceptions raised at the public API boundary."""

from __future__ import annotations

from enum import Enum


class InvalidInputKind(Enum):
    """Which precondition a rejected input violated."""

    NON_FINITE = "non_finite"
    RGB_OUT_OF_RANGE = "rgb_out_of_range"
    NOT_A_COLOR = "not_a_color"
    BUFFER_LENGTH = "buffer_length"
    BUFFER_SIZE_MISMATCH = "buffer_size_mismatch"
    BUFFER_TYPE = "buffer_type"
    INVALID_DIMENSIONS = "invalid_dimensions"
    UNKNOWN_COLOR_SPACE = "unknown_color_space"
    COORDINATE_OUT_OF_RANGE = "coordinate_out_of_range"


class InvalidInputError(ValueError):
    """Raised when a public function receives input outside its contract.

    Example:
        >>> try:
        ...     rgb_to_hsl(300, 0, 0)
        ... except InvalidInputError as e:
        ...     print(e.kind)
        InvalidInputKind.RGB_OUT_OF_RANGE
    """

    def __init__(self, kind: InvalidInputKind, message: str):
        super().__init__(message)
        self.kind = kind

    def __reduce__(self):
        return (self.__class__, (self.kind, self.args[0]))
