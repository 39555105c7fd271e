"""Color space selector."""

from __future__ import annotations

from enum import Enum

from recolor.errors import InvalidInputError, InvalidInputKind


class ColorSpace(Enum):
    """Color space in which a correction delta is computed and applied.

    The same member must be used for both steps of one correction pass.
    """

    HSL = "hsl"
    CIELAB = "cielab"

    @property
    def code(self) -> int:
        """Integer tag passed to the compiled kernels."""
        return _KERNEL_CODES[self]

    @classmethod
    def parse(cls, value: ColorSpace | str) -> ColorSpace:
        """Resolve a member or its string name.

        :param value: ColorSpace member, or "hsl" / "cielab" (case-insensitive)
        :returns: ColorSpace member
        :raises InvalidInputError: If the value names no known color space
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        available = ", ".join(member.value for member in cls)
        raise InvalidInputError(
            InvalidInputKind.UNKNOWN_COLOR_SPACE,
            f"Unknown color space {value!r}. Available: {available}",
        )


# Kept in sync with the dispatch in recolor.color.kernels.correct_pixel_numba
SPACE_HSL = 0
SPACE_CIELAB = 1

_KERNEL_CODES = {
    ColorSpace.HSL: SPACE_HSL,
    ColorSpace.CIELAB: SPACE_CIELAB,
}
