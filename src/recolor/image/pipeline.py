"""
Recolor: reusable recoloring pipeline with a cached correction delta.

Example:
    >>> pipeline = Recolor().select((30, 99, 151)).target((168, 6, 64)).space("cielab")
    >>> pipeline(pixels, width, height)                 # in place
    >>> copy = pipeline(pixels, width, height, inplace=False)
"""

from __future__ import annotations

import logging
from typing import Self

from recolor.color.correction import apply_correction, compute_delta
from recolor.config.space import ColorSpace
from recolor.config.values import CorrectionValues
from recolor.image.apply import apply_delta, as_pixel_array, rgba_view
from recolor.validators import validate_rgb

logger = logging.getLogger(__name__)


class Recolor:
    """Chainable selected/target/space configuration applied to pixel buffers.

    The delta is computed lazily and reused until a color or the space
    changes.
    """

    __slots__ = ("_values", "_delta")

    def __init__(self, values: CorrectionValues | None = None):
        """
        Initialize the pipeline.

        :param values: Starting values, defaults to CorrectionValues()
        """
        self._values = values if values is not None else CorrectionValues()
        self._delta: tuple[float, float, float] | None = None

    @classmethod
    def from_values(cls, values: CorrectionValues) -> Self:
        return cls(values)

    # ========================================================================
    # Configuration
    # ========================================================================

    def select(self, color) -> Self:
        """Set the color picked from the image.

        :param color: RGB triple
        :return: Self for chaining
        """
        self._set(selected=validate_rgb(color, "selected"))
        return self

    def target(self, color) -> Self:
        """Set the color the selected color should become.

        :param color: RGB triple
        :return: Self for chaining
        """
        self._set(target=validate_rgb(color, "target"))
        return self

    def space(self, space: ColorSpace | str) -> Self:
        """Set the color space used for the correction.

        :param space: ColorSpace or "hsl" / "cielab"
        :return: Self for chaining
        """
        self._update(self._values.with_space(space))
        return self

    def _set(self, **changes) -> None:
        current = self._values.to_dict()
        current.update(changes)
        self._update(CorrectionValues.from_dict(current))

    def _update(self, values: CorrectionValues) -> None:
        if values != self._values:
            self._values = values
            self._delta = None

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def values(self) -> CorrectionValues:
        return self._values

    @property
    def delta(self) -> tuple[float, float, float]:
        """Correction delta for the current values (cached)."""
        if self._delta is None:
            v = self._values
            self._delta = compute_delta(v.selected, v.target, v.space)
            logger.debug("[Recolor] Computed delta %s", self._delta)
        return self._delta

    def is_neutral(self) -> bool:
        return self._values.is_neutral()

    # ========================================================================
    # Application
    # ========================================================================

    def correct(self, color) -> tuple[int, int, int]:
        """Correct a single RGB color with the current delta.

        Unlike the buffer path, no background check is applied.
        """
        return apply_correction(color, self.delta, self._values.space)

    def apply(self, pixels, width: int, height: int, inplace: bool = True):
        """Correct an RGBA buffer.

        :param pixels: Interleaved RGBA uint8 buffer
        :param width: Image width in pixels
        :param height: Image height in pixels
        :param inplace: If False, correct a NumPy copy and leave pixels as is.
            The input may then be read-only or non-contiguous.
        :return: pixels when inplace, else the corrected uint8 copy
        """
        if not inplace:
            pixels = as_pixel_array(pixels).copy()
        rgba_view(pixels, width, height)
        if self.is_neutral():
            logger.debug("[Recolor] Neutral values, skipping")
            return pixels
        return apply_delta(pixels, width, height, self.delta, self._values.space)

    def __call__(self, pixels, width: int, height: int, inplace: bool = True):
        return self.apply(pixels, width, height, inplace=inplace)

    def __repr__(self) -> str:
        v = self._values
        return f"Recolor(selected={v.selected}, target={v.target}, space={v.space.value!r})"
