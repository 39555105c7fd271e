"""Correction value dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from recolor.config.space import ColorSpace
from recolor.constants import DEFAULT_SELECTED, DEFAULT_TARGET


@dataclass(frozen=True)
class CorrectionValues:
    """Selected/target color pair and the space the shift happens in.

    Example:
        >>> values = CorrectionValues(selected=(30, 99, 151), target=(168, 6, 64))
        >>> dh, ds, dl = values.delta()
        >>> values.with_space("cielab").is_neutral()
        False
    """

    selected: tuple[int, int, int] = DEFAULT_SELECTED
    target: tuple[int, int, int] = DEFAULT_TARGET
    space: ColorSpace = ColorSpace.HSL

    def __post_init__(self):
        from recolor.validators import validate_rgb

        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "selected", validate_rgb(self.selected, "selected"))
        object.__setattr__(self, "target", validate_rgb(self.target, "target"))
        object.__setattr__(self, "space", ColorSpace.parse(self.space))

    def is_neutral(self) -> bool:
        """Check whether applying these values would leave every pixel as is.

        :returns: True if selected and target are the same color
        """
        return self.selected == self.target

    def delta(self) -> tuple[float, float, float]:
        """Compute the correction delta in this space.

        :returns: target - selected, component-wise
        """
        from recolor.color.correction import compute_delta

        return compute_delta(self.selected, self.target, self.space)

    def with_space(self, space: ColorSpace | str) -> CorrectionValues:
        """Return a copy using another color space."""
        return CorrectionValues(self.selected, self.target, ColorSpace.parse(space))

    @classmethod
    def from_dict(cls, data: dict) -> CorrectionValues:
        """Create values from a plain dictionary.

        Missing keys fall back to the defaults.

        :param data: Mapping with optional "selected", "target" and "space" keys
        :returns: CorrectionValues
        """
        return cls(
            selected=tuple(data.get("selected", DEFAULT_SELECTED)),
            target=tuple(data.get("target", DEFAULT_TARGET)),
            space=data.get("space", ColorSpace.HSL),
        )

    def to_dict(self) -> dict:
        """Convert to a plain dictionary of builtin types."""
        return {
            "selected": list(self.selected),
            "target": list(self.target),
            "space": self.space.value,
        }
