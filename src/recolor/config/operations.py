"""Range specifications for color components and pixel policies.

This module defines the RangeSpec dataclass that documents the nominal
range of a value and checks values against it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RangeSpec:
    """Specification for a bounded value.

    Attributes:
        name: Value name (e.g., "channel", "foreground_sum")
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        description: Human-readable description
    """

    name: str
    min_value: float
    max_value: float
    description: str = ""

    def contains(self, value: float) -> bool:
        """Check whether value lies within [min_value, max_value].

        :param value: Value to check
        :returns: True if inside the closed range
        """
        return self.min_value <= value <= self.max_value

    def __repr__(self) -> str:
        return f"RangeSpec({self.name}, range=[{self.min_value}, {self.max_value}])"
