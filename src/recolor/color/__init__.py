"""
Color module - converters between RGB, HSL and CIE L*a*b*, and the
delta-based color correction built on them.

Example:
    >>> from recolor.color import compute_delta, apply_correction
    >>> delta = compute_delta((30, 99, 151), (168, 6, 64), "cielab")
    >>> apply_correction((40, 110, 160), delta, "cielab")
"""

from recolor.color.correction import apply_correction, compute_delta
from recolor.color.hsl import hsl_to_rgb, hsl_to_rgb_array, rgb_to_hsl, rgb_to_hsl_array
from recolor.color.lab import lab_to_rgb, lab_to_rgb_array, rgb_to_lab, rgb_to_lab_array

__all__ = [
    # HSL
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_array",
    "hsl_to_rgb_array",
    # CIE L*a*b*
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_lab_array",
    "lab_to_rgb_array",
    # Correction
    "compute_delta",
    "apply_correction",
]
