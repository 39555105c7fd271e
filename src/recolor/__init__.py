"""
recolor - perceptual recoloring of RGBA pixel buffers.

Shifts every foreground pixel of an image through HSL or CIE L*a*b* so that
a selected color lands exactly on a target color and every other color moves
by the same amount. Near-black and near-white pixels are left untouched.

Features:
- RGB <-> HSL and RGB <-> CIE L*a*b* (D65) converters, scalar and [N, 3] arrays
- Correction delta computed once per image, applied per pixel
- In-place, Numba-parallel correction of RGBA buffers
- Accepts bytearray, memoryview and uint8 NumPy buffers

Example - one call:
    >>> from recolor import correct_image
    >>> correct_image(pixels, width, height, (30, 99, 151), (168, 6, 64), "cielab")

Example - reusable pipeline:
    >>> from recolor import Recolor
    >>> pipeline = Recolor().select((30, 99, 151)).target((168, 6, 64)).space("hsl")
    >>> result = pipeline(pixels, width, height, inplace=False)
"""

__version__ = "0.1.0"

from recolor.color import (
    apply_correction,
    compute_delta,
    hsl_to_rgb,
    hsl_to_rgb_array,
    lab_to_rgb,
    lab_to_rgb_array,
    rgb_to_hsl,
    rgb_to_hsl_array,
    rgb_to_lab,
    rgb_to_lab_array,
)
from recolor.config import CORRECTION_CONFIG, ColorSpace, CorrectionValues
from recolor.errors import InvalidInputError, InvalidInputKind
from recolor.image import Recolor, apply_delta, correct_image, pick_color

__all__ = [
    "__version__",
    # Config
    "CORRECTION_CONFIG",
    "ColorSpace",
    "CorrectionValues",
    # Errors
    "InvalidInputError",
    "InvalidInputKind",
    # Converters
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_array",
    "hsl_to_rgb_array",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_lab_array",
    "lab_to_rgb_array",
    # Correction
    "compute_delta",
    "apply_correction",
    "apply_delta",
    "correct_image",
    "pick_color",
    "Recolor",
]
