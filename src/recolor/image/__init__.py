"""
Image module - recolor interleaved RGBA pixel buffers.

Example:
    >>> from recolor.image import correct_image
    >>> correct_image(pixels, width, height, (30, 99, 151), (168, 6, 64), "hsl")
"""

from recolor.image.apply import apply_delta, as_pixel_array, correct_image, pick_color, rgba_view
from recolor.image.pipeline import Recolor

__all__ = [
    "Recolor",
    "apply_delta",
    "as_pixel_array",
    "correct_image",
    "pick_color",
    "rgba_view",
]
