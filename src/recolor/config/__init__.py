"""Configuration module for recolor.

Usage:
    from recolor.config import CORRECTION_CONFIG, ColorSpace
    CORRECTION_CONFIG.foreground_sum.max_value  # 745
    ColorSpace.parse("cielab")  # ColorSpace.CIELAB
"""

from recolor.config.correction import CORRECTION_CONFIG, CorrectionConfig
from recolor.config.operations import RangeSpec
from recolor.config.space import SPACE_CIELAB, SPACE_HSL, ColorSpace
from recolor.config.values import CorrectionValues

__all__ = [
    "CORRECTION_CONFIG",
    "CorrectionConfig",
    "CorrectionValues",
    "ColorSpace",
    "RangeSpec",
    "SPACE_CIELAB",
    "SPACE_HSL",
]
