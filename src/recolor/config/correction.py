"""Correction configuration.

The valid channel range checked at the API boundary and the fixed
background policy of the image driver. These are policy constants; the
public functions do not take overrides.
"""

from __future__ import annotations

from dataclasses import dataclass

from recolor.config.operations import RangeSpec
from recolor.constants import BACKGROUND_MAX_SUM, BACKGROUND_MIN_SUM, CHANNEL_MAX


@dataclass(frozen=True)
class CorrectionConfig:
    """Ranges used by the validators and the image driver.

    Pixels whose channel sum lies inside ``foreground_sum`` are corrected;
    everything darker or brighter is treated as background.
    """

    channel: RangeSpec = RangeSpec(
        name="channel",
        min_value=0,
        max_value=CHANNEL_MAX,
        description="8-bit RGB channel",
    )

    foreground_sum: RangeSpec = RangeSpec(
        name="foreground_sum",
        min_value=BACKGROUND_MIN_SUM,
        max_value=BACKGROUND_MAX_SUM,
        description="R+G+B range of pixels that get corrected",
    )


# Singleton instance for use throughout the codebase
CORRECTION_CONFIG = CorrectionConfig()
