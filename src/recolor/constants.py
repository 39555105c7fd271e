"""Numeric constants shared by the color converters and the image driver."""

# sRGB companding
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_INVERSE_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_GAMMA = 2.4

# CIE L*a*b* nonlinearity
CIE_EPSILON = 0.008856
CIE_KAPPA_SLOPE = 7.787
CIE_OFFSET = 16.0 / 116.0

# D65 reference white
D65_XN = 0.95047
D65_YN = 1.00000
D65_ZN = 1.08883

# Linear sRGB -> XYZ (Rec. 709 primaries), row-major
RGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

# HSL
ACHROMATIC_EPSILON = 1e-12

# 8-bit channels
CHANNEL_MAX = 255
CHANNELS_PER_PIXEL = 4

# Background heuristic on R+G+B
BACKGROUND_MARGIN = 20
BACKGROUND_MIN_SUM = BACKGROUND_MARGIN
BACKGROUND_MAX_SUM = 3 * CHANNEL_MAX - BACKGROUND_MARGIN

# Starting colors for CorrectionValues and Recolor
DEFAULT_SELECTED = (30, 99, 151)
DEFAULT_TARGET = (168, 6, 64)
