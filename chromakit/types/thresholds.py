# No dependencies
"""Default classification thresholds and weights."""

# Maximum rgb component value for a grey color to be classified as black.
BLACK_POINT = 0.08

# Minimum rgb component value for a grey color to be classified as white.
WHITE_POINT = 1.0

# Maximum HSV saturation for a color to be classified as grey.
GREY_THRESHOLD = 0.01

# Tolerance around a registered primary hue.
PRIMARY_VARIANCE = 0.01

# sRGB relative luminance coefficients
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

HUE_360 = 360.0
