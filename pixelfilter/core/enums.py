"""
Centralized enums for the pixelfilter library.
"""

from enum import Enum, IntFlag


class ColorChannel(IntFlag):
    """Color channel flags used by the color mask."""

    NONE = 0
    RED = 1 << 0
    GREEN = 1 << 1
    BLUE = 1 << 2
    ALL = RED | GREEN | BLUE


class FilterOperation(str, Enum):
    """Surface operations available through the filter service."""

    COLOR_MASK = "color_mask"
    INVERT = "invert"
    THRESHOLD = "threshold"
    EQUALIZE = "equalize"
    SMOOTH_MEAN = "smooth_mean"
    SMOOTH_MEDIAN = "smooth_median"
    SOBEL = "sobel"
    LAPLACIAN = "laplacian"
    ERODE = "erode"
    DILATE = "dilate"
