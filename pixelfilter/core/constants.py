"""
Constants and configuration values for the pixelfilter library.
Centralizes all magic numbers, kernels and message templates.
"""


# Pixel Format Constants
class PixelConstants:
    """Constants describing the packed 32-bit RGB pixel layout."""

    CHANNEL_MASK = 0xFF
    RED_SHIFT = 0
    GREEN_SHIFT = 8
    BLUE_SHIFT = 16

    MIN_LEVEL = 0
    MAX_LEVEL = 255
    LEVEL_COUNT = 256

    BLACK = 0x000000
    WHITE = 0xFFFFFF


# Luma weights (ITU-R BT.601)
class LumaWeights:
    """Canonical weights for converting RGB to a single gray value, in thousandths."""

    RED = 299
    GREEN = 587
    BLUE = 114
    SCALE = 1000


# Neighborhood Kernels
class Kernels:
    """Fixed 3x3 kernels, indexed [dy + 1][dx + 1]."""

    WINDOW_SIZE = 3
    WINDOW_OFFSETS = (-1, 0, 1)
    MEDIAN_INDEX = 4

    SOBEL_X = (
        (-1, 0, 1),
        (-2, 0, 2),
        (-1, 0, 1),
    )

    SOBEL_Y = (
        (-1, -2, -1),
        (0, 0, 0),
        (1, 2, 1),
    )

    LAPLACIAN = (
        (0, 1, 0),
        (1, -4, 1),
        (0, 1, 0),
    )


# Filter Default Parameters
class FilterDefaults:
    """Default parameters for filter operations."""

    THRESHOLD_LEVEL = 128
    MORPHOLOGY_ITERATIONS = 1
    CLAMP_EDGE_RESPONSE = False


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Environment
    ENV_PREFIX = "PIXELFILTER_"
    ENV_NESTED_DELIMITER = "__"


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    ZERO_MASS = "{operation} is undefined for an image with zero mass (M00 == 0)"
    UNKNOWN_OPERATION = "Unknown filter operation: {operation}"
    INVALID_ARRAY_SHAPE = "Expected an array of shape {expected}, got {shape}"
    PIXEL_OUT_OF_BOUNDS = "Pixel ({x}, {y}) is out of surface bounds {width}x{height}"
