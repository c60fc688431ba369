"""
Packed pixel codec.

A pixel is a 32-bit value holding three 8-bit channels:
red in bits 0-7, green in bits 8-15 and blue in bits 16-23.
Packing keeps only the low 8 bits of each channel, so out-of-range
values wrap instead of saturating.

Every scalar helper has an array counterpart that gives the same
result element-wise on NumPy grids.
"""

from typing import Tuple

import numpy as np

from pixelfilter.core.constants import LumaWeights, PixelConstants

_MASK = PixelConstants.CHANNEL_MASK


def pack(red: int, green: int, blue: int) -> int:
    """Pack three channel values into one pixel, truncating each to 8 bits."""
    return (
        ((int(red) & _MASK) << PixelConstants.RED_SHIFT)
        | ((int(green) & _MASK) << PixelConstants.GREEN_SHIFT)
        | ((int(blue) & _MASK) << PixelConstants.BLUE_SHIFT)
    )


def unpack_red(pixel: int) -> int:
    return (int(pixel) >> PixelConstants.RED_SHIFT) & _MASK


def unpack_green(pixel: int) -> int:
    return (int(pixel) >> PixelConstants.GREEN_SHIFT) & _MASK


def unpack_blue(pixel: int) -> int:
    return (int(pixel) >> PixelConstants.BLUE_SHIFT) & _MASK


def unpack(pixel: int) -> Tuple[int, int, int]:
    """Split a pixel into its (red, green, blue) channels."""
    return unpack_red(pixel), unpack_green(pixel), unpack_blue(pixel)


def luma(pixel: int) -> int:
    """
    Gray value of a pixel.

    Computed as round(0.299*R + 0.587*G + 0.114*B) with halves rounding up.
    Integer arithmetic keeps exact halves exact. The weights sum to one,
    so the result always fits in 8 bits.
    """
    red, green, blue = unpack(pixel)
    value = LumaWeights.RED * red + LumaWeights.GREEN * green + LumaWeights.BLUE * blue
    return (value + LumaWeights.SCALE // 2) // LumaWeights.SCALE


def pack_array(red: np.ndarray, green: np.ndarray, blue: np.ndarray) -> np.ndarray:
    """
    Pack channel grids into a uint32 pixel grid.

    Args:
        red: Red channel values (any integer dtype, may exceed 8 bits)
        green: Green channel values
        blue: Blue channel values

    Returns:
        Packed grid with dtype uint32
    """
    red = np.asarray(red).astype(np.int64) & _MASK
    green = np.asarray(green).astype(np.int64) & _MASK
    blue = np.asarray(blue).astype(np.int64) & _MASK

    packed = (
        (red << PixelConstants.RED_SHIFT)
        | (green << PixelConstants.GREEN_SHIFT)
        | (blue << PixelConstants.BLUE_SHIFT)
    )
    return packed.astype(np.uint32)


def unpack_array(pixels: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split a packed grid into (red, green, blue) int64 grids."""
    pixels = np.asarray(pixels).astype(np.int64)
    red = (pixels >> PixelConstants.RED_SHIFT) & _MASK
    green = (pixels >> PixelConstants.GREEN_SHIFT) & _MASK
    blue = (pixels >> PixelConstants.BLUE_SHIFT) & _MASK
    return red, green, blue


def luma_array(pixels: np.ndarray) -> np.ndarray:
    """Gray value of every pixel in a packed grid, as int64."""
    red, green, blue = unpack_array(pixels)
    value = LumaWeights.RED * red + LumaWeights.GREEN * green + LumaWeights.BLUE * blue
    return (value + LumaWeights.SCALE // 2) // LumaWeights.SCALE


def gray_array(values: np.ndarray) -> np.ndarray:
    """Broadcast a grid of gray values to all three channels of a packed grid."""
    return pack_array(values, values, values)
