"""
Point transforms.

Each output pixel depends only on the input pixel at the same position,
so these operations rewrite every cell of the surface in place.
"""

import logging
from typing import Union

import numpy as np

from pixelfilter.core.codec import gray_array, luma_array, pack_array, unpack_array
from pixelfilter.core.constants import PixelConstants
from pixelfilter.core.enums import ColorChannel
from pixelfilter.core.snapshot import read_grid, write_grid
from pixelfilter.core.surface import Surface

logger = logging.getLogger(__name__)


def color_mask(surface: Surface, mask: Union[ColorChannel, int]) -> None:
    """
    Strip the channels named in mask.

    Channels not in the mask keep their value. Masking all three channels
    does not give black: the pixel is replaced by its gray value instead.

    Args:
        surface: Surface to modify in place
        mask: Combination of ColorChannel flags
    """
    mask = ColorChannel(int(mask) & ColorChannel.ALL)
    logger.debug(f"Color mask {mask!r} on {surface.width()}x{surface.height()} surface")

    grid = read_grid(surface)

    if mask == ColorChannel.ALL:
        write_grid(surface, gray_array(luma_array(grid)))
        return

    red, green, blue = unpack_array(grid)
    if mask & ColorChannel.RED:
        red = np.zeros_like(red)
    if mask & ColorChannel.GREEN:
        green = np.zeros_like(green)
    if mask & ColorChannel.BLUE:
        blue = np.zeros_like(blue)

    write_grid(surface, pack_array(red, green, blue))


def invert(surface: Surface) -> None:
    """Replace every channel value v with 255 - v."""
    logger.debug(f"Invert on {surface.width()}x{surface.height()} surface")

    red, green, blue = unpack_array(read_grid(surface))
    top = PixelConstants.MAX_LEVEL
    write_grid(surface, pack_array(top - red, top - green, top - blue))


def threshold(surface: Surface, level: int) -> None:
    """
    Binarize the surface.

    Pixels whose gray value is at least level become white,
    all others become black.

    Args:
        surface: Surface to modify in place
        level: Threshold gray level, normally 0-255
    """
    logger.debug(f"Threshold at level {level} on {surface.width()}x{surface.height()} surface")

    gray = luma_array(read_grid(surface))
    binary = np.where(gray >= level, PixelConstants.WHITE, PixelConstants.BLACK)
    write_grid(surface, binary.astype(np.uint32))


def equalize_histogram(surface: Surface) -> None:
    """
    Stretch contrast with per-channel histogram equalization.

    The cumulative histogram of each channel is used as its transfer
    function: a value v becomes int(255 * cdf[v] / cdf[255]).
    """
    grid = read_grid(surface)
    if grid.size == 0:
        logger.warning("Histogram equalization skipped: surface is empty")
        return

    channels = []
    for values in unpack_array(grid):
        counts = np.bincount(values.ravel(), minlength=PixelConstants.LEVEL_COUNT)
        cdf = np.cumsum(counts)
        scaled = PixelConstants.MAX_LEVEL * cdf[values] / float(cdf[-1])
        channels.append(scaled.astype(np.int64))

    logger.debug(f"Equalized histogram of {grid.shape[1]}x{grid.shape[0]} surface")
    write_grid(surface, pack_array(*channels))
