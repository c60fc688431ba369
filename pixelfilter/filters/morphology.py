"""
Binary morphology on black foreground objects.

Black pixels (gray value 0) are foreground, everything else is background.
Erosion lets the background eat into black regions and dilation grows
black regions, one ring per iteration, using the full 3x3 window as
structuring element.
"""

import logging

import numpy as np

from pixelfilter.core.codec import luma_array
from pixelfilter.core.constants import Kernels, PixelConstants
from pixelfilter.core.snapshot import snapshot, write_grid
from pixelfilter.core.surface import Surface
from pixelfilter.filters.neighborhood import has_interior, window_views

logger = logging.getLogger(__name__)


def erode_grid(source: np.ndarray) -> np.ndarray:
    """
    One erosion pass.

    Every interior pixel with a non-black pixel anywhere in its window
    becomes white.
    """
    result = source.copy()
    if not has_interior(source):
        return result

    lit = luma_array(source) != 0
    touched = np.logical_or.reduce(window_views(lit))
    result[1:-1, 1:-1][touched] = PixelConstants.WHITE
    return result


def dilate_grid(source: np.ndarray) -> np.ndarray:
    """
    One dilation pass.

    Every black interior pixel paints its whole window black, which can
    reach into the outer ring.
    """
    result = source.copy()
    if not has_interior(source):
        return result

    seeds = luma_array(source)[1:-1, 1:-1] == 0
    for view in window_views(result):
        view[seeds] = PixelConstants.BLACK
    return result


def _too_small(surface: Surface) -> bool:
    if surface.width() < Kernels.WINDOW_SIZE or surface.height() < Kernels.WINDOW_SIZE:
        logger.warning(
            f"Skipping morphology: {surface.width()}x{surface.height()} surface has no interior"
        )
        return True
    return False


def erode(surface: Surface, iterations: int) -> None:
    """
    Erode black regions of the surface.

    Args:
        surface: Surface to modify in place
        iterations: Number of passes; each takes a fresh snapshot
    """
    logger.debug(
        f"Erosion x{iterations} on {surface.width()}x{surface.height()} surface"
    )
    if iterations > 0 and _too_small(surface):
        return
    for _ in range(iterations):
        with snapshot(surface) as source:
            result = erode_grid(source)
        write_grid(surface, result, interior_only=True)


def dilate(surface: Surface, iterations: int) -> None:
    """
    Dilate black regions of the surface.

    Args:
        surface: Surface to modify in place
        iterations: Number of passes; each takes a fresh snapshot
    """
    logger.debug(
        f"Dilation x{iterations} on {surface.width()}x{surface.height()} surface"
    )
    if iterations > 0 and _too_small(surface):
        return
    for _ in range(iterations):
        with snapshot(surface) as source:
            result = dilate_grid(source)
        write_grid(surface, result)
