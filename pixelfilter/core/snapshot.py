"""
Snapshot handling for surface operations.

Operations never observe their own writes: they read from a private,
read-only copy of the surface grid and write results back afterwards.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

import numpy as np

from pixelfilter.core.surface import ImageSurface, Surface

logger = logging.getLogger(__name__)


def read_grid(surface: Surface) -> np.ndarray:
    """
    Copy a surface into a new (height, width) uint32 grid.

    Args:
        surface: Any object implementing the Surface protocol

    Returns:
        Independent packed pixel grid
    """
    if isinstance(surface, ImageSurface):
        return surface.pixels.copy()

    width, height = surface.width(), surface.height()
    grid = np.zeros((height, width), dtype=np.uint32)
    for y in range(height):
        for x in range(width):
            grid[y, x] = surface.get_pixel(x, y)
    return grid


def write_grid(surface: Surface, grid: np.ndarray, interior_only: bool = False) -> None:
    """
    Write a packed grid back into a surface.

    Args:
        surface: Destination surface (same size as grid)
        grid: Packed pixel grid indexed [y, x]
        interior_only: If True, leave the outermost ring of the surface untouched
    """
    height, width = grid.shape
    margin = 1 if interior_only else 0
    if height <= 2 * margin or width <= 2 * margin:
        return

    if isinstance(surface, ImageSurface):
        surface.pixels[margin : height - margin, margin : width - margin] = grid[
            margin : height - margin, margin : width - margin
        ]
        return

    for y in range(margin, height - margin):
        for x in range(margin, width - margin):
            surface.put_pixel(x, y, int(grid[y, x]))


@contextmanager
def snapshot(surface: Surface) -> Iterator[np.ndarray]:
    """
    Borrow a read-only copy of a surface for the duration of a block.

    The copy is released when the block exits, whether or not it raised.

    Example:
        >>> with snapshot(surface) as source:
        ...     result = smooth_mean_grid(source)
        >>> write_grid(surface, result, interior_only=True)
    """
    grid = read_grid(surface)
    grid.flags.writeable = False
    logger.debug(f"Acquired snapshot {grid.shape[1]}x{grid.shape[0]}")
    try:
        yield grid
    finally:
        del grid
        logger.debug("Released snapshot")
