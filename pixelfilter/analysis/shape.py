"""
Pixel-count shape measures of black foreground objects.
"""

import logging

import numpy as np

from pixelfilter.core.codec import luma_array
from pixelfilter.core.snapshot import read_grid, snapshot
from pixelfilter.core.surface import Surface
from pixelfilter.filters.morphology import erode

logger = logging.getLogger(__name__)


def _interior(values: np.ndarray) -> np.ndarray:
    return values[1:-1, 1:-1]


def area(surface: Surface) -> int:
    """
    Count black pixels (gray value 0).

    Only interior pixels are counted; the outermost ring is excluded,
    so a 3x3 surface has a single countable pixel and smaller ones none.
    """
    with snapshot(surface) as source:
        gray = luma_array(source)
    count = int(np.count_nonzero(_interior(gray) == 0))
    logger.debug(f"Area of {surface.width()}x{surface.height()} surface: {count}")
    return count


def perimeter(surface: Surface) -> int:
    """
    Count boundary pixels of black regions.

    A copy of the surface is eroded once; every interior pixel whose gray
    value changed is part of the boundary. The surface is not modified.
    """
    eroded = surface.copy()
    erode(eroded, 1)

    with snapshot(surface) as source:
        original_gray = luma_array(source)
    eroded_gray = luma_array(read_grid(eroded))

    changed = _interior(original_gray) != _interior(eroded_gray)
    count = int(np.count_nonzero(changed))
    logger.debug(f"Perimeter of {surface.width()}x{surface.height()} surface: {count}")
    return count
