"""
Neighborhood transforms over a fixed 3x3 window.

Every operation comes in two forms:
- a pure *_grid function mapping a read-only packed grid to a new grid
- a surface function that snapshots the surface, runs the grid function
  and writes the interior back

Pixels on the outermost ring have an incomplete window and are left
untouched. Surfaces narrower or shorter than 3 pixels are not modified.
"""

import logging
from typing import List, Sequence

import numpy as np

from pixelfilter.core.codec import gray_array, luma_array, pack_array, unpack_array
from pixelfilter.core.constants import FilterDefaults, Kernels, PixelConstants
from pixelfilter.core.snapshot import snapshot, write_grid
from pixelfilter.core.surface import Surface

logger = logging.getLogger(__name__)


def has_interior(grid: np.ndarray) -> bool:
    """True if the grid has at least one pixel with a complete 3x3 window."""
    height, width = grid.shape
    return height >= Kernels.WINDOW_SIZE and width >= Kernels.WINDOW_SIZE


def window_views(values: np.ndarray) -> List[np.ndarray]:
    """
    The 9 shifted views of a grid's interior, one per window cell.

    Views are ordered row by row (dy outer, dx inner), matching the
    [dy + 1][dx + 1] layout of the kernels.
    """
    height, width = values.shape
    views = []
    for dy in Kernels.WINDOW_OFFSETS:
        for dx in Kernels.WINDOW_OFFSETS:
            views.append(values[1 + dy : height - 1 + dy, 1 + dx : width - 1 + dx])
    return views


def convolve_interior(values: np.ndarray, kernel: Sequence[Sequence[int]]) -> np.ndarray:
    """Weighted window sum for every interior pixel."""
    weights = [weight for row in kernel for weight in row]
    total = np.zeros((values.shape[0] - 2, values.shape[1] - 2), dtype=np.int64)
    for weight, view in zip(weights, window_views(values)):
        if weight:
            total += weight * view
    return total


def _with_interior(source: np.ndarray, interior: np.ndarray) -> np.ndarray:
    result = np.array(source, dtype=np.uint32, copy=True)
    result[1:-1, 1:-1] = interior
    return result


def _clamp(values: np.ndarray) -> np.ndarray:
    return np.clip(values, PixelConstants.MIN_LEVEL, PixelConstants.MAX_LEVEL)


def smooth_mean_grid(source: np.ndarray) -> np.ndarray:
    """Per-channel window sum integer-divided by 9."""
    if not has_interior(source):
        return source.copy()

    channels = []
    for values in unpack_array(source):
        total = sum(window_views(values))
        channels.append(total // (Kernels.WINDOW_SIZE * Kernels.WINDOW_SIZE))

    return _with_interior(source, pack_array(*channels))


def smooth_median_grid(source: np.ndarray) -> np.ndarray:
    """Per-channel median (5th smallest) of the 9 window values."""
    if not has_interior(source):
        return source.copy()

    channels = []
    for values in unpack_array(source):
        stacked = np.sort(np.stack(window_views(values), axis=0), axis=0)
        channels.append(stacked[Kernels.MEDIAN_INDEX])

    return _with_interior(source, pack_array(*channels))


def sobel_gradient_grid(source: np.ndarray, clamp: bool = False) -> np.ndarray:
    """
    Sobel gradient magnitude of the gray values.

    The magnitude round(sqrt(gx^2 + gy^2)) is written to all three channels.
    Without clamp, magnitudes above 255 wrap when packed.
    """
    if not has_interior(source):
        return source.copy()

    gray = luma_array(source)
    grad_x = convolve_interior(gray, Kernels.SOBEL_X)
    grad_y = convolve_interior(gray, Kernels.SOBEL_Y)

    # Combine gradients
    magnitude = np.floor(np.sqrt(grad_x**2 + grad_y**2) + 0.5).astype(np.int64)
    if clamp:
        magnitude = _clamp(magnitude)

    return _with_interior(source, gray_array(magnitude))


def laplacian_grid(source: np.ndarray, clamp: bool = False) -> np.ndarray:
    """
    Laplacian response of the gray values, written to all three channels.

    Without clamp, negative responses and responses above 255 wrap when packed.
    """
    if not has_interior(source):
        return source.copy()

    response = convolve_interior(luma_array(source), Kernels.LAPLACIAN)
    if clamp:
        response = _clamp(response)

    return _with_interior(source, gray_array(response))


def _filter_interior(surface: Surface, grid_function, **kwargs) -> None:
    """Snapshot the surface, run a grid function and write the interior back."""
    with snapshot(surface) as source:
        if not has_interior(source):
            logger.warning(
                f"Skipping {grid_function.__name__}: "
                f"{surface.width()}x{surface.height()} surface has no interior"
            )
            return
        result = grid_function(source, **kwargs)
    write_grid(surface, result, interior_only=True)


def smooth_mean(surface: Surface) -> None:
    """Apply 3x3 mean smoothing to the surface interior."""
    logger.debug(f"Mean smoothing on {surface.width()}x{surface.height()} surface")
    _filter_interior(surface, smooth_mean_grid)


def smooth_median(surface: Surface) -> None:
    """Apply 3x3 median smoothing to the surface interior."""
    logger.debug(f"Median smoothing on {surface.width()}x{surface.height()} surface")
    _filter_interior(surface, smooth_median_grid)


def sobel_gradient(surface: Surface, clamp: bool = FilterDefaults.CLAMP_EDGE_RESPONSE) -> None:
    """
    Replace the surface interior with its Sobel gradient magnitude.

    Args:
        surface: Surface to modify in place
        clamp: Clamp magnitudes to 255 instead of letting them wrap
    """
    logger.debug(f"Sobel gradient on {surface.width()}x{surface.height()} surface (clamp={clamp})")
    _filter_interior(surface, sobel_gradient_grid, clamp=clamp)


def laplacian(surface: Surface, clamp: bool = FilterDefaults.CLAMP_EDGE_RESPONSE) -> None:
    """
    Replace the surface interior with its Laplacian response.

    Args:
        surface: Surface to modify in place
        clamp: Clamp responses to 0-255 instead of letting them wrap
    """
    logger.debug(f"Laplacian on {surface.width()}x{surface.height()} surface (clamp={clamp})")
    _filter_interior(surface, laplacian_grid, clamp=clamp)
