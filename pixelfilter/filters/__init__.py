"""
Surface filters.

- point: color mask, inversion, threshold, histogram equalization
- neighborhood: mean/median smoothing, Sobel gradient, Laplacian
- morphology: erosion and dilation of black regions
"""

from pixelfilter.filters.morphology import dilate, erode
from pixelfilter.filters.neighborhood import laplacian, smooth_mean, smooth_median, sobel_gradient
from pixelfilter.filters.point import color_mask, equalize_histogram, invert, threshold

__all__ = [
    "color_mask",
    "invert",
    "threshold",
    "equalize_histogram",
    "smooth_mean",
    "smooth_median",
    "sobel_gradient",
    "laplacian",
    "erode",
    "dilate",
]
