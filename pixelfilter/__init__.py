"""
pixelfilter - image filters and shape descriptors for packed RGB surfaces.

Packages:
- core: pixel codec, surfaces, snapshots, constants and errors
- filters: point, neighborhood and morphology transforms
- analysis: area, perimeter, moments and derived descriptors
- schemas: pydantic parameter and result models
- services: FilterService for named operations and pipelines
"""

from pixelfilter.analysis import (
    area,
    central_moments,
    centroid,
    eigen,
    invariants,
    moment,
    perimeter,
)
from pixelfilter.config import Settings, configure_logging, get_settings
from pixelfilter.core import (
    ColorChannel,
    FilterOperation,
    ImageSurface,
    InvalidParameterError,
    PixelFilterError,
    Surface,
    ZeroMassError,
    luma,
    pack,
    unpack,
)
from pixelfilter.filters import (
    color_mask,
    dilate,
    equalize_histogram,
    erode,
    invert,
    laplacian,
    smooth_mean,
    smooth_median,
    sobel_gradient,
    threshold,
)
from pixelfilter.services import FilterService

__version__ = "1.0.0"

__all__ = [
    # Core
    "pack",
    "unpack",
    "luma",
    "ColorChannel",
    "FilterOperation",
    "Surface",
    "ImageSurface",
    "PixelFilterError",
    "ZeroMassError",
    "InvalidParameterError",
    # Filters
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
    # Analysis
    "area",
    "perimeter",
    "moment",
    "centroid",
    "central_moments",
    "invariants",
    "eigen",
    # Service and configuration
    "FilterService",
    "Settings",
    "get_settings",
    "configure_logging",
]
