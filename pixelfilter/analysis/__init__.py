"""
Shape analysis: pixel counts and moment-based descriptors.
"""

from pixelfilter.analysis.moments import central_moments, centroid, eigen, invariants, moment
from pixelfilter.analysis.shape import area, perimeter

__all__ = [
    "area",
    "perimeter",
    "moment",
    "centroid",
    "central_moments",
    "invariants",
    "eigen",
]
