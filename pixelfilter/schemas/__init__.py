"""
Schemas Package

Pydantic models for operation parameters and shape statistic results.
"""

from .moments import (
    CentralMoments,
    Centroid,
    EigenPair,
    EigenResult,
    HuInvariants,
    MomentTable,
    ShapeDescriptor,
)
from .params import (
    BaseFilterParams,
    ColorMaskParams,
    EdgeParams,
    FilterResult,
    FilterStep,
    MorphologyParams,
    ParamsInput,
    ThresholdParams,
)

__all__ = [
    # Statistics
    "MomentTable",
    "Centroid",
    "CentralMoments",
    "HuInvariants",
    "EigenPair",
    "EigenResult",
    "ShapeDescriptor",
    # Params
    "BaseFilterParams",
    "ColorMaskParams",
    "ThresholdParams",
    "MorphologyParams",
    "EdgeParams",
    "FilterStep",
    "FilterResult",
    "ParamsInput",
]
