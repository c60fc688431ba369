"""
Shape statistic records.

Moment tables are sparse: only the entries needed by the centroid,
central moment, Hu invariant and covariance formulas exist, each as a
named field.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MomentTable(BaseModel):
    """Raw moments M_ij = sum x^i * y^j * (255 - gray(x, y))."""

    model_config = ConfigDict(frozen=True)

    m00: float = 0.0
    m01: float = 0.0
    m02: float = 0.0
    m03: float = 0.0
    m10: float = 0.0
    m20: float = 0.0
    m30: float = 0.0
    m11: float = 0.0
    m12: float = 0.0
    m21: float = 0.0

    @property
    def mass(self) -> float:
        """Total ink weight (M00)."""
        return self.m00


class Centroid(BaseModel):
    """Center of mass (M10 / M00, M01 / M00)."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class CentralMoments(BaseModel):
    """Moments translated to the centroid."""

    model_config = ConfigDict(frozen=True)

    mu00: float = 0.0
    mu02: float = 0.0
    mu03: float = 0.0
    mu20: float = 0.0
    mu30: float = 0.0
    mu11: float = 0.0
    mu12: float = 0.0
    mu21: float = 0.0


class HuInvariants(BaseModel):
    """The seven Hu moment invariants."""

    model_config = ConfigDict(frozen=True)

    h1: float
    h2: float
    h3: float
    h4: float
    h5: float
    h6: float
    h7: float

    def to_list(self) -> List[float]:
        return [self.h1, self.h2, self.h3, self.h4, self.h5, self.h6, self.h7]


class EigenPair(BaseModel):
    """Eigenvalue with its (unnormalized) eigenvector."""

    model_config = ConfigDict(frozen=True)

    value: float
    vector: Tuple[float, float]


class EigenResult(BaseModel):
    """
    Eigen-decomposition of the 2x2 intensity covariance matrix.

    major holds T/2 + sqrt(T^2/4 - D), minor holds T/2 - sqrt(T^2/4 - D).
    """

    model_config = ConfigDict(frozen=True)

    major: EigenPair
    minor: EigenPair

    def to_rows(self) -> List[List[float]]:
        """Rows of [eigenvalue, vector x, vector y]."""
        return [
            [self.major.value, *self.major.vector],
            [self.minor.value, *self.minor.vector],
        ]


class ShapeDescriptor(BaseModel):
    """
    Complete shape description of a surface.

    Statistics that need a non-zero mass are None for an all-white surface.
    """

    model_config = ConfigDict(frozen=True)

    area: int = Field(..., ge=0, description="Interior black pixel count")
    perimeter: int = Field(..., ge=0, description="Boundary pixel count")
    moments: MomentTable
    centroid: Optional[Centroid] = None
    central_moments: Optional[CentralMoments] = None
    invariants: Optional[HuInvariants] = None
    eigen: Optional[EigenResult] = None

    @property
    def has_mass(self) -> bool:
        return self.moments.m00 != 0
