"""
Image moments and derived shape descriptors.

Pixels are weighted by their ink, 255 - gray, so black contributes the
most and white nothing. From the raw moment table this module derives:
- the centroid
- central moments (translation invariant)
- the seven Hu invariants (translation, rotation and scale invariant)
- the eigen-decomposition of the 2x2 covariance matrix

Everything past the raw moments needs a non-zero mass. An all-white
image raises ZeroMassError instead of producing NaN or Inf, so callers
should check MomentTable.m00 first.
"""

import logging
import math

import numpy as np

from pixelfilter.core.codec import luma_array
from pixelfilter.core.constants import PixelConstants
from pixelfilter.core.exceptions import ZeroMassError
from pixelfilter.core.snapshot import snapshot
from pixelfilter.core.surface import Surface
from pixelfilter.schemas.moments import (
    CentralMoments,
    Centroid,
    EigenPair,
    EigenResult,
    HuInvariants,
    MomentTable,
)

logger = logging.getLogger(__name__)


def moment(surface: Surface) -> MomentTable:
    """
    Compute raw moments up to third order over every pixel.

    Args:
        surface: Surface to measure

    Returns:
        MomentTable with M_ij = sum x^i * y^j * (255 - gray(x, y))
    """
    with snapshot(surface) as source:
        ink = (PixelConstants.MAX_LEVEL - luma_array(source)).astype(np.float64)

    ys, xs = np.indices(ink.shape, dtype=np.float64)

    table = MomentTable(
        m00=float(np.sum(ink)),
        m01=float(np.sum(ink * ys)),
        m02=float(np.sum(ink * ys * ys)),
        m03=float(np.sum(ink * ys * ys * ys)),
        m10=float(np.sum(ink * xs)),
        m20=float(np.sum(ink * xs * xs)),
        m30=float(np.sum(ink * xs * xs * xs)),
        m11=float(np.sum(ink * xs * ys)),
        m12=float(np.sum(ink * xs * ys * ys)),
        m21=float(np.sum(ink * xs * xs * ys)),
    )
    logger.debug(f"Moments of {surface.width()}x{surface.height()} surface: M00={table.m00}")
    return table


def centroid(moments: MomentTable) -> Centroid:
    """
    Center of mass of the ink.

    Raises:
        ZeroMassError: If M00 is zero
    """
    if moments.m00 == 0:
        raise ZeroMassError("centroid")
    return Centroid(x=moments.m10 / moments.m00, y=moments.m01 / moments.m00)


def central_moments(moments: MomentTable, center: Centroid) -> CentralMoments:
    """
    Translate raw moments to the centroid.

    Args:
        moments: Raw moment table
        center: Centroid computed from the same table

    Returns:
        CentralMoments

    Raises:
        ZeroMassError: If M00 is zero
    """
    if moments.m00 == 0:
        raise ZeroMassError("central_moments")

    M = moments
    cx, cy = center.x, center.y

    return CentralMoments(
        mu00=M.m00,
        mu02=M.m02 - cy * M.m01,
        mu03=M.m03 - 3 * cy * M.m02 + 2 * cy * cy * M.m01,
        mu20=M.m20 - cx * M.m10,
        mu30=M.m30 - 3 * cx * M.m20 + 2 * cx * cx * M.m10,
        mu11=M.m11 - cx * M.m01,
        mu12=M.m12 - 2 * cy * M.m11 - cx * M.m02 + 2 * cy * cy * M.m10,
        mu21=M.m21 - 2 * cx * M.m11 - cy * M.m20 + 2 * cx * cx * M.m01,
    )


def invariants(central: CentralMoments) -> HuInvariants:
    """
    The seven Hu moment invariants.

    Central moments are normalized as eta_ij = mu_ij / mu00^(1 + (i + j) / 2)
    before being combined.

    Raises:
        ZeroMassError: If mu00 is zero
    """
    u = central
    if u.mu00 == 0:
        raise ZeroMassError("invariants")

    second = u.mu00**2
    third = u.mu00**2.5

    n20 = u.mu20 / second
    n02 = u.mu02 / second
    n11 = u.mu11 / second
    n30 = u.mu30 / third
    n03 = u.mu03 / third
    n21 = u.mu21 / third
    n12 = u.mu12 / third

    # Shared terms
    a = n30 + n12
    b = n21 + n03
    c = n30 - 3 * n12
    d = 3 * n21 - n03

    return HuInvariants(
        h1=n20 + n02,
        h2=(n20 - n02) ** 2 + 4 * n11**2,
        h3=c**2 + d**2,
        h4=a**2 + b**2,
        h5=c * a * (a**2 - 3 * b**2) + d * b * (3 * a**2 - b**2),
        h6=(n20 - n02) * (a**2 - b**2) + 4 * n11 * a * b,
        h7=d * a * (a**2 - 3 * b**2) - c * b * (3 * a**2 - b**2),
    )


def eigen(moments: MomentTable, center: Centroid) -> EigenResult:
    """
    Eigenvalues and eigenvectors of the intensity covariance matrix.

    The matrix is [[a, b], [c, d]] with
    a = M20/M00 - cx^2, b = c = M11/M00 - cx*cy, d = M02/M00 - cy^2.
    Eigenvalues come from the trace/determinant closed form and the
    eigenvectors are left unnormalized.

    Raises:
        ZeroMassError: If M00 is zero
    """
    if moments.m00 == 0:
        raise ZeroMassError("eigen")

    M = moments
    cx, cy = center.x, center.y

    # Covariance matrix
    a = M.m20 / M.m00 - cx * cx
    b = M.m11 / M.m00 - cx * cy
    c = b
    d = M.m02 / M.m00 - cy * cy

    trace = a + d
    determinant = a * d - b * c

    # Symmetric matrix: the discriminant is never negative except by rounding
    root = math.sqrt(max(trace * trace / 4 - determinant, 0.0))
    major = trace / 2 + root
    minor = trace / 2 - root

    if c != 0:
        major_vector = (major - d, c)
        minor_vector = (minor - d, c)
    elif b != 0:
        major_vector = (b, major - a)
        minor_vector = (b, minor - a)
    else:
        major_vector = (1.0, 0.0)
        minor_vector = (0.0, 1.0)

    return EigenResult(
        major=EigenPair(value=major, vector=major_vector),
        minor=EigenPair(value=minor, vector=minor_vector),
    )
