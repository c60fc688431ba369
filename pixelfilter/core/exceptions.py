"""
Exception types raised by the pixelfilter library.
"""

from pixelfilter.core.constants import ErrorMessages


class PixelFilterError(Exception):
    """Base class for all library errors."""


class ZeroMassError(PixelFilterError, ZeroDivisionError):
    """Raised when a moment statistic needs a non-zero mass (M00 != 0)."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(ErrorMessages.ZERO_MASS.format(operation=operation))


class InvalidParameterError(PixelFilterError, ValueError):
    """Raised for unusable inputs such as unknown operations or bad arrays."""
