"""
Service layer for pixelfilter.
"""

from .filter_service import FilterService

__all__ = ["FilterService"]
