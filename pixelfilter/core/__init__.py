"""
Core modules for pixelfilter
"""

from .codec import luma, pack, unpack, unpack_blue, unpack_green, unpack_red
from .enums import ColorChannel, FilterOperation
from .exceptions import InvalidParameterError, PixelFilterError, ZeroMassError
from .snapshot import read_grid, snapshot, write_grid
from .surface import ImageSurface, Surface

__all__ = [
    "pack",
    "unpack",
    "unpack_red",
    "unpack_green",
    "unpack_blue",
    "luma",
    "ColorChannel",
    "FilterOperation",
    "PixelFilterError",
    "ZeroMassError",
    "InvalidParameterError",
    "Surface",
    "ImageSurface",
    "read_grid",
    "write_grid",
    "snapshot",
]
