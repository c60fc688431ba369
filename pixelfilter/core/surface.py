"""
Pixel surfaces.

Defines the Surface protocol every operation works against and
ImageSurface, a NumPy-backed implementation with conversions from
and to the usual in-memory image containers:
- NumPy RGB arrays
- NumPy BGR arrays (OpenCV channel order)
- PIL Images
"""

import logging
from typing import Protocol, runtime_checkable

import cv2
import numpy as np
from PIL import Image

from pixelfilter.core.codec import pack_array, unpack_array
from pixelfilter.core.constants import ErrorMessages, PixelConstants
from pixelfilter.core.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


@runtime_checkable
class Surface(Protocol):
    """Mutable 2D grid of packed pixels, indexed by 0-based (x, y)."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def get_pixel(self, x: int, y: int) -> int: ...

    def put_pixel(self, x: int, y: int, pixel: int) -> None: ...

    def copy(self) -> "Surface": ...


class ImageSurface:
    """
    Surface backed by a (height, width) uint32 NumPy grid.

    The grid is indexed [y, x], so rows are image lines.
    """

    def __init__(self, pixels: np.ndarray):
        """
        Initialize surface from a packed pixel grid.

        Args:
            pixels: 2D array of packed pixels; it is copied
        """
        pixels = np.asarray(pixels)
        if pixels.ndim != 2:
            raise InvalidParameterError(
                ErrorMessages.INVALID_ARRAY_SHAPE.format(
                    expected="(height, width)", shape=pixels.shape
                )
            )
        self._pixels = pixels.astype(np.uint32, copy=True)

    @property
    def pixels(self) -> np.ndarray:
        """Backing grid (live, not a copy)."""
        return self._pixels

    def width(self) -> int:
        return int(self._pixels.shape[1])

    def height(self) -> int:
        return int(self._pixels.shape[0])

    def get_pixel(self, x: int, y: int) -> int:
        self._check_bounds(x, y)
        return int(self._pixels[y, x])

    def put_pixel(self, x: int, y: int, pixel: int) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = int(pixel) & 0xFFFFFFFF

    def copy(self) -> "ImageSurface":
        return ImageSurface(self._pixels)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width() and 0 <= y < self.height()):
            raise IndexError(
                ErrorMessages.PIXEL_OUT_OF_BOUNDS.format(
                    x=x, y=y, width=self.width(), height=self.height()
                )
            )

    @classmethod
    def blank(cls, width: int, height: int, fill: int = PixelConstants.WHITE) -> "ImageSurface":
        """Create a surface of the given size filled with one pixel value."""
        return cls(np.full((height, width), fill, dtype=np.uint32))

    @classmethod
    def from_rgb_array(cls, array: np.ndarray) -> "ImageSurface":
        """
        Create surface from an RGB image array.

        Args:
            array: Array of shape (height, width, 3) in RGB order

        Returns:
            New ImageSurface
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 3:
            raise InvalidParameterError(
                ErrorMessages.INVALID_ARRAY_SHAPE.format(
                    expected="(height, width, 3)", shape=array.shape
                )
            )
        return cls(pack_array(array[:, :, 0], array[:, :, 1], array[:, :, 2]))

    def to_rgb_array(self) -> np.ndarray:
        """Return a (height, width, 3) uint8 array in RGB order."""
        red, green, blue = unpack_array(self._pixels)
        return np.stack([red, green, blue], axis=-1).astype(np.uint8)

    @classmethod
    def from_bgr_array(cls, array: np.ndarray) -> "ImageSurface":
        """
        Create surface from an OpenCV image.

        Args:
            array: BGR image (height, width, 3) or grayscale image (height, width)

        Returns:
            New ImageSurface
        """
        array = np.ascontiguousarray(array, dtype=np.uint8)
        if array.ndim == 2:
            rgb = cv2.cvtColor(array, cv2.COLOR_GRAY2RGB)
        elif array.ndim == 3 and array.shape[2] == 3:
            rgb = cv2.cvtColor(array, cv2.COLOR_BGR2RGB)
        else:
            raise InvalidParameterError(
                ErrorMessages.INVALID_ARRAY_SHAPE.format(
                    expected="(height, width, 3) or (height, width)", shape=array.shape
                )
            )
        return cls.from_rgb_array(rgb)

    def to_bgr_array(self) -> np.ndarray:
        """Return a (height, width, 3) uint8 array in OpenCV BGR order."""
        return cv2.cvtColor(self.to_rgb_array(), cv2.COLOR_RGB2BGR)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "ImageSurface":
        """Create surface from a PIL Image (converted to RGB if needed)."""
        if image.mode != "RGB":
            logger.debug(f"Converting PIL image from mode {image.mode} to RGB")
            image = image.convert("RGB")
        return cls.from_rgb_array(np.array(image))

    def to_pil(self) -> Image.Image:
        """Return the surface as an RGB PIL Image."""
        return Image.fromarray(self.to_rgb_array())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageSurface):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"ImageSurface(width={self.width()}, height={self.height()})"
