"""
Pytest configuration and fixtures for pixelfilter tests
"""

import numpy as np
import pytest

from pixelfilter.config import FilterSettings, Settings, SystemSettings
from pixelfilter.core.codec import pack
from pixelfilter.core.constants import PixelConstants
from pixelfilter.core.surface import ImageSurface
from pixelfilter.services.filter_service import FilterService

WHITE = PixelConstants.WHITE
BLACK = PixelConstants.BLACK


class DictSurface:
    """Minimal Surface implementation not backed by NumPy"""

    def __init__(self, width, height, fill=WHITE):
        self._width = width
        self._height = height
        self.cells = {(x, y): fill for x in range(width) for y in range(height)}

    def width(self):
        return self._width

    def height(self):
        return self._height

    def get_pixel(self, x, y):
        return self.cells[(x, y)]

    def put_pixel(self, x, y, pixel):
        if (x, y) not in self.cells:
            raise IndexError((x, y))
        self.cells[(x, y)] = pixel

    def copy(self):
        clone = DictSurface(self._width, self._height)
        clone.cells = dict(self.cells)
        return clone


@pytest.fixture
def make_surface():
    """Factory for ImageSurfaces filled with one pixel value"""

    def _make(width, height, fill=WHITE):
        return ImageSurface.blank(width, height, fill)

    return _make


@pytest.fixture
def paint_rect():
    """Helper that fills a rectangle of an ImageSurface (x, y inclusive)"""

    def _paint(surface, x, y, width, height, pixel=BLACK):
        surface.pixels[y : y + height, x : x + width] = pixel
        return surface

    return _paint


@pytest.fixture
def dict_surface():
    """Factory for surfaces not backed by NumPy"""
    return DictSurface


@pytest.fixture
def white_surface(make_surface):
    """10x10 all-white surface"""
    return make_surface(10, 10)


@pytest.fixture
def square_surface(make_surface, paint_rect):
    """12x12 white surface with a 6x6 black square at (3, 3)"""
    return paint_rect(make_surface(12, 12), 3, 3, 6, 6)


@pytest.fixture
def noisy_surface():
    """Deterministic random color surface"""
    rng = np.random.default_rng(1234)
    rgb = rng.integers(0, 256, size=(9, 11, 3), dtype=np.uint8)
    return ImageSurface.from_rgb_array(rgb)


@pytest.fixture
def l_shape_surface(make_surface, paint_rect):
    """20x16 white surface with an asymmetric black L shape"""
    surface = make_surface(20, 16)
    paint_rect(surface, 4, 3, 3, 9)
    paint_rect(surface, 7, 9, 6, 3)
    return surface


@pytest.fixture
def teal():
    """A packed mid-tone color"""
    return pack(30, 140, 160)


@pytest.fixture
def settings():
    """Settings independent of the environment"""
    return Settings(system=SystemSettings(), filters=FilterSettings())


@pytest.fixture
def filter_service(settings):
    """Create FilterService instance for testing"""
    return FilterService(settings=settings)
