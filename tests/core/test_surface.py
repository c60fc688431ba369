"""
Tests for ImageSurface and the Surface protocol
"""

import numpy as np
import pytest
from PIL import Image

from pixelfilter.core.codec import pack
from pixelfilter.core.constants import PixelConstants
from pixelfilter.core.exceptions import InvalidParameterError
from pixelfilter.core.surface import ImageSurface, Surface


class TestImageSurface:
    """Test ImageSurface pixel access"""

    def test_dimensions(self, make_surface):
        """Test width, height and backing grid shape"""
        surface = make_surface(7, 4)
        assert surface.width() == 7
        assert surface.height() == 4
        assert surface.pixels.shape == (4, 7)

    def test_blank_fill(self, teal):
        """Test blank surface is filled with one value"""
        surface = ImageSurface.blank(3, 2, teal)
        assert all(surface.get_pixel(x, y) == teal for x in range(3) for y in range(2))

    def test_get_put_pixel(self, make_surface, teal):
        """Test pixels are addressed by (x, y)"""
        surface = make_surface(5, 5)
        surface.put_pixel(4, 1, teal)

        assert surface.get_pixel(4, 1) == teal
        assert surface.pixels[1, 4] == teal
        assert surface.get_pixel(1, 4) == PixelConstants.WHITE

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 3)])
    def test_out_of_bounds(self, make_surface, x, y):
        """Test out-of-range coordinates raise IndexError"""
        surface = make_surface(5, 3)
        with pytest.raises(IndexError):
            surface.get_pixel(x, y)
        with pytest.raises(IndexError):
            surface.put_pixel(x, y, 0)

    def test_copy_is_independent(self, make_surface, teal):
        """Test writes to a copy do not reach the original"""
        surface = make_surface(4, 4)
        clone = surface.copy()
        clone.put_pixel(0, 0, teal)

        assert surface.get_pixel(0, 0) == PixelConstants.WHITE
        assert clone != surface

    def test_constructor_copies_array(self):
        """Test the input array is copied on construction"""
        grid = np.zeros((2, 2), dtype=np.uint32)
        surface = ImageSurface(grid)
        grid[0, 0] = 5
        assert surface.get_pixel(0, 0) == 0

    def test_rejects_non_2d_array(self):
        """Test a 3D array is rejected"""
        with pytest.raises(InvalidParameterError):
            ImageSurface(np.zeros((2, 2, 3)))

    def test_empty_surface(self):
        """Test a 0x0 surface"""
        surface = ImageSurface.blank(0, 0)
        assert surface.width() == 0
        assert surface.height() == 0

    def test_equality(self, make_surface):
        """Test surfaces compare by content"""
        assert make_surface(3, 3) == make_surface(3, 3)
        assert make_surface(3, 3) != make_surface(3, 3, PixelConstants.BLACK)


class TestConversions:
    """Test conversions from and to other image containers"""

    @pytest.fixture
    def rgb(self):
        """Random RGB image"""
        rng = np.random.default_rng(3)
        return rng.integers(0, 256, size=(4, 6, 3), dtype=np.uint8)

    def test_rgb_round_trip(self, rgb):
        """Test RGB array conversion is lossless"""
        surface = ImageSurface.from_rgb_array(rgb)

        assert surface.width() == 6
        assert surface.height() == 4
        np.testing.assert_array_equal(surface.to_rgb_array(), rgb)

    def test_rgb_channel_order(self):
        """Test RGB channels land in the packed channel slots"""
        rgb = np.array([[[10, 20, 30]]], dtype=np.uint8)
        surface = ImageSurface.from_rgb_array(rgb)
        assert surface.get_pixel(0, 0) == pack(10, 20, 30)

    def test_rgb_rejects_wrong_shape(self):
        """Test a 2D array is not accepted as RGB"""
        with pytest.raises(InvalidParameterError):
            ImageSurface.from_rgb_array(np.zeros((4, 4), dtype=np.uint8))

    def test_bgr_round_trip(self, rgb):
        """Test OpenCV BGR conversion is lossless"""
        bgr = rgb[:, :, ::-1]
        surface = ImageSurface.from_bgr_array(bgr)

        assert surface == ImageSurface.from_rgb_array(rgb)
        np.testing.assert_array_equal(surface.to_bgr_array(), bgr)

    def test_bgr_from_grayscale(self):
        """Test grayscale OpenCV images expand to gray pixels"""
        gray = np.array([[0, 128], [200, 255]], dtype=np.uint8)
        surface = ImageSurface.from_bgr_array(gray)

        assert surface.get_pixel(1, 0) == pack(128, 128, 128)
        assert surface.get_pixel(0, 1) == pack(200, 200, 200)

    def test_pil_round_trip(self, rgb):
        """Test PIL conversion is lossless"""
        image = Image.fromarray(rgb)
        surface = ImageSurface.from_pil(image)

        restored = surface.to_pil()
        assert restored.mode == "RGB"
        assert restored.size == (6, 4)
        np.testing.assert_array_equal(np.array(restored), rgb)

    def test_pil_converts_mode(self):
        """Test non-RGB PIL images are converted"""
        image = Image.new("L", (3, 2), color=90)
        surface = ImageSurface.from_pil(image)
        assert surface.get_pixel(2, 1) == pack(90, 90, 90)


class TestSurfaceProtocol:
    """Test protocol conformance"""

    def test_image_surface_is_surface(self, make_surface):
        """Test ImageSurface satisfies Surface"""
        assert isinstance(make_surface(2, 2), Surface)

    def test_duck_typed_surface(self, dict_surface):
        """Test any object with the right methods satisfies Surface"""
        assert isinstance(dict_surface(2, 2), Surface)
