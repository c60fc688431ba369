"""
Tests for 3x3 neighborhood transforms
"""

import math

import numpy as np
import pytest

from pixelfilter.core.codec import luma, pack, pack_array
from pixelfilter.core.constants import Kernels, PixelConstants
from pixelfilter.core.surface import ImageSurface
from pixelfilter.filters.neighborhood import (
    laplacian,
    laplacian_grid,
    smooth_mean,
    smooth_median,
    sobel_gradient,
    sobel_gradient_grid,
)


def reference_convolution(surface, kernel, x, y):
    """Scalar window sum used to cross-check the vectorized filters"""
    total = 0
    for dy in Kernels.WINDOW_OFFSETS:
        for dx in Kernels.WINDOW_OFFSETS:
            total += kernel[dy + 1][dx + 1] * luma(surface.get_pixel(x + dx, y + dy))
    return total


def channel_surface(red, green=None, blue=None):
    """Build a surface from per-channel grids (missing channels are zero)"""
    red = np.asarray(red)
    green = np.zeros_like(red) if green is None else np.asarray(green)
    blue = np.zeros_like(red) if blue is None else np.asarray(blue)
    return ImageSurface(pack_array(red, green, blue))


class TestSmoothing:
    """Test mean and median smoothing"""

    @pytest.mark.parametrize("smooth", [smooth_mean, smooth_median])
    def test_uniform_surface_unchanged(self, smooth, make_surface, teal):
        """Test smoothing a single color changes nothing"""
        surface = make_surface(6, 5, teal)
        smooth(surface)
        assert surface == make_surface(6, 5, teal)

    def test_mean_truncates(self):
        """Test the window sum is integer-divided by 9"""
        red = np.arange(9).reshape(3, 3)
        green = np.full((3, 3), 10)
        blue = np.zeros((3, 3))
        blue[0, 2] = 80
        surface = channel_surface(red, green, blue)

        smooth_mean(surface)

        assert surface.get_pixel(1, 1) == pack(4, 10, 8)
        assert surface.get_pixel(0, 0) == pack(0, 10, 0)

    def test_median_picks_middle_value(self):
        """Test the 5th smallest of 9 values is chosen"""
        red = [[9, 1, 8], [2, 7, 3], [6, 4, 5]]
        surface = channel_surface(red)

        smooth_median(surface)

        assert surface.get_pixel(1, 1) == pack(5, 0, 0)

    def test_median_removes_salt_noise(self):
        """Test a single bright pixel is removed"""
        blue = np.zeros((5, 5))
        blue[2, 2] = 255
        surface = channel_surface(np.zeros((5, 5)), blue=blue)

        smooth_median(surface)

        assert surface.get_pixel(2, 2) == PixelConstants.BLACK

    def test_reads_from_snapshot(self):
        """Test each output uses original values, not already smoothed neighbors"""
        red = np.zeros((3, 5))
        red[1, 1] = 90
        surface = channel_surface(red)

        smooth_mean(surface)

        assert surface.get_pixel(1, 1) == pack(10, 0, 0)
        assert surface.get_pixel(2, 1) == pack(10, 0, 0)
        assert surface.get_pixel(3, 1) == pack(0, 0, 0)


class TestEdgeDetection:
    """Test Sobel and Laplacian responses"""

    @pytest.fixture
    def vertical_edge(self, make_surface, paint_rect):
        """5x5 white surface whose two leftmost columns are black"""
        return paint_rect(make_surface(5, 5), 0, 0, 2, 5)

    @pytest.mark.parametrize("edge", [sobel_gradient, laplacian])
    def test_flat_region_gives_zero(self, edge, make_surface, teal):
        """Test a flat region has no edge response"""
        surface = make_surface(5, 5, teal)
        edge(surface)
        assert surface.get_pixel(2, 2) == PixelConstants.BLACK
        assert surface.get_pixel(0, 0) == teal

    def test_sobel_edge_wraps(self, vertical_edge):
        """Test a 1020 magnitude is kept modulo 256"""
        sobel_gradient(vertical_edge)

        assert vertical_edge.get_pixel(1, 2) == pack(252, 252, 252)
        assert vertical_edge.get_pixel(2, 2) == pack(252, 252, 252)
        assert vertical_edge.get_pixel(3, 2) == PixelConstants.BLACK

    def test_sobel_edge_clamped(self, vertical_edge):
        """Test clamping saturates the magnitude at 255"""
        sobel_gradient(vertical_edge, clamp=True)

        assert vertical_edge.get_pixel(1, 1) == PixelConstants.WHITE
        assert vertical_edge.get_pixel(2, 3) == PixelConstants.WHITE
        assert vertical_edge.get_pixel(3, 3) == PixelConstants.BLACK

    def test_border_untouched(self, vertical_edge):
        """Test the outer ring keeps its values"""
        sobel_gradient(vertical_edge)

        for i in range(5):
            assert vertical_edge.get_pixel(0, i) == PixelConstants.BLACK
            assert vertical_edge.get_pixel(4, i) == PixelConstants.WHITE

    def test_laplacian_spot(self, make_surface):
        """Test positive and negative responses wrap"""
        surface = make_surface(5, 5)
        surface.put_pixel(2, 2, PixelConstants.BLACK)

        laplacian(surface)

        assert surface.get_pixel(2, 2) == pack(252, 252, 252)
        assert surface.get_pixel(1, 2) == pack(1, 1, 1)
        assert surface.get_pixel(2, 3) == pack(1, 1, 1)
        assert surface.get_pixel(1, 1) == PixelConstants.BLACK

    def test_laplacian_spot_clamped(self, make_surface):
        """Test clamping keeps responses in 0-255"""
        surface = make_surface(5, 5)
        surface.put_pixel(2, 2, PixelConstants.BLACK)

        laplacian(surface, clamp=True)

        assert surface.get_pixel(2, 2) == PixelConstants.WHITE
        assert surface.get_pixel(2, 1) == PixelConstants.BLACK

    def test_sobel_matches_reference(self, noisy_surface):
        """Test Sobel against a per-pixel window sum"""
        original = noisy_surface.copy()

        sobel_gradient(noisy_surface, clamp=True)

        for y in range(1, original.height() - 1):
            for x in range(1, original.width() - 1):
                gx = reference_convolution(original, Kernels.SOBEL_X, x, y)
                gy = reference_convolution(original, Kernels.SOBEL_Y, x, y)
                value = min(int(math.floor(math.sqrt(gx * gx + gy * gy) + 0.5)), 255)
                assert noisy_surface.get_pixel(x, y) == pack(value, value, value)

    def test_laplacian_matches_reference(self, noisy_surface):
        """Test Laplacian against a per-pixel window sum"""
        original = noisy_surface.copy()

        laplacian(noisy_surface)

        for y in range(1, original.height() - 1):
            for x in range(1, original.width() - 1):
                value = reference_convolution(original, Kernels.LAPLACIAN, x, y)
                assert noisy_surface.get_pixel(x, y) == pack(value, value, value)

    def test_grid_functions_do_not_modify_source(self, noisy_surface):
        """Test grid functions accept a read-only source"""
        source = noisy_surface.pixels.copy()
        source.flags.writeable = False

        sobel_gradient_grid(source)
        laplacian_grid(source, clamp=True)

        np.testing.assert_array_equal(source, noisy_surface.pixels)


class TestDegenerateSizes:
    """Surfaces without an interior are left alone"""

    @pytest.mark.parametrize("size", [(2, 2), (1, 5), (5, 2), (0, 0)])
    @pytest.mark.parametrize(
        "operation", [smooth_mean, smooth_median, sobel_gradient, laplacian]
    )
    def test_unchanged(self, size, operation, make_surface, teal):
        """Test surfaces narrower or shorter than 3 pixels are not modified"""
        width, height = size
        surface = make_surface(width, height, teal)
        if width and height:
            surface.put_pixel(0, 0, PixelConstants.BLACK)
        original = surface.copy()

        operation(surface)

        assert surface == original


class TestGenericSurface:
    """Filters work on any Surface implementation"""

    def test_median_on_dict_surface(self, dict_surface):
        """Test median smoothing through get_pixel/put_pixel"""
        surface = dict_surface(3, 3)
        surface.put_pixel(1, 1, PixelConstants.BLACK)

        smooth_median(surface)

        assert surface.get_pixel(1, 1) == PixelConstants.WHITE

    def test_sobel_on_dict_surface(self, dict_surface):
        """Test Sobel through get_pixel/put_pixel"""
        surface = dict_surface(5, 5)
        for y in range(5):
            surface.put_pixel(0, y, PixelConstants.BLACK)
            surface.put_pixel(1, y, PixelConstants.BLACK)

        sobel_gradient(surface)

        assert surface.get_pixel(2, 2) == pack(252, 252, 252)
        assert surface.get_pixel(0, 2) == PixelConstants.BLACK
