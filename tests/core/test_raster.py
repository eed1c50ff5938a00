"""
Unit Tests for Raster Model

Tests for pixel layout validation, allocation and pixel access.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from easyimage.core.errors import InvalidGeometryError, UnsupportedModeError
from easyimage.core.models.raster import DEFAULT_RESOLUTION, Raster


class TestRasterConstruction:
    """Tests for Raster construction and Raster.new()."""

    @pytest.mark.parametrize(
        "mode, shape",
        [("L", (10, 20)), ("RGB", (10, 20, 3)), ("RGBA", (10, 20, 4))],
    )
    def test_new_when_mode_given_then_allocates_zeroed_array(self, mode, shape):
        raster = Raster.new(20, 10, mode)
        assert raster.pixels.shape == shape
        assert raster.pixels.dtype == np.uint8
        assert not raster.pixels.any()
        assert raster.mode == mode

    def test_new_when_zero_width_then_empty_raster(self):
        raster = Raster.new(0, 50)
        assert raster.size == (0, 50)
        assert raster.is_empty is True

    def test_new_when_negative_size_then_raises_error(self):
        with pytest.raises(InvalidGeometryError, match="non-negative"):
            Raster.new(-1, 10)

    def test_new_when_unknown_mode_then_raises_error(self):
        with pytest.raises(UnsupportedModeError):
            Raster.new(10, 10, "CMYK")

    def test_new_when_resolution_given_then_stored_as_floats(self):
        raster = Raster.new(4, 4, resolution=(300, 150))
        assert raster.resolution == (300.0, 150.0)
        assert isinstance(raster.horizontal_resolution, float)

    def test_init_when_no_resolution_then_defaults(self):
        raster = Raster(np.zeros((2, 2), dtype=np.uint8))
        assert raster.resolution == (DEFAULT_RESOLUTION, DEFAULT_RESOLUTION)

    def test_init_when_one_dimensional_then_raises_error(self):
        with pytest.raises(UnsupportedModeError, match="2-D or 3-D"):
            Raster(np.zeros(10, dtype=np.uint8))

    def test_init_when_two_channels_then_raises_error(self):
        with pytest.raises(UnsupportedModeError, match="channel count"):
            Raster(np.zeros((4, 4, 2), dtype=np.uint8))

    def test_init_when_not_array_then_raises_error(self):
        with pytest.raises(UnsupportedModeError, match="numpy array"):
            Raster([[0, 0], [0, 0]])

    def test_raster_is_frozen(self):
        raster = Raster.new(2, 2)
        with pytest.raises(FrozenInstanceError):
            raster.horizontal_resolution = 300.0


class TestRasterAccess:
    """Tests for properties and pixel access."""

    def test_size_when_rgb_then_width_height(self, pattern_raster):
        assert pattern_raster.width == 200
        assert pattern_raster.height == 100
        assert pattern_raster.size == (200, 100)
        assert pattern_raster.channels == 3

    def test_get_pixel_when_rgb_then_returns_tuple(self):
        pixels = np.zeros((2, 3, 3), dtype=np.uint8)
        pixels[1, 2] = (10, 20, 30)
        assert Raster(pixels).get_pixel(2, 1) == (10, 20, 30)

    def test_get_pixel_when_gray_then_returns_int(self):
        pixels = np.zeros((2, 3), dtype=np.uint8)
        pixels[0, 1] = 42
        value = Raster(pixels).get_pixel(1, 0)
        assert value == 42
        assert isinstance(value, int)

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (200, 0), (0, 100)])
    def test_get_pixel_when_out_of_range_then_raises_index_error(self, pattern_raster, x, y):
        with pytest.raises(IndexError):
            pattern_raster.get_pixel(x, y)

    def test_with_resolution_when_called_then_original_unchanged(self, pattern_raster):
        updated = pattern_raster.with_resolution(300, 300)
        assert updated.resolution == (300.0, 300.0)
        assert pattern_raster.resolution == (150.0, 72.0)
        assert updated.pixels is pattern_raster.pixels

    def test_repr_when_called_then_concise(self, pattern_raster):
        assert repr(pattern_raster) == "Raster(200x100, RGB, dpi=(150, 72))"
