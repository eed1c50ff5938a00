"""
Unit Tests for PIL Adapters

Tests for from_pil() / to_pil() pixel copying and dpi handling.
"""

import numpy as np
import pytest
from PIL import Image

from easyimage.core.errors import UnsupportedModeError
from easyimage.core.models.raster import Raster
from easyimage.core.utils.conversion import from_pil, to_pil


class TestFromPil:
    """Tests for from_pil()."""

    def test_from_pil_when_rgb_then_copies_pixels(self, sample_image):
        raster = from_pil(sample_image)
        assert raster.size == (200, 100)
        assert raster.mode == "RGB"
        assert raster.get_pixel(0, 0) == (255, 255, 255)

    def test_from_pil_when_dpi_present_then_resolution_copied(self, sample_image):
        assert from_pil(sample_image).resolution == (300.0, 300.0)

    def test_from_pil_when_no_dpi_then_default_resolution(self):
        raster = from_pil(Image.new("L", (4, 4)))
        assert raster.resolution == (96.0, 96.0)

    def test_from_pil_when_palette_then_promoted_to_rgba(self):
        image = Image.new("P", (4, 4))
        image.info["dpi"] = (200, 200)
        raster = from_pil(image)
        assert raster.mode == "RGBA"
        assert raster.resolution == (200.0, 200.0)

    def test_from_pil_when_bilevel_then_promoted_to_gray(self):
        raster = from_pil(Image.new("1", (8, 2), color=1))
        assert raster.mode == "L"
        assert raster.get_pixel(7, 1) == 255

    def test_from_pil_when_float_mode_then_raises_error(self):
        with pytest.raises(UnsupportedModeError, match="'F'"):
            from_pil(Image.new("F", (4, 4)))

    def test_from_pil_when_image_modified_later_then_raster_unchanged(self, sample_image):
        raster = from_pil(sample_image)
        sample_image.putpixel((0, 0), (0, 0, 0))
        assert raster.get_pixel(0, 0) == (255, 255, 255)

    def test_from_pil_when_zero_size_then_empty_raster(self):
        raster = from_pil(Image.new("RGB", (0, 5)))
        assert raster.size == (0, 5)
        assert raster.is_empty is True


class TestToPil:
    """Tests for to_pil()."""

    def test_to_pil_when_rgba_then_pixels_match(self, rgba_raster):
        image = to_pil(rgba_raster)
        assert image.mode == "RGBA"
        assert image.size == rgba_raster.size
        assert np.array_equal(np.array(image), rgba_raster.pixels)

    def test_to_pil_when_gray_then_mode_l(self, gray_raster):
        assert to_pil(gray_raster).mode == "L"

    def test_to_pil_when_called_then_dpi_set(self, pattern_raster):
        assert to_pil(pattern_raster).info["dpi"] == (150.0, 72.0)

    def test_to_pil_when_empty_then_zero_size_image(self):
        image = to_pil(Raster.new(0, 5, "RGB"))
        assert image.size == (0, 5)
