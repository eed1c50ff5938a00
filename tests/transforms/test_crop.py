"""
Tests for transforms.crop

Test Coverage:
- crop(): Size arithmetic, pixel-exact copy, metadata pass-through
- crop_symmetric(): Equivalence with crop(x, x, y, y)
- crop_window(): Sampling window and validation
- Overhanging windows follow mirrored tiling
"""
import numpy as np
import pytest

from easyimage.core.errors import InvalidGeometryError
from easyimage.core.models import Raster, Rectangle
from easyimage.transforms.crop import crop, crop_symmetric, crop_window


def test_crop_basic(pattern_raster):
    """200x100 cropped by (50, 10, 20, 5) gives 140x75."""
    # Act
    result = crop(pattern_raster, 50, 10, 20, 5)

    # Assert
    assert result.size == (140, 75)


def test_crop_window_basic(pattern_raster):
    """Window starts at (left, top) with the destination's size."""
    assert crop_window(pattern_raster, 50, 10, 20, 5) == Rectangle(50, 20, 140, 75)


def test_crop_is_pixel_exact(pattern_raster):
    """Output equals the source region exactly."""
    # Act
    result = crop(pattern_raster, 50, 10, 20, 5)

    # Assert
    assert np.array_equal(result.pixels, pattern_raster.pixels[20:95, 50:190])


@pytest.mark.parametrize(
    "left, right, top, bottom",
    [(0, 0, 0, 0), (1, 2, 3, 4), (199, 0, 99, 0), (0, 199, 0, 99), (10, 10, 10, 10)],
)
def test_crop_size_arithmetic(pattern_raster, left, right, top, bottom):
    """width = w - (left + right), height = h - (top + bottom)."""
    result = crop(pattern_raster, left, right, top, bottom)

    assert result.width == 200 - (left + right)
    assert result.height == 100 - (top + bottom)


def test_crop_symmetric_matches_crop(pattern_raster):
    """crop_symmetric(x, y) is crop(x, x, y, y)."""
    # Act
    symmetric = crop_symmetric(pattern_raster, 30, 12)
    explicit = crop(pattern_raster, 30, 30, 12, 12)

    # Assert
    assert symmetric.size == (140, 76)
    assert np.array_equal(symmetric.pixels, explicit.pixels)


def test_crop_preserves_resolution(pattern_raster):
    """Resolution is copied verbatim."""
    result = crop(pattern_raster, 5, 5, 5, 5)

    assert result.resolution == (150.0, 72.0)


def test_crop_preserves_mode(rgba_raster, gray_raster):
    """RGBA and L inputs keep their mode and alpha."""
    rgba = crop(rgba_raster, 1, 2, 3, 4)
    gray = crop(gray_raster, 1, 1, 1, 1)

    assert rgba.mode == "RGBA"
    assert np.array_equal(rgba.pixels[..., 3], rgba_raster.pixels[3:26, 1:38, 3])
    assert gray.mode == "L"


def test_crop_does_not_modify_source(pattern_raster):
    """Source pixels are untouched and not shared with the output."""
    before = pattern_raster.pixels.copy()

    result = crop(pattern_raster, 50, 10, 20, 5)

    assert np.array_equal(pattern_raster.pixels, before)
    assert not np.shares_memory(result.pixels, pattern_raster.pixels)


def test_crop_zero_width_result(pattern_raster):
    """Margins consuming the full width give a valid empty raster."""
    result = crop(pattern_raster, 100, 100, 0, 0)

    assert result.size == (0, 100)
    assert result.is_empty


def test_crop_margins_exceed_source(pattern_raster):
    """Negative resulting extent raises InvalidGeometryError."""
    with pytest.raises(InvalidGeometryError, match="exceed source"):
        crop(pattern_raster, 150, 60, 0, 0)


def test_crop_margins_exceed_height(pattern_raster):
    with pytest.raises(InvalidGeometryError, match="exceed source"):
        crop(pattern_raster, 0, 0, 60, 41)


@pytest.mark.parametrize(
    "left, right, top, bottom",
    [(-1, 0, 0, 0), (0, 0, -1, 0), (200, -10, 0, 0), (0, 0, 100, -5)],
)
def test_crop_origin_outside_source(pattern_raster, left, right, top, bottom):
    """Window top-left outside the source raises InvalidGeometryError."""
    with pytest.raises(InvalidGeometryError, match="outside source"):
        crop(pattern_raster, left, right, top, bottom)


def test_crop_overhanging_window_is_mirrored(pattern):
    """Negative right margin reads past the edge with tile-flip addressing."""
    # Arrange
    source = Raster(pattern(4, 4))

    # Act - window (2, 0, 4, 4) covers columns 2, 3, then mirrored 3, 2
    result = crop(source, 2, -2, 0, 0)

    # Assert
    assert result.size == (4, 4)
    assert np.array_equal(result.pixels[:, :2], source.pixels[:, 2:4])
    assert np.array_equal(result.pixels[:, 2], source.pixels[:, 3])
    assert np.array_equal(result.pixels[:, 3], source.pixels[:, 2])


def test_crop_overhanging_bottom_is_mirrored(pattern):
    source = Raster(pattern(3, 3))

    result = crop(source, 0, 0, 1, -2)

    assert result.size == (3, 4)
    assert np.array_equal(result.pixels[0], source.pixels[1])
    assert np.array_equal(result.pixels[2], source.pixels[2])
    assert np.array_equal(result.pixels[3], source.pixels[1])
