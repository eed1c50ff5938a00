import pytest
import sys
from pathlib import Path

import numpy as np
from PIL import Image

# Add src to sys.path so we can import easyimage
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from easyimage.core.models import Raster  # noqa: E402


def make_pattern(width: int, height: int, channels: int = 3) -> np.ndarray:
    """Deterministic uint8 pattern where neighbouring pixels differ."""
    ys, xs = np.mgrid[0:height, 0:width]
    planes = [(xs * 7 + ys * 13 + c * 31) % 256 for c in range(channels)]
    if channels == 1:
        return planes[0].astype(np.uint8)
    return np.stack(planes, axis=-1).astype(np.uint8)


# Common test fixtures
@pytest.fixture
def pattern_raster():
    """200x100 RGB raster with a non-uniform pattern and 150 dpi."""
    return Raster(make_pattern(200, 100), 150.0, 72.0)


@pytest.fixture
def rgba_raster():
    """40x30 RGBA raster with varying alpha."""
    return Raster(make_pattern(40, 30, channels=4), 96.0, 96.0)


@pytest.fixture
def gray_raster():
    """32x16 single-channel raster."""
    return Raster(make_pattern(32, 16, channels=1))


@pytest.fixture
def sample_image():
    """Create a simple test image with dpi metadata."""
    img = Image.new("RGB", (200, 100), color="white")
    img.info["dpi"] = (300, 300)
    return img


@pytest.fixture
def pattern():
    """Factory for deterministic pixel arrays: pattern(width, height, channels)."""
    return make_pattern
