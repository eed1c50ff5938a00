"""
Module: core.utils.conversion

Purpose:
    Bridge between PIL images (the decode/encode collaborators) and
    Raster. Pixel data is always copied so neither side can observe
    writes made through the other.

Key Functions:
    - from_pil(): PIL image -> Raster
    - to_pil(): Raster -> PIL image

Dependencies:
    - numpy: Pixel arrays
    - PIL: Image construction

Used By:
    - transforms.pil: PIL convenience wrappers
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
from PIL import Image

from easyimage.core.errors import UnsupportedModeError
from easyimage.core.models.raster import DEFAULT_RESOLUTION, Raster

logger = logging.getLogger(__name__)

NATIVE_MODES = ("L", "RGB", "RGBA")

# Modes converted to the nearest native mode before copying
_PROMOTED_MODES = {
    "1": "L",
    "P": "RGBA",
    "LA": "RGBA",
    "RGBX": "RGB",
    "CMYK": "RGB",
    "YCbCr": "RGB",
}


def _resolution_of(image: Image.Image) -> Tuple[float, float]:
    """Read (horizontal, vertical) DPI from image.info, defaulting to 96."""
    dpi = image.info.get("dpi")
    if not dpi:
        return (DEFAULT_RESOLUTION, DEFAULT_RESOLUTION)
    horizontal, vertical = dpi
    return (float(horizontal), float(vertical))


def from_pil(image: Image.Image) -> Raster:
    """
    Copy a PIL image into a new Raster.

    Args:
        image: Source PIL image

    Returns:
        Raster in mode L, RGB or RGBA with resolution from image.info["dpi"]

    Raises:
        UnsupportedModeError: If the image mode has no L/RGB/RGBA equivalent

    Example:
        >>> raster = from_pil(Image.new("RGB", (200, 100), "white"))
        >>> raster.size
        (200, 100)
    """
    horizontal, vertical = _resolution_of(image)
    mode = image.mode
    if mode not in NATIVE_MODES:
        target = _PROMOTED_MODES.get(mode)
        if target is None:
            raise UnsupportedModeError(f"Unsupported PIL mode: {mode!r}")
        logger.debug(f"Converting PIL image from {mode} to {target}")
        image = image.convert(target)

    if image.width == 0 or image.height == 0:
        return Raster.new(image.width, image.height, image.mode, (horizontal, vertical))
    pixels = np.array(image, dtype=np.uint8)
    return Raster(pixels, horizontal, vertical)


def to_pil(raster: Raster) -> Image.Image:
    """
    Build a new PIL image from a Raster.

    Args:
        raster: Source raster (uint8-compatible pixel values)

    Returns:
        PIL image with info["dpi"] set from the raster resolution
    """
    if raster.is_empty:
        image = Image.new(raster.mode, raster.size)
    else:
        pixels = np.ascontiguousarray(raster.pixels)
        if pixels.dtype != np.uint8:
            pixels = np.clip(np.round(pixels), 0, 255).astype(np.uint8)
        image = Image.fromarray(pixels)
    image.info["dpi"] = raster.resolution
    return image
