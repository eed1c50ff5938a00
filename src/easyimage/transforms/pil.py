"""
Module: transforms.pil

Purpose:
    PIL-facing wrappers around crop/resize. Each call converts the image
    to a Raster, runs the transform and converts back; the input image
    is never modified and its dpi is carried to the result.

Key Functions:
    - crop_image(): crop() for PIL images
    - resize_image(): resize() for PIL images
    - height_resize_image(): height_resize() for PIL images
    - width_resize_image(): width_resize() for PIL images

Dependencies:
    - PIL: Image type
    - core.utils.conversion: from_pil / to_pil

Used By:
    - Callers that decode/encode with Pillow
"""

from __future__ import annotations

from typing import Optional

from PIL import Image

from easyimage.config import TransformConfig
from easyimage.core.utils import from_pil, to_pil
from easyimage.transforms.crop import crop
from easyimage.transforms.resize import height_resize, resize, width_resize


def crop_image(
    image: Image.Image,
    left: int,
    right: int,
    top: int,
    bottom: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Image.Image:
    """
    Crop a PIL image by edge margins.

    Example:
        >>> crop_image(Image.new("RGB", (200, 100)), 50, 10, 20, 5).size
        (140, 75)
    """
    return to_pil(crop(from_pil(image), left, right, top, bottom, config=config))


def resize_image(
    image: Image.Image,
    width: int,
    height: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Image.Image:
    """Resize a PIL image to width x height."""
    return to_pil(resize(from_pil(image), width, height, config=config))


def height_resize_image(
    image: Image.Image,
    height: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Image.Image:
    """Resize a PIL image to a target height, width proportional."""
    return to_pil(height_resize(from_pil(image), height, config=config))


def width_resize_image(
    image: Image.Image,
    width: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Image.Image:
    """Resize a PIL image to a target width, height proportional."""
    return to_pil(width_resize(from_pil(image), width, config=config))
