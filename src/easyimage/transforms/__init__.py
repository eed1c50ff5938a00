"""
Module: transforms

Purpose:
    Geometric raster transforms built on the resampler.

Key Functions:
    - crop(), crop_symmetric(): Trim edge margins (pixel-exact)
    - resize(): Explicit width x height
    - height_resize(), width_resize(): Keep aspect ratio
    - crop_image(), resize_image(), ...: Same operations on PIL images
"""

from .crop import crop, crop_symmetric, crop_window
from .resize import (
    height_resize,
    proportional_height,
    proportional_width,
    resize,
    width_resize,
)
from .pil import crop_image, height_resize_image, resize_image, width_resize_image

__all__ = [
    "crop",
    "crop_symmetric",
    "crop_window",
    "height_resize",
    "proportional_height",
    "proportional_width",
    "resize",
    "width_resize",
    "crop_image",
    "height_resize_image",
    "resize_image",
    "width_resize_image",
]
