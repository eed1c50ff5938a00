"""
Module: transforms.crop

Purpose:
    Crop a raster by trimming pixel margins from each edge. The kept
    region is copied 1:1 through the resampler, so the result is a
    pixel-exact copy of the source window.

Key Functions:
    - crop(): Trim independent left/right/top/bottom margins
    - crop_symmetric(): Trim equal margins on opposite edges
    - crop_window(): Sampling window a crop would read

Dependencies:
    - resampling.resampler: resample()
    - core.models: Raster, Rectangle

Used By:
    - transforms.pil: crop_image()
"""

from __future__ import annotations

import logging
from typing import Optional

from easyimage.config import TransformConfig
from easyimage.core.errors import InvalidGeometryError
from easyimage.core.models import Raster, Rectangle
from easyimage.resampling import resample

logger = logging.getLogger(__name__)


def crop_window(source: Raster, left: int, right: int, top: int, bottom: int) -> Rectangle:
    """
    Compute the source window kept by a crop.

    Args:
        source: Raster being cropped
        left: Pixels removed from the left edge
        right: Pixels removed from the right edge
        top: Pixels removed from the top edge
        bottom: Pixels removed from the bottom edge

    Returns:
        Rectangle(left, top, width, height) in source coordinates where
        width = source.width - (left + right) and
        height = source.height - (top + bottom)

    Raises:
        InvalidGeometryError: If width or height is negative, or
            (left, top) lies outside the source

    Example:
        >>> crop_window(Raster.new(200, 100), 50, 10, 20, 5)
        Rectangle(50, 20, 140, 75)
    """
    width = source.width - (left + right)
    height = source.height - (top + bottom)
    if width < 0 or height < 0:
        raise InvalidGeometryError(
            f"Crop margins (left={left}, right={right}, top={top}, bottom={bottom}) "
            f"exceed source {source.width}x{source.height}: result {width}x{height}"
        )
    if not (0 <= left < source.width and 0 <= top < source.height):
        raise InvalidGeometryError(
            f"Crop origin ({left}, {top}) outside source {source.width}x{source.height}"
        )
    # Negative right/bottom margins extend past the source; the
    # resampler's wrap mode supplies those pixels.
    return Rectangle(left, top, width, height)


def crop(
    source: Raster,
    left: int,
    right: int,
    top: int,
    bottom: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Raster:
    """
    Crop a raster.

    The new size is (source.width - (left + right),
    source.height - (top + bottom)).

    Args:
        source: Raster to crop (not modified)
        left: Pixels removed from the left edge
        right: Pixels removed from the right edge
        top: Pixels removed from the top edge
        bottom: Pixels removed from the bottom edge
        config: Transform configuration (default: DEFAULT_CONFIG)

    Returns:
        New Raster, resolution copied from source

    Raises:
        InvalidGeometryError: If the margins leave a negative extent or
            the crop origin is outside the source

    Example:
        >>> cropped = crop(Raster.new(200, 100), 50, 10, 20, 5)
        >>> cropped.size
        (140, 75)
    """
    window = crop_window(source, left, right, top, bottom)
    logger.debug(
        f"crop {source.width}x{source.height} -> {window.width}x{window.height} "
        f"window={window.as_tuple()}"
    )
    dest = Rectangle.from_size(window.width, window.height)
    return resample(source, dest, window, config=config)


def crop_symmetric(
    source: Raster,
    x: int,
    y: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Raster:
    """
    Crop equal margins: x from left and right, y from top and bottom.

    Exactly crop(source, x, x, y, y).

    Example:
        >>> crop_symmetric(Raster.new(200, 100), 10, 5).size
        (180, 90)
    """
    return crop(source, x, x, y, y, config=config)
