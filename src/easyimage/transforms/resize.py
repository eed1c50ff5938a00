"""
Module: transforms.resize

Purpose:
    Resize a raster to an explicit size, or to a target height or width
    with the other dimension kept proportional.

Key Functions:
    - resize(): Scale the full source extent to width x height
    - height_resize(): Target height, proportional width
    - width_resize(): Target width, proportional height

Dependencies:
    - resampling.resampler: resample()
    - core.models: Raster, Rectangle

Used By:
    - transforms.pil: PIL convenience wrappers
"""

from __future__ import annotations

import logging
from typing import Optional

from easyimage.config import TransformConfig
from easyimage.core.errors import DivisionByZeroError, InvalidGeometryError
from easyimage.core.models import Raster, Rectangle
from easyimage.resampling import resample

logger = logging.getLogger(__name__)


def resize(
    source: Raster,
    width: int,
    height: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Raster:
    """
    Resize the whole raster to width x height.

    Bicubic by default, with mirrored tiling for kernel taps that reach
    past the image edge. A zero width or height yields an empty raster.

    Args:
        source: Raster to resize (not modified)
        width: New width (>= 0)
        height: New height (>= 0)
        config: Transform configuration (default: DEFAULT_CONFIG)

    Returns:
        New Raster of width x height, resolution copied from source

    Raises:
        InvalidGeometryError: If width or height is negative
        AllocationFailureError: If the destination is too large

    Example:
        >>> resize(Raster.new(400, 300), 200, 150).size
        (200, 150)
    """
    if width < 0 or height < 0:
        raise InvalidGeometryError(f"Resize target must be non-negative: {width}x{height}")
    logger.debug(f"resize {source.width}x{source.height} -> {width}x{height}")
    dest = Rectangle.from_size(width, height)
    window = Rectangle.from_size(source.width, source.height)
    return resample(source, dest, window, config=config)


def proportional_width(source: Raster, height: int) -> int:
    """
    Width that keeps source's aspect ratio at the given height.

    Multiplies before dividing: (height * source.width) // source.height.

    Raises:
        InvalidGeometryError: If height is negative
        DivisionByZeroError: If source.height is 0
    """
    if height < 0:
        raise InvalidGeometryError(f"height must be non-negative: {height}")
    if source.height == 0:
        raise DivisionByZeroError(
            f"Cannot keep aspect ratio of {source.width}x{source.height} source: height is 0"
        )
    return (height * source.width) // source.height


def proportional_height(source: Raster, width: int) -> int:
    """
    Height that keeps source's aspect ratio at the given width.

    Multiplies before dividing: (width * source.height) // source.width.

    Raises:
        InvalidGeometryError: If width is negative
        DivisionByZeroError: If source.width is 0
    """
    if width < 0:
        raise InvalidGeometryError(f"width must be non-negative: {width}")
    if source.width == 0:
        raise DivisionByZeroError(
            f"Cannot keep aspect ratio of {source.width}x{source.height} source: width is 0"
        )
    return (width * source.height) // source.width


def height_resize(
    source: Raster,
    height: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Raster:
    """
    Resize to a target height, keeping width proportional.

    Example:
        >>> height_resize(Raster.new(100, 50), 100).size
        (200, 100)
    """
    return resize(source, proportional_width(source, height), height, config=config)


def width_resize(
    source: Raster,
    width: int,
    *,
    config: Optional[TransformConfig] = None,
) -> Raster:
    """
    Resize to a target width, keeping height proportional.

    Example:
        >>> width_resize(Raster.new(100, 50), 50).size
        (50, 25)
    """
    return resize(source, width, proportional_height(source, width), config=config)
