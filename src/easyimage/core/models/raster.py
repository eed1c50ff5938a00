"""
Module: raster

Purpose:
    Provides the Raster dataclass - a 2-D grid of pixels backed by a numpy
    array, carrying horizontal/vertical resolution as opaque metadata.

Key Functions:
    - Raster.new(width, height, mode): Allocate a zero-filled raster
    - Raster.get_pixel(x, y): Read one pixel
    - Raster.with_resolution(h, v): Same pixels, different DPI metadata

Dependencies:
    - numpy: Pixel storage
    - core.errors: InvalidGeometryError, UnsupportedModeError

Used By:
    - resampling.resampler: Source and destination of every transform
    - transforms: Public operation signatures
    - core.utils.conversion: PIL adapters

Array Layout:
    mode "L"    -> shape (height, width)
    mode "RGB"  -> shape (height, width, 3)
    mode "RGBA" -> shape (height, width, 4)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple, Union

import numpy as np

from easyimage.core.errors import InvalidGeometryError, UnsupportedModeError

# Resolution assigned when a source does not report one
DEFAULT_RESOLUTION = 96.0

MODE_CHANNELS = {"L": 1, "RGB": 3, "RGBA": 4}
_CHANNEL_MODES = {3: "RGB", 4: "RGBA"}

Pixel = Union[int, float, Tuple[int, ...], Tuple[float, ...]]


@dataclass(frozen=True, eq=False)
class Raster:
    """
    Immutable (from this package's viewpoint) pixel grid.

    Transforms never write into ``pixels`` of a raster they receive;
    every output raster owns a freshly allocated array.

    Attributes:
        pixels: numpy array, (H, W) for L or (H, W, C) for RGB/RGBA
        horizontal_resolution: Horizontal DPI (opaque metadata)
        vertical_resolution: Vertical DPI (opaque metadata)

    Example:
        >>> raster = Raster.new(200, 100)
        >>> raster.size, raster.mode
        ((200, 100), 'RGB')
    """

    pixels: np.ndarray
    horizontal_resolution: float = DEFAULT_RESOLUTION
    vertical_resolution: float = DEFAULT_RESOLUTION

    def __post_init__(self) -> None:
        """Validate pixel layout on construction."""
        if not isinstance(self.pixels, np.ndarray):
            raise UnsupportedModeError(
                f"pixels must be a numpy array, got {type(self.pixels).__name__}"
            )
        if self.pixels.ndim == 3:
            if self.pixels.shape[2] not in _CHANNEL_MODES:
                raise UnsupportedModeError(
                    f"Unsupported channel count: {self.pixels.shape[2]}"
                )
        elif self.pixels.ndim != 2:
            raise UnsupportedModeError(
                f"pixels must be 2-D or 3-D, got {self.pixels.ndim} dimensions"
            )

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        mode: str = "RGB",
        resolution: Tuple[float, float] = (DEFAULT_RESOLUTION, DEFAULT_RESOLUTION),
        dtype: np.dtype = np.uint8,
    ) -> Raster:
        """
        Allocate a zero-filled raster.

        Args:
            width: Width in pixels (>= 0)
            height: Height in pixels (>= 0)
            mode: "L", "RGB" or "RGBA"
            resolution: (horizontal, vertical) DPI
            dtype: Array element type

        Returns:
            New Raster

        Raises:
            InvalidGeometryError: If width or height is negative
            UnsupportedModeError: If mode is unknown
        """
        if width < 0 or height < 0:
            raise InvalidGeometryError(
                f"Raster size must be non-negative: {width}x{height}"
            )
        if mode not in MODE_CHANNELS:
            raise UnsupportedModeError(f"Unsupported mode: {mode!r}")
        channels = MODE_CHANNELS[mode]
        shape = (height, width) if channels == 1 else (height, width, channels)
        horizontal, vertical = resolution
        return cls(np.zeros(shape, dtype=dtype), float(horizontal), float(vertical))

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple, PIL order."""
        return (self.width, self.height)

    @property
    def channels(self) -> int:
        return 1 if self.pixels.ndim == 2 else int(self.pixels.shape[2])

    @property
    def mode(self) -> str:
        """"L", "RGB" or "RGBA"."""
        if self.pixels.ndim == 2:
            return "L"
        return _CHANNEL_MODES[self.pixels.shape[2]]

    @property
    def resolution(self) -> Tuple[float, float]:
        """(horizontal, vertical) DPI."""
        return (self.horizontal_resolution, self.vertical_resolution)

    @property
    def is_empty(self) -> bool:
        """True when the raster has zero area."""
        return self.width == 0 or self.height == 0

    # ─────────────────────────────────────────────────────────────────────────
    # Pixel Access
    # ─────────────────────────────────────────────────────────────────────────

    def get_pixel(self, x: int, y: int) -> Pixel:
        """
        Read the pixel at (x, y).

        Args:
            x: Column, 0 <= x < width
            y: Row, 0 <= y < height

        Returns:
            Scalar for L, tuple of channel values for RGB/RGBA

        Raises:
            IndexError: If (x, y) is outside the raster
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside raster {self.width}x{self.height}"
            )
        value = self.pixels[y, x]
        if self.pixels.ndim == 2:
            return value.item()
        return tuple(v.item() for v in value)

    def with_resolution(self, horizontal: float, vertical: float) -> Raster:
        """Return a raster sharing these pixels with new resolution metadata."""
        return replace(
            self,
            horizontal_resolution=float(horizontal),
            vertical_resolution=float(vertical),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Raster({self.width}x{self.height}, {self.mode}, "
            f"dpi=({self.horizontal_resolution:g}, {self.vertical_resolution:g}))"
        )
