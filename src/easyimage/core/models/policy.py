"""
Module: policy

Purpose:
    Interpolation policy applied uniformly by the resampler: which
    reconstruction kernel to use, where inside a pixel samples are taken,
    and how neighbourhood indices outside the source are addressed.

Key Classes:
    - InterpolationMode: Reconstruction kernel (bicubic, bilinear)
    - PixelOffsetMode: Pixel-centre or pixel-corner sampling
    - WrapMode: Boundary addressing (tile-flip, tile, clamp)
    - InterpolationPolicy: Frozen bundle of the above

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - config.TransformConfig: Default policy
    - resampling.resampler: Kernel, offset and addressing selection
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InterpolationMode(Enum):
    """Reconstruction filter used for every destination pixel."""

    BICUBIC = "bicubic"
    BILINEAR = "bilinear"


class PixelOffsetMode(Enum):
    """
    Where a destination pixel is sampled from.

    HIGH_QUALITY maps pixel centres onto pixel centres, so a 1:1 window
    lands exactly on source pixels. NONE maps the top-left corner of each
    destination pixel.
    """

    HIGH_QUALITY = "high_quality"
    NONE = "none"


class WrapMode(Enum):
    """
    Addressing for neighbourhood indices outside the source extent.

    TILE_FLIP_XY mirrors the image at every edge crossing (period 2n).
    TILE repeats it (period n). CLAMP replicates the edge pixel.
    """

    TILE_FLIP_XY = "tile_flip_xy"
    TILE = "tile"
    CLAMP = "clamp"


@dataclass(frozen=True)
class InterpolationPolicy:
    """
    Sampling configuration for one resample call (immutable).

    Compositing is always source-copy: destination pixels are fully
    overwritten and alpha is resampled like any other channel, never
    blended onto a backdrop.

    Attributes:
        interpolation: Reconstruction kernel (default BICUBIC)
        pixel_offset: Sampling position inside a pixel (default HIGH_QUALITY)
        wrap_mode: Out-of-range addressing (default TILE_FLIP_XY)
        cubic_coefficient: Keys cubic parameter ``a`` (default -0.5)

    Example:
        >>> policy = InterpolationPolicy.high_quality()
        >>> policy.wrap_mode
        <WrapMode.TILE_FLIP_XY: 'tile_flip_xy'>
    """

    interpolation: InterpolationMode = InterpolationMode.BICUBIC
    pixel_offset: PixelOffsetMode = PixelOffsetMode.HIGH_QUALITY
    wrap_mode: WrapMode = WrapMode.TILE_FLIP_XY
    cubic_coefficient: float = -0.5

    def __post_init__(self) -> None:
        """Validate policy on construction."""
        if not -1.0 <= self.cubic_coefficient <= 0.0:
            raise ValueError(
                f"cubic_coefficient must be in [-1.0, 0.0]: {self.cubic_coefficient}"
            )

    @classmethod
    def high_quality(cls) -> InterpolationPolicy:
        """Bicubic, pixel-centre sampling, mirrored tiling."""
        return cls()
