"""
Module: resampling

Purpose:
    Resampling engine: separable kernel reconstruction of a destination
    raster from a source window, with configurable boundary addressing.

Key Functions:
    - resample(): Fill a destination rectangle from a source window
    - tile_flip(): Mirrored-tiling index addressing
    - cubic(): Keys cubic kernel

Dependencies:
    - numpy: Pixel arithmetic

Used By:
    - transforms.crop
    - transforms.resize
"""

from .addressing import address, clamp, tile, tile_flip
from .kernels import cubic, get_kernel, linear
from .resampler import resample, sample_positions

__all__ = [
    "address",
    "clamp",
    "tile",
    "tile_flip",
    "cubic",
    "get_kernel",
    "linear",
    "resample",
    "sample_positions",
]
