"""
Core Models Package

Immutable data models shared by the resampler and the transforms.

All models are frozen dataclasses: a transform never mutates what it is
given, and every output is a new instance.
"""

from .rectangle import Rectangle
from .raster import Raster, DEFAULT_RESOLUTION
from .policy import (
    InterpolationMode,
    InterpolationPolicy,
    PixelOffsetMode,
    WrapMode,
)

__all__ = [
    "Rectangle",
    "Raster",
    "DEFAULT_RESOLUTION",
    "InterpolationMode",
    "InterpolationPolicy",
    "PixelOffsetMode",
    "WrapMode",
]
