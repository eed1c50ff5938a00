"""
easyimage Core Package

Data models, the error taxonomy and PIL adapters used by the resampler
and the crop/resize transforms.
"""

from .errors import (
    AllocationFailureError,
    DivisionByZeroError,
    EasyImageError,
    InvalidGeometryError,
    UnsupportedModeError,
)
from .models import (
    InterpolationMode,
    InterpolationPolicy,
    PixelOffsetMode,
    Raster,
    Rectangle,
    WrapMode,
)

__all__ = [
    "AllocationFailureError",
    "DivisionByZeroError",
    "EasyImageError",
    "InvalidGeometryError",
    "UnsupportedModeError",
    "InterpolationMode",
    "InterpolationPolicy",
    "PixelOffsetMode",
    "Raster",
    "Rectangle",
    "WrapMode",
]
