"""
Module: core.errors

Purpose:
    Exception taxonomy for raster transforms. Every failure is reported
    synchronously to the immediate caller; nothing is retried or recovered.

Key Classes:
    - EasyImageError: Base class for all package errors
    - InvalidGeometryError: Negative or impossible sizes and windows
    - DivisionByZeroError: Proportional resize against a zero dimension
    - AllocationFailureError: Destination raster cannot be allocated
    - UnsupportedModeError: Pixel layout is not L, RGB or RGBA

Used By:
    - core.models: Construction-time validation
    - resampling.resampler: Geometry and allocation checks
    - transforms: Crop and resize preconditions
"""


class EasyImageError(Exception):
    """Base class for errors raised by easyimage."""
    pass


class InvalidGeometryError(EasyImageError, ValueError):
    """A computed width/height is negative or a window is out of range."""
    pass


class DivisionByZeroError(EasyImageError, ZeroDivisionError):
    """A source dimension used as a divisor is zero."""
    pass


class AllocationFailureError(EasyImageError):
    """The destination raster could not be allocated."""
    pass


class UnsupportedModeError(EasyImageError, ValueError):
    """Pixel layout is not one of the supported modes."""
    pass
