"""Top-level package for easyimage.

Crop and resize in-memory rasters with bicubic resampling.

Provides subpackages:
- easyimage.core – Raster, Rectangle, InterpolationPolicy, errors, PIL adapters
- easyimage.resampling – kernels, boundary addressing, resample()
- easyimage.transforms – crop/resize operations and PIL wrappers
"""

def _get_version() -> str:
    """Get version from installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("easyimage")
    except PackageNotFoundError:
        return "0.0.0"


from easyimage.config import DEFAULT_CONFIG, TransformConfig
from easyimage.core import (
    AllocationFailureError,
    DivisionByZeroError,
    EasyImageError,
    InterpolationMode,
    InterpolationPolicy,
    InvalidGeometryError,
    PixelOffsetMode,
    Raster,
    Rectangle,
    UnsupportedModeError,
    WrapMode,
)
from easyimage.core.utils import from_pil, to_pil
from easyimage.resampling import resample
from easyimage.transforms import (
    crop,
    crop_image,
    crop_symmetric,
    height_resize,
    height_resize_image,
    resize,
    resize_image,
    width_resize,
    width_resize_image,
)

__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    "DEFAULT_CONFIG",
    "TransformConfig",
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
    "from_pil",
    "to_pil",
    "resample",
    "crop",
    "crop_symmetric",
    "height_resize",
    "resize",
    "width_resize",
    "crop_image",
    "height_resize_image",
    "resize_image",
    "width_resize_image",
]
