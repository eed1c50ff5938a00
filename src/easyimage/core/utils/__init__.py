"""
Utils Package

Adapters between PIL images and Raster.
"""

from .conversion import from_pil, to_pil

__all__ = [
    "from_pil",
    "to_pil",
]
