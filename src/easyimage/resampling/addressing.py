"""
Module: resampling.addressing

Purpose:
    Boundary addressing: map integer source indices that fall outside
    [0, size) back into range according to a WrapMode.

Key Functions:
    - tile_flip(): Mirrored tiling, period 2 * size
    - tile(): Periodic tiling, period size
    - clamp(): Edge replication
    - address(): Dispatch on WrapMode

Dependencies:
    - numpy: Vectorised index arithmetic

Used By:
    - resampling.resampler: Neighbourhood indices on both axes

Example:
    For size 4 (pixels 0 1 2 3) tile_flip addresses
        index  -4 -3 -2 -1 | 0 1 2 3 | 4 5 6 7 | 8
        pixel   3  2  1  0 | 0 1 2 3 | 3 2 1 0 | 0
"""

from __future__ import annotations

import numpy as np

from easyimage.core.models.policy import WrapMode


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"Cannot address into an empty axis (size={size})")


def tile_flip(index: np.ndarray, size: int) -> np.ndarray:
    """
    Reflect indices back into [0, size) at every boundary crossing.

    Every other tile is flipped, so the edge pixel is repeated once at
    each crossing (-1 -> 0, size -> size - 1) and the pattern continues
    indefinitely in both directions.

    Args:
        index: Integer indices, any shape
        size: Axis length (> 0)

    Returns:
        Indices in [0, size), same shape as index
    """
    _check_size(size)
    period = 2 * size
    folded = np.mod(index, period)
    return np.where(folded >= size, period - 1 - folded, folded)


def tile(index: np.ndarray, size: int) -> np.ndarray:
    """Wrap indices periodically into [0, size)."""
    _check_size(size)
    return np.mod(index, size)


def clamp(index: np.ndarray, size: int) -> np.ndarray:
    """Clamp indices to the nearest edge pixel."""
    _check_size(size)
    return np.clip(index, 0, size - 1)


_ADDRESSERS = {
    WrapMode.TILE_FLIP_XY: tile_flip,
    WrapMode.TILE: tile,
    WrapMode.CLAMP: clamp,
}


def address(index: np.ndarray, size: int, wrap_mode: WrapMode) -> np.ndarray:
    """
    Map indices into [0, size) using wrap_mode.

    Raises:
        ValueError: If size <= 0 or wrap_mode is unknown
    """
    try:
        addresser = _ADDRESSERS[wrap_mode]
    except KeyError:
        raise ValueError(f"Unknown wrap mode: {wrap_mode!r}") from None
    return addresser(np.asarray(index), size)
