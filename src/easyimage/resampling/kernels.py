"""
Module: resampling.kernels

Purpose:
    Reconstruction kernels evaluated on arrays of sample offsets.

Key Functions:
    - cubic(): Keys cubic convolution kernel, support 2 (4 taps)
    - linear(): Triangle kernel, support 1 (2 taps)
    - get_kernel(): Kernel function and support for an InterpolationMode

Dependencies:
    - numpy: Vectorised evaluation

Used By:
    - resampling.resampler: Per-axis tap weights
"""

from __future__ import annotations

from typing import Callable, Tuple

import numpy as np

from easyimage.core.models.policy import InterpolationMode

Kernel = Callable[[np.ndarray], np.ndarray]


def cubic(t: np.ndarray, a: float = -0.5) -> np.ndarray:
    """
    Keys cubic convolution kernel.

    k(0) == 1 and k(±1) == k(±2) == 0 exactly, so a sample landing on a
    pixel centre reproduces that pixel. Weights of the four taps around
    any position sum to 1.

    Args:
        t: Offsets between sample position and tap position
        a: Keys parameter, -0.5 gives the Catmull-Rom spline

    Returns:
        Kernel weights, same shape as t
    """
    at = np.abs(t)
    at2 = at * at
    at3 = at2 * at
    near = (a + 2.0) * at3 - (a + 3.0) * at2 + 1.0
    far = a * at3 - 5.0 * a * at2 + 8.0 * a * at - 4.0 * a
    return np.where(at <= 1.0, near, np.where(at < 2.0, far, 0.0))


def linear(t: np.ndarray) -> np.ndarray:
    """Triangle kernel, max(0, 1 - |t|)."""
    return np.maximum(0.0, 1.0 - np.abs(t))


def get_kernel(mode: InterpolationMode, cubic_coefficient: float = -0.5) -> Tuple[Kernel, int]:
    """
    Resolve an interpolation mode to (kernel, support).

    Support is the kernel radius in pixels; a sample uses 2 * support taps
    per axis.

    Raises:
        ValueError: If mode is not a known InterpolationMode
    """
    if mode is InterpolationMode.BICUBIC:
        return (lambda t: cubic(t, cubic_coefficient)), 2
    if mode is InterpolationMode.BILINEAR:
        return linear, 1
    raise ValueError(f"Unknown interpolation mode: {mode!r}")
