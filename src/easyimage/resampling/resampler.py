"""
Module: resampling.resampler

Purpose:
    Compute a destination raster from a source raster under an
    axis-aligned affine map (scale + translate). This is the only module
    that reads or writes pixel data.

Key Functions:
    - resample(): Fill a destination rectangle from a source window
    - sample_positions(): Source coordinates for one destination axis

Dependencies:
    - numpy: Gather and weighted accumulation
    - resampling.kernels: Tap weights
    - resampling.addressing: Out-of-range index mapping

Used By:
    - transforms.crop: 1:1 window (integer translation)
    - transforms.resize: Full-extent window (scale)

Algorithm:
    The 2-D kernel is separable, so each axis is resolved to a
    (taps, weights) pair independently. Source rows touched by the
    vertical taps are gathered once, filtered horizontally, then combined
    vertically. When an axis is a pure translation (window length equals
    destination length) its taps are computed in integer arithmetic with
    a single unit weight, and when both axes are translations the
    destination is a direct index copy with no floating point involved.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import ContextManager, Optional, Tuple

import numpy as np

from easyimage.config import DEFAULT_CONFIG, TransformConfig
from easyimage.core.errors import AllocationFailureError, InvalidGeometryError
from easyimage.core.models import (
    InterpolationPolicy,
    PixelOffsetMode,
    Raster,
    Rectangle,
)
from easyimage.resampling.addressing import address
from easyimage.resampling.kernels import get_kernel
from easyimage.timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)

# (indices, weights), both shaped (destination_length, taps)
AxisTaps = Tuple[np.ndarray, np.ndarray]


def sample_positions(
    dest_length: int,
    window_origin: int,
    window_length: int,
    pixel_offset: PixelOffsetMode = PixelOffsetMode.HIGH_QUALITY,
) -> np.ndarray:
    """
    Source coordinate sampled for each destination pixel along one axis.

    With HIGH_QUALITY offsets, pixel centres map to pixel centres:
    ``s = origin + (d + 0.5) * scale - 0.5``. With NONE, pixel corners
    map to pixel corners: ``s = origin + d * scale``.

    Args:
        dest_length: Number of destination pixels (> 0)
        window_origin: First source pixel of the sampling window
        window_length: Source pixels covered by the window
        pixel_offset: Sampling position inside each pixel

    Returns:
        float64 array of length dest_length

    Example:
        >>> sample_positions(2, 0, 4)
        array([0.5, 2.5])
    """
    scale = window_length / dest_length
    d = np.arange(dest_length, dtype=np.float64)
    if pixel_offset is PixelOffsetMode.HIGH_QUALITY:
        return window_origin + (d + 0.5) * scale - 0.5
    return window_origin + d * scale


def _axis_taps(
    dest_length: int,
    window_origin: int,
    window_length: int,
    source_length: int,
    policy: InterpolationPolicy,
) -> AxisTaps:
    """Resolve one axis to addressed source indices and kernel weights."""
    if dest_length == window_length:
        # Pure translation: exact integer taps, unit weight
        taps = window_origin + np.arange(dest_length, dtype=np.intp)
        indices = address(taps, source_length, policy.wrap_mode)
        return indices[:, None], np.ones((dest_length, 1), dtype=np.float64)

    kernel, support = get_kernel(policy.interpolation, policy.cubic_coefficient)
    positions = sample_positions(
        dest_length, window_origin, window_length, policy.pixel_offset
    )
    base = np.floor(positions).astype(np.intp)
    offsets = np.arange(1 - support, support + 1, dtype=np.intp)
    taps = base[:, None] + offsets[None, :]
    weights = kernel(positions[:, None] - taps)
    indices = address(taps, source_length, policy.wrap_mode)
    return indices, weights


def _horizontal_pass(rows: np.ndarray, x_taps: AxisTaps) -> np.ndarray:
    """Filter gathered source rows along x. Returns float64 (R, W_out[, C])."""
    indices, weights = x_taps
    trailing = (1,) * (rows.ndim - 2)
    out = np.zeros((rows.shape[0], indices.shape[0]) + rows.shape[2:], dtype=np.float64)
    for k in range(indices.shape[1]):
        out += rows[:, indices[:, k]] * weights[:, k].reshape((1, -1) + trailing)
    return out


def _vertical_pass(filtered: np.ndarray, row_taps: AxisTaps) -> np.ndarray:
    """Combine horizontally filtered rows along y. Returns float64 (H_out, W_out[, C])."""
    indices, weights = row_taps
    trailing = (1,) * (filtered.ndim - 1)
    out = np.zeros((indices.shape[0],) + filtered.shape[1:], dtype=np.float64)
    for k in range(indices.shape[1]):
        out += filtered[indices[:, k]] * weights[:, k].reshape((-1,) + trailing)
    return out


def _to_dtype(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Round and saturate accumulated values into the source element type."""
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return np.clip(np.rint(values), info.min, info.max).astype(dtype)
    return values.astype(dtype)


def _phase(timing: Optional[TimingLog], name: str) -> ContextManager[None]:
    if timing is None:
        return nullcontext()
    return timed_phase(timing, name)


def _validate(
    source: Raster,
    dest_rect: Rectangle,
    source_window: Rectangle,
    config: TransformConfig,
) -> None:
    if dest_rect.width < 0 or dest_rect.height < 0:
        raise InvalidGeometryError(
            f"Destination size must be non-negative: {dest_rect.width}x{dest_rect.height}"
        )
    if dest_rect.is_empty:
        return
    if source.is_empty:
        raise InvalidGeometryError(
            f"Cannot sample {dest_rect.width}x{dest_rect.height} pixels "
            f"from an empty {source.width}x{source.height} source"
        )
    if source_window.is_empty:
        raise InvalidGeometryError(
            f"Cannot sample {dest_rect.width}x{dest_rect.height} pixels "
            f"from an empty window {source_window!r}"
        )
    if dest_rect.area > config.max_output_pixels:
        raise AllocationFailureError(
            f"Destination {dest_rect.width}x{dest_rect.height} "
            f"({dest_rect.area} pixels) exceeds limit of {config.max_output_pixels}"
        )


def resample(
    source: Raster,
    dest_rect: Rectangle,
    source_window: Rectangle,
    policy: Optional[InterpolationPolicy] = None,
    *,
    config: Optional[TransformConfig] = None,
) -> Raster:
    """
    Produce a new raster covering dest_rect, sampled from source_window.

    Destination pixel (dx, dy) is reconstructed around source position
    (sx, sy) given by the affine map from dest_rect onto source_window.
    Neighbourhood pixels outside the source extent are addressed by
    policy.wrap_mode (mirrored tiling by default, never black). Output
    pixels overwrite; alpha is resampled like colour and copied through.

    The output raster has dest_rect's width and height, the source's mode
    and dtype, and the source's resolution copied as plain floats.

    Args:
        source: Raster to read (never modified)
        dest_rect: Destination region; output pixel (0, 0) is its origin
        source_window: Source region mapped onto dest_rect
        policy: Sampling policy (default: config.policy)
        config: Allocation limit and timing (default: DEFAULT_CONFIG)

    Returns:
        Newly allocated Raster of dest_rect.width x dest_rect.height

    Raises:
        InvalidGeometryError: Negative destination size, or a non-empty
            destination with an empty source or window
        AllocationFailureError: Destination exceeds config.max_output_pixels
            or cannot be allocated

    Example:
        >>> out = resample(src, Rectangle.from_size(50, 25), Rectangle.from_size(100, 50))
        >>> out.size
        (50, 25)
    """
    config = config or DEFAULT_CONFIG
    policy = policy or config.policy
    _validate(source, dest_rect, source_window, config)

    logger.debug(
        f"resample {source.width}x{source.height} window={source_window.as_tuple()} "
        f"-> {dest_rect.width}x{dest_rect.height} "
        f"({policy.interpolation.value}, {policy.wrap_mode.value})"
    )

    if dest_rect.is_empty:
        return Raster.new(
            dest_rect.width,
            dest_rect.height,
            source.mode,
            source.resolution,
            dtype=source.pixels.dtype,
        )

    timing = TimingLog(f"{source.size} -> {dest_rect.size}") if config.log_timing else None

    try:
        with _phase(timing, "taps"):
            x_taps = _axis_taps(
                dest_rect.width, source_window.x, source_window.width, source.width, policy
            )
            y_taps = _axis_taps(
                dest_rect.height, source_window.y, source_window.height, source.height, policy
            )

        if x_taps[0].shape[1] == 1 and y_taps[0].shape[1] == 1:
            with _phase(timing, "copy"):
                pixels = source.pixels[y_taps[0][:, 0]][:, x_taps[0][:, 0]]
        else:
            y_indices, y_weights = y_taps
            rows, local = np.unique(y_indices.ravel(), return_inverse=True)
            with _phase(timing, "horizontal_pass"):
                filtered = _horizontal_pass(source.pixels[rows], x_taps)
            with _phase(timing, "vertical_pass"):
                accumulated = _vertical_pass(
                    filtered, (local.reshape(y_indices.shape), y_weights)
                )
            pixels = _to_dtype(accumulated, source.pixels.dtype)
    except MemoryError as exc:
        raise AllocationFailureError(
            f"Could not allocate {dest_rect.width}x{dest_rect.height} destination"
        ) from exc

    if timing is not None:
        logger.debug(timing.summary())

    return Raster(pixels, source.horizontal_resolution, source.vertical_resolution)
