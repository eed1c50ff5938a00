"""
Module: config

Purpose:
    Configuration dataclass for raster transforms. Immutable configuration
    with validation on construction.

Key Classes:
    - TransformConfig: Allocation limit, sampling policy and timing switch

Dependencies:
    - dataclasses (std)
    - core.models.policy: InterpolationPolicy

Used By:
    - resampling.resampler: Allocation guard, default policy, timing
    - transforms: Passed through to the resampler
"""

from __future__ import annotations

from dataclasses import dataclass, field

from easyimage.core.models.policy import InterpolationPolicy

# Pillow raises DecompressionBombError above twice its MAX_IMAGE_PIXELS
MAX_OUTPUT_PIXELS = 178_956_970


@dataclass(frozen=True)
class TransformConfig:
    """
    Configuration for crop/resize operations (immutable).

    Attributes:
        max_output_pixels: Largest destination (width * height) allowed
            before allocation is refused
        policy: Sampling policy used when a call does not pass one
        log_timing: Log per-phase resample durations at DEBUG level

    Example:
        >>> config = TransformConfig(max_output_pixels=4096 * 4096)
        >>> resize(raster, 800, 600, config=config)
    """

    max_output_pixels: int = MAX_OUTPUT_PIXELS
    policy: InterpolationPolicy = field(default_factory=InterpolationPolicy.high_quality)
    log_timing: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_output_pixels <= 0:
            raise ValueError(
                f"max_output_pixels must be positive: {self.max_output_pixels}"
            )


DEFAULT_CONFIG = TransformConfig()
