"""
Module: timing

Purpose:
    Timing instrumentation for the resampler, used to see which pass
    (index/weight setup, horizontal pass, vertical pass) dominates a call.

Key Classes:
    - TimingLog: Collects phase durations for one operation

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - resampling.resampler: When TransformConfig.log_timing is set
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Generator

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Phase durations for a single operation.

    Attributes:
        label: Operation description shown in the summary
        timings: Dict of phase_name -> duration_seconds (insertion ordered)

    Example:
        >>> log = TimingLog("resize 640x480 -> 320x240")
        >>> log.log("horizontal_pass", 0.004)
        >>> print(log.summary())
    """
    label: str = ""
    timings: Dict[str, float] = field(default_factory=dict)

    def log(self, phase: str, duration: float) -> None:
        """Record a phase duration, accumulating repeated phases."""
        self.timings[phase] = self.timings.get(phase, 0.0) + duration

    def total(self) -> float:
        """Sum of all recorded phases."""
        return sum(self.timings.values())

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = [f"=== Timing: {self.label} ===" if self.label else "=== Timing ==="]
        for phase, duration in self.timings.items():
            lines.append(f"  {phase:20s} {duration:.4f}s")
        lines.append(f"  {'total':20s} {self.total():.4f}s")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Export timing data as dictionary."""
        return {
            "label": self.label,
            "timings": dict(self.timings),
            "total": self.total(),
        }


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    The duration is recorded even when the block raises.

    Args:
        log: TimingLog instance to record metrics
        phase: Name of the phase being timed

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "vertical_pass"):
        ...     out = _vertical_pass(rows, y_taps)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        log.log(phase, elapsed)
        logger.debug(f"{phase}: {elapsed:.4f}s")
