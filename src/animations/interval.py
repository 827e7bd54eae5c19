"""
Interval Remapper

Maps a master timeline progress value onto a sub-range [start, end] of that
timeline and runs the local progress through a curve.
"""

from dataclasses import dataclass
from typing import Optional

from animations.curves import Curve, linear


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    return max(lower, min(upper, value))


@dataclass(frozen=True)
class Interval:
    """
    Sub-range of the master timeline with its own curve

    Before start the output is curve(0.0), after end it is curve(1.0).
    An Interval can itself be used wherever a curve is expected.
    """
    start: float
    end: float
    curve: Curve = linear

    def __post_init__(self):
        if not (0.0 <= self.start <= 1.0 and 0.0 <= self.end <= 1.0):
            raise ValueError(f"Interval bounds must lie in [0, 1], got [{self.start}, {self.end}]")
        if self.start > self.end:
            raise ValueError(f"Interval start {self.start} is after end {self.end}")

    @property
    def span(self) -> float:
        return self.end - self.start

    def transform(self, master_progress: float) -> float:
        return remap(master_progress, self)

    def __call__(self, master_progress: float) -> float:
        return remap(master_progress, self)


def remap(master_progress: float, interval: Interval) -> float:
    """
    Effective progress of an interval for a master progress value

    Args:
        master_progress: Progress of the master timeline (0.0-1.0)
        interval: Sub-range and curve to apply

    Returns:
        interval.curve applied to the clamped local progress

    Example:
        >>> remap(0.5, Interval(0.25, 0.75))
        0.5
    """
    if interval.end == interval.start:
        # Zero-width interval: a step at start
        local = 1.0 if master_progress >= interval.start else 0.0
    else:
        local = clamp((master_progress - interval.start) / (interval.end - interval.start))
    return interval.curve.transform(local)


def create_delayed_interval(
    total_duration_ms: float,
    delay_ms: float,
    curve: Curve = linear
) -> Optional[Interval]:
    """
    Interval that starts after delay_ms of a total_duration_ms timeline

    Returns:
        Interval [delay/total, 1.0], or None when the delay consumes the
        whole timeline (the animation never leaves its start value)
    """
    if total_duration_ms <= 0:
        raise ValueError("total_duration_ms must be positive")

    delay_ratio = delay_ms / total_duration_ms
    if delay_ratio >= 1.0:
        return None
    return Interval(clamp(delay_ratio), 1.0, curve)
