"""
Animation configuration

Options bundle consumed uniformly by every animation-producing component
(playback helpers, staggered controllers, YAML presets).
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from animations.curves import Curve, ease_in_out, get_curve


@dataclass(frozen=True)
class AnimationConfig:
    """
    Immutable animation options

    Attributes:
        duration_ms: Duration of one forward run in milliseconds
        curve: Easing curve applied to the driver value
        delay_ms: Delay before the animation starts
        auto_play: Start automatically when created
        auto_reverse: Play backwards after each forward run
        repeat: Repeat the animation
        repeat_count: Number of repeats; None (or 0) repeats indefinitely

    Examples:
        # Slow fade-in
        fade = AnimationConfig(duration_ms=800)

        # Ping-pong three times
        pulse = AnimationConfig(auto_reverse=True, repeat=True, repeat_count=3)
    """
    duration_ms: int = 300
    curve: Curve = ease_in_out
    delay_ms: int = 0
    auto_play: bool = True
    auto_reverse: bool = False
    repeat: bool = False
    repeat_count: Optional[int] = None

    @property
    def repeats_forever(self) -> bool:
        """repeat=True without a positive repeat_count means infinite"""
        return self.repeat and not self.repeat_count

    def copy_with(
        self,
        duration_ms: Optional[int] = None,
        curve: Optional[Curve] = None,
        delay_ms: Optional[int] = None,
        auto_play: Optional[bool] = None,
        auto_reverse: Optional[bool] = None,
        repeat: Optional[bool] = None,
        repeat_count: Optional[int] = None,
    ) -> "AnimationConfig":
        """
        Copy with only the given fields overridden

        Fields passed as None keep their current value, so repeat_count
        cannot be reset to None through copy_with.
        """
        overrides = {
            "duration_ms": duration_ms,
            "curve": curve,
            "delay_ms": delay_ms,
            "auto_play": auto_play,
            "auto_reverse": auto_reverse,
            "repeat": repeat,
            "repeat_count": repeat_count,
        }
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnimationConfig":
        """
        Build a config from a plain mapping (YAML preset entry)

        The curve is given by registry name; missing keys use defaults.

        Raises:
            ValueError: If the curve name is unknown
        """
        kwargs = dict(data)
        curve = kwargs.pop("curve", None)
        if isinstance(curve, str):
            kwargs["curve"] = get_curve(curve)
        elif curve is not None:
            kwargs["curve"] = curve
        return cls(**kwargs)

    def __repr__(self):
        return (
            f"AnimationConfig({self.duration_ms}ms, {self.curve.name}, delay={self.delay_ms}ms, "
            f"auto_reverse={self.auto_reverse}, repeat={self.repeat}, repeat_count={self.repeat_count})"
        )
