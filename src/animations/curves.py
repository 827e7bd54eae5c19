"""
Curve Library

Pure easing functions mapping normalized time t (0.0-1.0) to progress.
Progress may leave the 0.0-1.0 range between the endpoints (overshoot,
anticipation, elastic) but every registered curve satisfies
transform(0.0) == 0.0 and transform(1.0) == 1.0.

Curves are immutable values: a name (the variant tag) plus a pure function.
They are shared freely between drivers, intervals and stagger plans.

Callers clamp t before invoking a curve; behaviour outside 0.0-1.0 is
undefined.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Callable, Dict

from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CURVE)


@dataclass(frozen=True)
class Curve:
    """
    Named easing curve

    Two curves compare equal when their names match; factory curves encode
    their parameters in the name.
    """
    name: str
    fn: Callable[[float], float] = field(repr=False, compare=False)

    def transform(self, t: float) -> float:
        return self.fn(t)

    def __call__(self, t: float) -> float:
        return self.fn(t)


# ============================================================
# Standard curves
# ============================================================

def _linear(t: float) -> float:
    return t


def _cubic_bezier_fn(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """
    Build a cubic bezier easing function with P0=(0,0) and P3=(1,1)

    Solves x(s) = t with Newton-Raphson, falling back to bisection,
    then samples y(s).
    """
    def sample_x(s: float) -> float:
        return ((1 - 3 * x2 + 3 * x1) * s + (3 * x2 - 6 * x1)) * s * s + 3 * x1 * s

    def sample_y(s: float) -> float:
        return ((1 - 3 * y2 + 3 * y1) * s + (3 * y2 - 6 * y1)) * s * s + 3 * y1 * s

    def sample_x_derivative(s: float) -> float:
        return (3 * (1 - 3 * x2 + 3 * x1) * s + 2 * (3 * x2 - 6 * x1)) * s + 3 * x1

    def solve_x(x: float, epsilon: float = 1e-7) -> float:
        s = x
        for _ in range(8):
            error = sample_x(s) - x
            if abs(error) < epsilon:
                return s
            d = sample_x_derivative(s)
            if abs(d) < epsilon:
                break
            s -= error / d

        lo, hi = 0.0, 1.0
        s = x
        for _ in range(64):
            x_at_s = sample_x(s)
            if abs(x_at_s - x) < epsilon:
                break
            if x > x_at_s:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
        return s

    def transform(t: float) -> float:
        if t == 0.0 or t == 1.0:
            return t
        return sample_y(solve_x(t))

    return transform


def _bounce_out(t: float) -> float:
    if t < 1 / 2.75:
        return 7.5625 * t * t
    elif t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    elif t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def _elastic_out(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    period = 0.4
    s = period / 4.0
    return math.pow(2.0, -10.0 * t) * math.sin((t - s) * (2.0 * math.pi) / period) + 1.0


# ============================================================
# Custom curves
# ============================================================

def _smooth_bounce(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


def _elastic(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    period = 0.3
    s = period / 4.0
    t = t - 1.0
    return math.pow(2.0, -10.0 * t) * math.sin((t - s) * (2.0 * math.pi) / period) + 1.0


def _overshoot(tension: float) -> Callable[[float], float]:
    def transform(t: float) -> float:
        t -= 1.0
        return t * t * ((tension + 1.0) * t + tension) + 1.0
    return transform


def _anticipate(t: float, tension: float = 2.0) -> float:
    return t * t * ((tension + 1.0) * t - tension)


def _anticipate_overshoot(t: float) -> float:
    tension = 2.0
    if t < 0.5:
        return 0.5 * _anticipate(t * 2.0, tension)
    s = t * 2.0 - 2.0
    return 0.5 * (s * s * ((tension + 1.0) * s + tension) + 2.0)


def _smooth_decelerate(t: float) -> float:
    return 1.0 - math.pow(1.0 - t, 3.0)


def _smooth_accelerate(t: float) -> float:
    return math.pow(t, 3.0)


def _wobble(t: float) -> float:
    frequency = 3.0
    return t * (1.0 + 0.3 * math.sin(frequency * 2.0 * math.pi * t))


def _rubber_band(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    period = 0.3
    s = period / 4.0
    if t < 1.0:
        return -(math.pow(2.0, 10.0 * (t - 1.0)) *
                 math.sin((t - 1.0 - s) * (2.0 * math.pi) / period))
    return math.pow(2.0, -10.0 * (t - 1.0)) * math.sin((t - 1.0 - s) * (2.0 * math.pi) / period) + 1.0


linear = Curve("linear", _linear)
ease_in = Curve("ease_in", _cubic_bezier_fn(0.42, 0.0, 1.0, 1.0))
ease_out = Curve("ease_out", _cubic_bezier_fn(0.0, 0.0, 0.58, 1.0))
ease_in_out = Curve("ease_in_out", _cubic_bezier_fn(0.42, 0.0, 0.58, 1.0))
bounce_out = Curve("bounce_out", _bounce_out)
elastic_out = Curve("elastic_out", _elastic_out)

smooth_bounce = Curve("smooth_bounce", _smooth_bounce)
elastic = Curve("elastic", _elastic)
gentle_overshoot = Curve("gentle_overshoot", _overshoot(1.5))
strong_overshoot = Curve("strong_overshoot", _overshoot(3.0))
anticipate = Curve("anticipate", _anticipate)
anticipate_overshoot = Curve("anticipate_overshoot", _anticipate_overshoot)
smooth_decelerate = Curve("smooth_decelerate", _smooth_decelerate)
smooth_accelerate = Curve("smooth_accelerate", _smooth_accelerate)
wobble = Curve("wobble", _wobble)
rubber_band = Curve("rubber_band", _rubber_band)


# ============================================================
# Factories
# ============================================================

def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Curve:
    """
    Create a cubic bezier curve (CSS cubic-bezier semantics)

    Example:
        snappy = cubic_bezier(0.4, 0.0, 0.2, 1.0)
    """
    return Curve(f"cubic_bezier({x1}, {y1}, {x2}, {y2})", _cubic_bezier_fn(x1, y1, x2, y2))


def create_bounce_curve(bounciness: float = 0.5, speed: float = 1.0) -> Curve:
    """
    Create an ease-out bounce curve

    Args:
        bounciness: Kept for configuration compatibility; the bounce
            heights are fixed by the damped-bounce breakpoints
        speed: Time multiplier; values above 1.0 settle early and hold at 1.0.
            Values below 1.0 stop partway through the bounce and land on
            1.0 at t = 1

    Returns:
        Bounce curve
    """
    def transform(t: float) -> float:
        if t >= 1.0:
            return 1.0
        return _bounce_out(min(t * speed, 1.0))

    return Curve(f"bounce(bounciness={bounciness}, speed={speed})", transform)


def create_elastic_curve(period: float = 0.4, amplitude: float = 1.0) -> Curve:
    """
    Create an elastic ease-in curve with configurable period and amplitude

    The endpoints are exact fixed points regardless of parameters.
    """
    s = period / 4.0

    def transform(t: float) -> float:
        if t == 0.0 or t == 1.0:
            return t
        t = t - 1.0
        return -(amplitude * math.pow(2.0, 10.0 * t) *
                 math.sin((t - s) * (2.0 * math.pi) / period))

    return Curve(f"elastic(period={period}, amplitude={amplitude})", transform)


def flipped(curve: Curve) -> Curve:
    """Mirror a curve (1 - f(1 - t)); used when playing in reverse"""
    return Curve(f"flipped({curve.name})", lambda t: 1.0 - curve.transform(1.0 - t))


# ============================================================
# Registry
# ============================================================

CURVES: Dict[str, Curve] = {
    curve.name: curve
    for curve in (
        linear,
        ease_in,
        ease_out,
        ease_in_out,
        bounce_out,
        elastic_out,
        smooth_bounce,
        elastic,
        gentle_overshoot,
        strong_overshoot,
        anticipate,
        anticipate_overshoot,
        smooth_decelerate,
        smooth_accelerate,
        wobble,
        rubber_band,
    )
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_curve_name(name: str) -> str:
    """'easeInOut', 'ease-in-out' and 'EASE_IN_OUT' all map to 'ease_in_out'"""
    name = _CAMEL_BOUNDARY.sub("_", name.strip())
    return name.replace("-", "_").lower()


def get_curve(name: str) -> Curve:
    """
    Look up a registered curve by name

    Args:
        name: Curve name in snake_case, camelCase or kebab-case

    Returns:
        Registered curve

    Raises:
        ValueError: If no curve is registered under that name
    """
    key = normalize_curve_name(name)
    if key not in CURVES:
        log.warn(f"Unknown curve requested: {name}")
        raise ValueError(f"Unknown curve: {name}")
    return CURVES[key]
