"""
Animation helper functions

Pure functions turning directions and progress values into offsets,
rotation values, durations and shimmer gradient stops.
"""

from typing import Tuple

from models.enums import RotationDirection, ShimmerDirection, SlideDirection
from models.offset import Offset

# Width of the shimmer highlight band as a fraction of the gradient
SHIMMER_GRADIENT_WIDTH = 0.3


def get_slide_offset(direction: SlideDirection, value: float) -> Offset:
    """
    Offset for a slide of the given magnitude

    Example:
        get_slide_offset(SlideDirection.LEFT, 1.0)   # Offset(-1.0, 0.0)
        get_slide_offset(SlideDirection.DOWN, 0.5)   # Offset(0.0, 0.5)
    """
    if direction == SlideDirection.LEFT:
        return Offset(-value, 0.0)
    if direction == SlideDirection.RIGHT:
        return Offset(value, 0.0)
    if direction == SlideDirection.UP:
        return Offset(0.0, -value)
    return Offset(0.0, value)


def get_rotation_value(direction: RotationDirection, value: float) -> float:
    """Signed rotation (turns) for a direction"""
    return value if direction == RotationDirection.CLOCKWISE else -value


def calculate_slide_duration(
    distance: float,
    pixels_per_second: float = 1000.0,
    min_ms: int = 200,
    max_ms: int = 800,
) -> int:
    """
    Duration for sliding a distance at a constant speed

    Args:
        distance: Distance in pixels
        pixels_per_second: Travel speed
        min_ms: Lower bound of the result
        max_ms: Upper bound of the result

    Returns:
        Duration in milliseconds, clamped to [min_ms, max_ms]
    """
    duration_ms = round(distance / pixels_per_second * 1000)
    return max(min_ms, min(max_ms, duration_ms))


def shimmer_gradient_stops(
    progress: float,
    gradient_width: float = SHIMMER_GRADIENT_WIDTH
) -> Tuple[float, float, float, float, float]:
    """
    Gradient stops of a shimmer sweep

    The highlight centre travels from -gradient_width to 1.0 as progress
    goes from 0.0 to 1.0. Stops pair with the colours
    (base, base, highlight, base, base).

    Returns:
        Five stops, each clamped to [0, 1]
    """
    position = progress * (1.0 + gradient_width) - gradient_width

    def stop(x: float) -> float:
        return max(0.0, min(1.0, x))

    return (
        stop(position - gradient_width),
        stop(position - gradient_width / 2),
        stop(position),
        stop(position + gradient_width / 2),
        stop(position + gradient_width),
    )


# (begin, end) alignments, -1.0 = left/top, 1.0 = right/bottom
_SHIMMER_ALIGNMENT = {
    ShimmerDirection.LEFT_TO_RIGHT: ((-1.0, 0.0), (1.0, 0.0)),
    ShimmerDirection.RIGHT_TO_LEFT: ((1.0, 0.0), (-1.0, 0.0)),
    ShimmerDirection.TOP_TO_BOTTOM: ((0.0, -1.0), (0.0, 1.0)),
    ShimmerDirection.BOTTOM_TO_TOP: ((0.0, 1.0), (0.0, -1.0)),
    ShimmerDirection.DIAGONAL: ((-1.0, -1.0), (1.0, 1.0)),
}


def shimmer_alignment(direction: ShimmerDirection) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Begin and end alignment of the shimmer gradient"""
    return _SHIMMER_ALIGNMENT[direction]
