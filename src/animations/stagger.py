"""
Stagger Scheduler

Splits one master timeline into per-item intervals that start one
stagger delay apart and may overlap.

For item i of N with stagger ratio r = stagger_delay / total_duration:

    start_i = clamp(i * r)
    end_i   = clamp(i * r + (1 - (N - 1) * r))

Every item gets the same span (1 - (N - 1) * r). When (N - 1) * r reaches 1
the span collapses and the clamped intervals degenerate into near-instant
steps; this is accepted, not raised.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from animations.animation_utils import get_slide_offset
from animations.curves import Curve, ease_in_out
from animations.driver import AnimationDriver
from animations.errors import StaggerIndexError
from animations.interval import Interval, clamp, remap
from models.enums import (
    AnimationState,
    AnimationStatus,
    LogCategory,
    SlideDirection,
    StaggeredListAnimationType,
)
from models.offset import Offset
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.STAGGER)


@dataclass(frozen=True)
class StaggerPlan:
    """Immutable per-item intervals derived from stagger parameters"""
    item_count: int
    total_duration_ms: float
    stagger_delay_ms: float
    curve: Curve
    intervals: Tuple[Interval, ...]

    @property
    def stagger_ratio(self) -> float:
        return self.stagger_delay_ms / self.total_duration_ms

    @property
    def span(self) -> float:
        """Nominal span of each item before clamping (may be <= 0)"""
        return 1.0 - (self.item_count - 1) * self.stagger_ratio

    @property
    def is_degenerate(self) -> bool:
        return self.span <= 0.0

    def interval(self, index: int) -> Interval:
        """
        Interval of one item

        Raises:
            StaggerIndexError: If index is outside [0, item_count)
        """
        if index < 0 or index >= self.item_count:
            raise StaggerIndexError(index, self.item_count)
        return self.intervals[index]

    def value_at(self, index: int, master_progress: float) -> float:
        return remap(master_progress, self.interval(index))

    def values(self, master_progress: float) -> List[float]:
        """Remapped value of every item for one master progress value"""
        return [remap(master_progress, interval) for interval in self.intervals]


def compute_stagger_plan(
    item_count: int,
    total_duration_ms: float,
    stagger_delay_ms: float,
    curve: Curve = ease_in_out,
) -> StaggerPlan:
    """
    Derive a stagger plan

    Args:
        item_count: Number of items (> 0)
        total_duration_ms: Duration of the master timeline (> 0)
        stagger_delay_ms: Delay between consecutive item starts
        curve: Curve shared by every item

    Returns:
        StaggerPlan with item_count intervals

    Example:
        plan = compute_stagger_plan(3, 1000, 100)
        # starts 0.0 / 0.1 / 0.2, ends 0.8 / 0.9 / 1.0
    """
    if item_count <= 0:
        raise ValueError(f"item_count must be positive, got {item_count}")
    if total_duration_ms <= 0:
        raise ValueError(f"total_duration_ms must be positive, got {total_duration_ms}")

    ratio = stagger_delay_ms / total_duration_ms
    span = 1.0 - (item_count - 1) * ratio

    intervals = []
    for i in range(item_count):
        start = clamp(i * ratio)
        end = clamp(i * ratio + span)
        # Negative span: end collapses onto start
        intervals.append(Interval(start, max(start, end), curve))

    if span <= 0.0:
        log.warn(
            "Stagger span collapsed, items will jump instead of animate",
            items=item_count,
            stagger_ms=stagger_delay_ms,
            duration_ms=total_duration_ms,
        )
    else:
        log.debug("Stagger plan computed", items=item_count, ratio=f"{ratio:.3f}", span=f"{span:.3f}")

    return StaggerPlan(
        item_count=item_count,
        total_duration_ms=total_duration_ms,
        stagger_delay_ms=stagger_delay_ms,
        curve=curve,
        intervals=tuple(intervals),
    )


class StaggeredAnimationController:
    """
    One driver fanned out to N staggered items

    The plan is replaced, never mutated, when reconfigure() changes any
    input, so readers always see a whole plan.

    Example:
        controller = StaggeredAnimationController(item_count=5, duration_ms=1000)
        controller.add_listener(lambda values: render(values))
        await controller.forward()
    """

    def __init__(
        self,
        item_count: int,
        duration_ms: int = 1000,
        stagger_delay_ms: int = 100,
        curve: Curve = ease_in_out,
        on_complete: Optional[Callable[[], None]] = None,
        driver: Optional[AnimationDriver] = None,
        fps: int = 60,
    ):
        self.on_complete = on_complete
        self._driver = driver or AnimationDriver(duration_ms=duration_ms, fps=fps, label="stagger")
        self._plan = compute_stagger_plan(item_count, self._driver.duration_ms, stagger_delay_ms, curve)
        self._listeners: List[Callable[[List[float]], None]] = []
        self._disposed = False

        self._driver.add_listener(self._on_tick)
        self._driver.add_status_listener(self._on_status_changed)

    # ------------------------------------------------------------
    # Plan
    # ------------------------------------------------------------

    @property
    def plan(self) -> StaggerPlan:
        return self._plan

    @property
    def item_count(self) -> int:
        return self._plan.item_count

    def reconfigure(
        self,
        item_count: Optional[int] = None,
        duration_ms: Optional[int] = None,
        stagger_delay_ms: Optional[float] = None,
        curve: Optional[Curve] = None,
    ) -> StaggerPlan:
        """Recompute the plan for changed inputs and swap it in"""
        if duration_ms is not None:
            self._driver.duration_ms = duration_ms

        old = self._plan
        self._plan = compute_stagger_plan(
            item_count if item_count is not None else old.item_count,
            self._driver.duration_ms,
            stagger_delay_ms if stagger_delay_ms is not None else old.stagger_delay_ms,
            curve if curve is not None else old.curve,
        )
        return self._plan

    def interval(self, index: int) -> Interval:
        return self._plan.interval(index)

    def value_of(self, index: int) -> float:
        """Current remapped value of one item"""
        return self._plan.value_at(index, self._driver.value)

    def values(self) -> List[float]:
        return self._plan.values(self._driver.value)

    # ------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------

    def add_listener(self, listener: Callable[[List[float]], None]) -> None:
        """Listener receives every item's value on each tick"""
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[List[float]], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _on_tick(self, master_value: float) -> None:
        plan = self._plan
        values = plan.values(master_value)
        for listener in list(self._listeners):
            listener(values)

    def _on_status_changed(self, status: AnimationStatus) -> None:
        if status == AnimationStatus.COMPLETED and self.on_complete:
            self.on_complete()

    # ------------------------------------------------------------
    # Driver passthrough
    # ------------------------------------------------------------

    @property
    def driver(self) -> AnimationDriver:
        return self._driver

    def forward(self):
        return self._driver.forward()

    def reverse(self):
        return self._driver.reverse()

    def reset(self) -> None:
        self._driver.reset()

    def stop(self) -> None:
        self._driver.stop()

    @property
    def value(self) -> float:
        return self._driver.value

    @property
    def status(self) -> AnimationStatus:
        return self._driver.status

    @property
    def animation_state(self) -> AnimationState:
        return self._driver.animation_state

    @property
    def is_animating(self) -> bool:
        return self._driver.is_animating

    @property
    def is_completed(self) -> bool:
        return self._driver.is_completed

    @property
    def is_dismissed(self) -> bool:
        return self._driver.is_dismissed

    def dispose(self) -> None:
        """Detach from and dispose the driver. Safe to call more than once."""
        if self._disposed:
            return
        self._driver.remove_listener(self._on_tick)
        self._driver.remove_status_listener(self._on_status_changed)
        self._driver.dispose()
        self._listeners.clear()
        self._disposed = True


# ------------------------------------------------------------
# Staggered list items
# ------------------------------------------------------------

@dataclass(frozen=True)
class ItemTransform:
    """How a staggered list item should be drawn for one value"""
    opacity: float = 1.0
    offset: Offset = Offset()
    scale: float = 1.0


def staggered_item_transform(
    kind: StaggeredListAnimationType,
    value: float,
    direction: SlideDirection = SlideDirection.UP,
) -> ItemTransform:
    """
    Opacity / offset / scale of a list item at an item value

    Sliding items start one full size away on the given side and travel to
    Offset.zero() as value goes from 0.0 to 1.0.
    """
    if kind == StaggeredListAnimationType.FADE:
        return ItemTransform(opacity=value)
    if kind == StaggeredListAnimationType.SCALE:
        return ItemTransform(scale=value)

    offset = get_slide_offset(direction, 1.0 - value)
    if kind == StaggeredListAnimationType.SLIDE:
        return ItemTransform(offset=offset)
    return ItemTransform(opacity=value, offset=offset)
