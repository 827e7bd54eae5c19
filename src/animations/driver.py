"""
Animation Driver

Advances a progress value between a lower and an upper bound over
wall-clock time, notifying value listeners on every tick and status
listeners on every phase change.

This is the time-driver capability the schedulers consume. Ticks run in an
asyncio task paced by the event loop clock; anything exposing the same
methods (forward/reverse/stop/reset, value, status, listeners) can stand in
for it.
"""

import asyncio
import itertools
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from animations.curves import Curve, linear
from animations.errors import DriverDisposedError
from animations.state import status_to_state
from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.enums import AnimationState, AnimationStatus, LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.DRIVER)

ValueListener = Callable[[float], None]
StatusListener = Callable[[AnimationStatus], None]


@dataclass(frozen=True)
class _Segment:
    """One leg of motion from begin to end"""
    begin: float
    end: float
    duration_s: float
    curve: Curve
    status: AnimationStatus


class AnimationDriver:
    """
    Time driver for a single animated value

    Example:
        driver = AnimationDriver(duration_ms=300)
        driver.add_listener(lambda v: print(f"opacity={v:.2f}"))
        await driver.forward()
    """

    def __init__(
        self,
        duration_ms: int = 300,
        lower: float = 0.0,
        upper: float = 1.0,
        fps: int = 60,
        value: Optional[float] = None,
        label: str = "driver",
    ):
        """
        Initialize driver

        Args:
            duration_ms: Duration of a full lower → upper run
            lower: Lower bound of the value
            upper: Upper bound of the value
            fps: Tick rate
            value: Initial value (defaults to lower)
            label: Name used in logs and task descriptions
        """
        if upper <= lower:
            raise ValueError(f"upper bound {upper} must be greater than lower bound {lower}")

        self.duration_ms = duration_ms
        self.lower = lower
        self.upper = upper
        self.fps = max(1, fps)
        self.label = label

        self._value = lower if value is None else self._clamp(value)
        self._status = self._status_for_value(AnimationStatus.FORWARD)
        self._direction = AnimationStatus.FORWARD

        self._listeners: List[ValueListener] = []
        self._status_listeners: List[StatusListener] = []

        self._task: Optional[asyncio.Task] = None
        self._done: Optional[asyncio.Future] = None
        self._disposed = False
        self._stop_count = 0

    # ------------------------------------------------------------
    # State
    # ------------------------------------------------------------

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new_value: float):
        """Jump to a value. Stops any running motion."""
        self._ensure_alive()
        self.stop()
        self._set_value(self._clamp(new_value))
        self._set_status(self._status_for_value(self._direction))

    @property
    def status(self) -> AnimationStatus:
        return self._status

    @property
    def animation_state(self) -> AnimationState:
        return status_to_state(self._status)

    @property
    def is_animating(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def is_completed(self) -> bool:
        return self._status == AnimationStatus.COMPLETED

    @property
    def is_dismissed(self) -> bool:
        return self._status == AnimationStatus.DISMISSED

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def stop_count(self) -> int:
        """
        Number of external interruptions (stop, reset, value jumps, dispose)

        Multi-leg helpers compare it before and after each leg to notice a
        stop that happened while they were waiting.
        """
        return self._stop_count

    # ------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------

    def add_listener(self, listener: ValueListener) -> None:
        self._ensure_alive()
        self._listeners.append(listener)

    def remove_listener(self, listener: ValueListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def add_status_listener(self, listener: StatusListener) -> None:
        self._ensure_alive()
        self._status_listeners.append(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        if listener in self._status_listeners:
            self._status_listeners.remove(listener)

    # ------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------

    def forward(self, from_value: Optional[float] = None) -> asyncio.Future:
        """
        Run towards the upper bound

        Duration is scaled by the remaining distance, so starting halfway
        takes half of duration_ms.

        Returns:
            Future resolving to True when the motion completes, False if it
            is stopped or replaced by another motion first
        """
        self._ensure_alive()
        if from_value is not None:
            self.value = from_value
        self._direction = AnimationStatus.FORWARD
        return self._animate_to(self.upper, None, linear, AnimationStatus.FORWARD)

    def reverse(self, from_value: Optional[float] = None) -> asyncio.Future:
        """Run towards the lower bound"""
        self._ensure_alive()
        if from_value is not None:
            self.value = from_value
        self._direction = AnimationStatus.REVERSE
        return self._animate_to(self.lower, None, linear, AnimationStatus.REVERSE)

    def animate_to(
        self,
        target: float,
        duration_ms: Optional[int] = None,
        curve: Curve = linear
    ) -> asyncio.Future:
        """
        Run to an arbitrary target value

        Args:
            target: Value to reach (clamped to the bounds)
            duration_ms: Explicit duration; scaled from duration_ms when None
            curve: Curve applied over this motion only
        """
        self._ensure_alive()
        target = self._clamp(target)
        self._direction = AnimationStatus.FORWARD if target >= self._value else AnimationStatus.REVERSE
        return self._animate_to(target, duration_ms, curve, self._direction)

    def repeat(self, reverse: bool = False, count: Optional[int] = None) -> asyncio.Future:
        """
        Repeat full runs between the bounds

        Args:
            reverse: Alternate direction each run instead of jumping back
            count: Number of runs (each direction counts as one run when
                reversing); None repeats until stop()
        """
        self._ensure_alive()
        self._halt()

        duration_s = self.duration_ms / 1000
        first_forward = not (reverse and self._value == self.upper)

        def segments() -> Iterable[_Segment]:
            forward = first_forward
            for _ in (range(count) if count is not None else itertools.count()):
                if forward:
                    yield _Segment(self.lower, self.upper, duration_s, linear, AnimationStatus.FORWARD)
                else:
                    yield _Segment(self.upper, self.lower, duration_s, linear, AnimationStatus.REVERSE)
                if reverse:
                    forward = not forward

        log.debug(f"{self.label}: repeat", reverse=reverse, count=count if count is not None else "∞")
        return self._start(segments())

    def stop(self) -> None:
        """
        Halt immediately. Value and status are left as they are.

        The pending motion future resolves to False, so callers awaiting a
        leg can tell a stop from a completed run.
        """
        self._stop_count += 1
        self._halt()

    def _halt(self) -> None:
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            log.debug(f"{self.label}: halted", value=f"{self._value:.3f}")
        self._resolve_done(False)

    def reset(self) -> None:
        """Stop and rewind to the lower bound"""
        self._ensure_alive()
        self.stop()
        self._direction = AnimationStatus.FORWARD
        self._set_value(self.lower)
        self._set_status(AnimationStatus.DISMISSED)

    def dispose(self) -> None:
        """Stop and release listeners. Safe to call more than once."""
        if self._disposed:
            return
        self.stop()
        self._listeners.clear()
        self._status_listeners.clear()
        self._disposed = True

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------

    def _animate_to(
        self,
        target: float,
        duration_ms: Optional[int],
        curve: Curve,
        status: AnimationStatus
    ) -> asyncio.Future:
        self._halt()

        if duration_ms is None:
            span = self.upper - self.lower
            duration_ms = self.duration_ms * abs(target - self._value) / span

        segment = _Segment(self._value, target, duration_ms / 1000, curve, status)
        return self._start([segment])

    def _start(self, segments: Iterable[_Segment]) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        self._done = loop.create_future()
        self._task = create_tracked_task(
            self._run(segments),
            category=TaskCategory.DRIVER,
            description=f"{self.label} ticks",
        )
        return self._done

    async def _run(self, segments: Iterable[_Segment]):
        loop = asyncio.get_running_loop()
        frame_time = 1.0 / self.fps
        last_status = None
        completed = False

        try:
            for segment in segments:
                last_status = segment.status
                self._set_status(segment.status)

                if segment.duration_s <= 0:
                    self._set_value(segment.end)
                    continue

                started = loop.time()
                while True:
                    await asyncio.sleep(frame_time)
                    t = min(1.0, (loop.time() - started) / segment.duration_s)
                    self._set_value(segment.begin + (segment.end - segment.begin) * segment.curve.transform(t))
                    if t >= 1.0:
                        break

            if last_status is not None:
                final = AnimationStatus.COMPLETED if last_status == AnimationStatus.FORWARD else AnimationStatus.DISMISSED
                self._set_status(final)
            completed = True
        finally:
            if self._task is asyncio.current_task():
                self._task = None
                self._resolve_done(completed)

    def _resolve_done(self, completed: bool) -> None:
        done = self._done
        self._done = None
        if done is not None and not done.done():
            done.set_result(completed)

    def _set_value(self, value: float) -> None:
        self._value = value
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception as e:
                log.error(f"{self.label}: value listener failed: {e}")

    def _set_status(self, status: AnimationStatus) -> None:
        if status == self._status:
            return
        self._status = status
        for listener in list(self._status_listeners):
            try:
                listener(status)
            except Exception as e:
                log.error(f"{self.label}: status listener failed: {e}")

    def _status_for_value(self, direction: AnimationStatus) -> AnimationStatus:
        if self._value == self.lower:
            return AnimationStatus.DISMISSED
        if self._value == self.upper:
            return AnimationStatus.COMPLETED
        return direction

    def _clamp(self, value: float) -> float:
        return max(self.lower, min(self.upper, value))

    def _ensure_alive(self) -> None:
        if self._disposed:
            raise DriverDisposedError(f"{self.label} has been disposed")

    def __repr__(self):
        return f"AnimationDriver({self.label}, value={self._value:.3f}, {self._status.name})"
