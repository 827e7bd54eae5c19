"""
Animation Chain

Sequences heterogeneous timed steps (fade, slide, scale, delay, custom)
strictly in append order. Each step waits its delay, fires its action, then
waits its duration before the next step may begin.

The chain does not await a step's driver. It only waits the step's
wall-clock duration, so a step's motion and the chain's schedule stay
independent.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, List, Optional

from animations.curves import Curve, ease_in_out, linear
from animations.driver import AnimationDriver
from animations.errors import ChainDisposedError
from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.enums import ChainState, LogCategory
from models.offset import Offset
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CHAIN)

DriverFactory = Callable[[int], AnimationDriver]


@dataclass(frozen=True)
class ChainStep:
    """
    Single timed step of a chain

    Attributes:
        duration_ms: Wall-clock time the chain waits after firing the action
        action: Called once when the step starts (usually starts a driver)
        curve: Curve the step's motion uses
        delay_ms: Wait before the action fires
        kind: Step label for logs ("fade", "slide", "scale", "delay", "step")
    """
    duration_ms: int
    action: Callable[[], None]
    curve: Curve = linear
    delay_ms: int = 0
    kind: str = "step"


def _noop() -> None:
    pass


class AnimationChain:
    """
    Ordered, serially executed sequence of animation steps

    State machine:
        NOT_STARTED → PLAYING → COMPLETED
        PLAYING → STOPPED (stop()); reset() returns to NOT_STARTED
        any → DISPOSED (dispose(), terminal)

    Example:
        chain = (
            AnimationChain(on_complete=lambda: print("done"))
            .add_fade(300, on_update=set_opacity)
            .add_delay(200)
            .add_slide(400, Offset(-1, 0), Offset.zero(), on_update=set_offset)
        )
        await chain.play()
    """

    def __init__(
        self,
        on_complete: Optional[Callable[[], None]] = None,
        on_step_complete: Optional[Callable[[], None]] = None,
        driver_factory: Optional[DriverFactory] = None,
        fps: int = 60,
        label: str = "chain",
    ):
        """
        Initialize chain

        Args:
            on_complete: Called once after the last step's duration elapses
            on_step_complete: Called after each step's duration elapses
            driver_factory: Creates the driver for typed steps from a
                duration in ms (defaults to AnimationDriver at fps)
            fps: Tick rate for drivers created by the default factory
            label: Name used in logs and task descriptions
        """
        self.on_complete = on_complete
        self.on_step_complete = on_step_complete
        self.label = label
        self._driver_factory = driver_factory or (
            lambda duration_ms: AnimationDriver(duration_ms=duration_ms, fps=fps, label=f"{label}.driver")
        )

        self._steps: List[ChainStep] = []
        self._drivers: List[AnimationDriver] = []
        self._current_step = 0
        self._state = ChainState.NOT_STARTED
        self._stop_event: Optional[asyncio.Event] = None

    # ------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------

    def add_step(
        self,
        duration_ms: int,
        action: Callable[[], None],
        curve: Curve = linear,
        delay_ms: int = 0,
        kind: str = "step",
    ) -> "AnimationChain":
        """
        Append a step

        Raises:
            ChainDisposedError: If the chain has been disposed
        """
        if self._state == ChainState.DISPOSED:
            raise ChainDisposedError("Cannot add steps to a disposed AnimationChain")

        self._steps.append(ChainStep(duration_ms, action, curve, delay_ms, kind))
        return self

    def add_fade(
        self,
        duration_ms: int,
        on_update: Callable[[float], None],
        from_value: float = 0.0,
        to_value: float = 1.0,
        curve: Curve = ease_in_out,
        delay_ms: int = 0,
    ) -> "AnimationChain":
        """Append an opacity tween from from_value to to_value"""
        def apply(progress: float):
            on_update(from_value + (to_value - from_value) * progress)

        return self.add_step(duration_ms, self._tween_action(duration_ms, curve, apply), curve, delay_ms, "fade")

    def add_slide(
        self,
        duration_ms: int,
        from_offset: Offset,
        to_offset: Offset,
        on_update: Callable[[Offset], None],
        curve: Curve = ease_in_out,
        delay_ms: int = 0,
    ) -> "AnimationChain":
        """Append an offset tween from from_offset to to_offset"""
        def apply(progress: float):
            on_update(Offset.lerp(from_offset, to_offset, progress))

        return self.add_step(duration_ms, self._tween_action(duration_ms, curve, apply), curve, delay_ms, "slide")

    def add_scale(
        self,
        duration_ms: int,
        on_update: Callable[[float], None],
        from_value: float = 0.0,
        to_value: float = 1.0,
        curve: Curve = ease_in_out,
        delay_ms: int = 0,
    ) -> "AnimationChain":
        """Append a scale tween from from_value to to_value"""
        def apply(progress: float):
            on_update(from_value + (to_value - from_value) * progress)

        return self.add_step(duration_ms, self._tween_action(duration_ms, curve, apply), curve, delay_ms, "scale")

    def add_delay(self, delay_ms: int) -> "AnimationChain":
        """Append a pause between steps"""
        return self.add_step(delay_ms, _noop, kind="delay")

    def _tween_action(
        self,
        duration_ms: int,
        curve: Curve,
        apply: Callable[[float], None]
    ) -> Callable[[], None]:
        """Action creating a chain-owned driver that feeds curved progress to apply"""
        def action():
            driver = self._driver_factory(duration_ms)
            driver.add_listener(lambda value: apply(curve.transform(value)))
            self._drivers.append(driver)
            driver.forward()

        return action

    # ------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------

    async def play(self) -> None:
        """
        Run every step in order

        No-op while already playing, and after stop() or completion until
        reset() is called.

        Raises:
            ChainDisposedError: If the chain has been disposed
        """
        if self._state == ChainState.DISPOSED:
            raise ChainDisposedError("Cannot play a disposed AnimationChain")

        if self._state == ChainState.PLAYING:
            log.debug(f"{self.label}: play() ignored, already playing")
            return

        if self._state in (ChainState.STOPPED, ChainState.COMPLETED):
            log.warn(f"{self.label}: play() ignored, call reset() first", state=self._state.name)
            return

        loop = asyncio.get_running_loop()
        started = loop.time()
        steps = list(self._steps)

        self._state = ChainState.PLAYING
        self._current_step = 0
        # A run only touches chain state while its event is the current one
        event = asyncio.Event()
        self._stop_event = event
        log.info(f"{self.label}: playing", steps=len(steps))

        try:
            for index, step in enumerate(steps):
                self._current_step = index

                if step.delay_ms > 0 and not await self._wait(step.delay_ms, event):
                    return

                step.action()

                if not await self._wait(step.duration_ms, event):
                    return

                log.debug(f"{self.label}: step {index} ({step.kind}) complete")
                if self.on_step_complete:
                    self.on_step_complete()

            self._current_step = len(steps)
            self._state = ChainState.COMPLETED
            log.info(
                f"{self.label}: completed",
                steps=len(steps),
                elapsed_ms=round((loop.time() - started) * 1000)
            )
            if self.on_complete:
                self.on_complete()
        finally:
            if self._stop_event is event and self._state == ChainState.PLAYING:
                # Step action or callback raised
                self._state = ChainState.STOPPED

    def start(self) -> asyncio.Task:
        """Schedule play() as a tracked background task"""
        return create_tracked_task(
            self.play(),
            category=TaskCategory.CHAIN,
            description=f"{self.label} play",
        )

    async def _wait(self, duration_ms: int, event: asyncio.Event) -> bool:
        """
        Wait duration_ms unless event is set first

        Returns:
            True if the full duration elapsed and event still belongs to the
            current run, False if stopped
        """
        if duration_ms <= 0:
            await asyncio.sleep(0)
            return not event.is_set() and self._stop_event is event
        try:
            await asyncio.wait_for(event.wait(), timeout=duration_ms / 1000)
        except asyncio.TimeoutError:
            return self._stop_event is event
        return False

    def stop(self) -> None:
        """
        Halt scheduling and every driver created so far

        Progress is kept; call reset() to rewind.
        """
        if self._state == ChainState.PLAYING:
            self._state = ChainState.STOPPED
            log.info(f"{self.label}: stopped", step=self._current_step)
        if self._stop_event is not None:
            self._stop_event.set()
        for driver in self._drivers:
            driver.stop()

    def reset(self) -> None:
        """
        Stop, rewind to the first step and rewind every created driver

        Raises:
            ChainDisposedError: If the chain has been disposed
        """
        if self._state == ChainState.DISPOSED:
            raise ChainDisposedError("Cannot reset a disposed AnimationChain")

        self.stop()
        self._current_step = 0
        for driver in self._drivers:
            driver.reset()
        self._state = ChainState.NOT_STARTED

    def dispose(self) -> None:
        """Release every driver and step. Safe to call more than once."""
        if self._state == ChainState.DISPOSED:
            return

        self.stop()
        for driver in self._drivers:
            driver.dispose()
        self._drivers.clear()
        self._steps.clear()
        self._state = ChainState.DISPOSED
        log.debug(f"{self.label}: disposed")

    # ------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------

    @property
    def state(self) -> ChainState:
        return self._state

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def step_count(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> List[ChainStep]:
        return list(self._steps)

    @property
    def drivers(self) -> List[AnimationDriver]:
        """Drivers created by steps that have already fired"""
        return list(self._drivers)

    @property
    def is_playing(self) -> bool:
        return self._state == ChainState.PLAYING

    @property
    def is_completed(self) -> bool:
        return self._state == ChainState.COMPLETED

    @property
    def is_disposed(self) -> bool:
        return self._state == ChainState.DISPOSED

    def __repr__(self):
        return f"AnimationChain({self.label}, {self._state.name}, step {self._current_step}/{len(self._steps)})"
