"""
Driver helpers

Higher-level motions composed from AnimationDriver primitives: delayed
playback, forward-then-reverse, counted repeats, bounce, shake and pulse.

Every helper is a coroutine returning True once the motion has finished, or
False as soon as the driver is stopped. A stop during any leg or pause ends
the helper there; the next leg is never started.
"""

import asyncio
from typing import Awaitable, Optional

from animations.curves import ease_in, ease_in_out, ease_out
from animations.driver import AnimationDriver
from models.enums import AnimationStatus, LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)


async def await_motion(driver: AnimationDriver, generation: int, motion: Awaitable[bool]) -> bool:
    """
    Wait for one leg and report whether the sequence may continue

    Args:
        driver: Driver the leg runs on
        generation: driver.stop_count captured when the sequence began
        motion: Future returned by a driver motion method

    Returns:
        False if the leg was stopped or the driver was stopped since generation
    """
    completed = await motion
    return bool(completed) and driver.stop_count == generation


async def wait_unless_stopped(driver: AnimationDriver, generation: int, delay_ms: Optional[int]) -> bool:
    """Sleep delay_ms (if any), then report whether the driver is still unstopped"""
    if delay_ms and delay_ms > 0:
        await asyncio.sleep(delay_ms / 1000)
    return driver.stop_count == generation


async def play_forward(driver: AnimationDriver, delay_ms: Optional[int] = None) -> bool:
    """Run forward after an optional delay"""
    generation = driver.stop_count
    if not await wait_unless_stopped(driver, generation, delay_ms):
        return False
    return await await_motion(driver, generation, driver.forward())


async def play_reverse(driver: AnimationDriver, delay_ms: Optional[int] = None) -> bool:
    """Run in reverse after an optional delay"""
    generation = driver.stop_count
    if not await wait_unless_stopped(driver, generation, delay_ms):
        return False
    return await await_motion(driver, generation, driver.reverse())


async def play_forward_then_reverse(
    driver: AnimationDriver,
    delay_ms: Optional[int] = None,
    pause_between_ms: Optional[int] = None
) -> bool:
    """
    Run forward, optionally pause, then run back

    Args:
        driver: Driver to move
        delay_ms: Wait before starting
        pause_between_ms: Wait between the forward and reverse legs
    """
    generation = driver.stop_count
    if not await wait_unless_stopped(driver, generation, delay_ms):
        return False
    if not await await_motion(driver, generation, driver.forward()):
        return False
    if not await wait_unless_stopped(driver, generation, pause_between_ms):
        return False
    return await await_motion(driver, generation, driver.reverse())


async def repeat_times(
    driver: AnimationDriver,
    count: Optional[int] = None,
    reverse: bool = False,
    delay_ms: Optional[int] = None
) -> bool:
    """
    Repeat full runs

    Args:
        driver: Driver to move
        count: Number of cycles; None repeats until the driver is stopped
        reverse: Each cycle runs forward then back instead of jumping back
        delay_ms: Wait before the first cycle
    """
    generation = driver.stop_count
    if not await wait_unless_stopped(driver, generation, delay_ms):
        return False

    if count is None:
        return await await_motion(driver, generation, driver.repeat(reverse=reverse))

    for _ in range(count):
        if reverse:
            if not await play_forward_then_reverse(driver):
                return False
        else:
            if not await await_motion(driver, generation, driver.forward()):
                return False
            driver.reset()
            # reset() counts as an interruption; this one is ours
            generation = driver.stop_count
    return True


async def bounce(driver: AnimationDriver, intensity: float = 0.3, duration_ms: int = 200) -> bool:
    """
    Quick run out to intensity and back

    The driver's duration is swapped for duration_ms while bouncing and
    restored afterwards.
    """
    generation = driver.stop_count
    original_duration = driver.duration_ms
    driver.duration_ms = duration_ms
    try:
        if not await await_motion(driver, generation, driver.animate_to(intensity)):
            return False
        return await await_motion(driver, generation, driver.reverse())
    finally:
        driver.duration_ms = original_duration


async def shake(
    driver: AnimationDriver,
    shake_count: int = 3,
    intensity: float = 0.1,
    duration_ms: int = 500
) -> bool:
    """
    Oscillate around the current value and settle back on it

    Each shake is one swing to +intensity and one to -intensity. Targets
    outside the driver's bounds are clamped by the driver.
    """
    if shake_count <= 0:
        return True

    generation = driver.stop_count
    origin = driver.value
    single_ms = duration_ms // (shake_count * 2)
    log.debug(f"{driver.label}: shake", count=shake_count, intensity=intensity, single_ms=single_ms)

    for _ in range(shake_count):
        for target in (origin + intensity, origin - intensity):
            if not await await_motion(driver, generation, driver.animate_to(target, single_ms, ease_in_out)):
                log.debug(f"{driver.label}: shake stopped")
                return False

    return await await_motion(driver, generation, driver.animate_to(origin, single_ms, ease_in_out))


async def pulse(driver: AnimationDriver, scale: float = 1.2, duration_ms: int = 600) -> bool:
    """
    Grow to scale then come back to 1.0

    The driver's upper bound must reach scale, e.g.
    AnimationDriver(lower=0.0, upper=2.0, value=1.0).
    """
    if driver.upper < scale:
        log.warn(f"{driver.label}: pulse scale {scale} exceeds upper bound {driver.upper}, clamped")

    generation = driver.stop_count
    half_ms = duration_ms // 2
    if not await await_motion(driver, generation, driver.animate_to(scale, half_ms, ease_out)):
        return False
    return await await_motion(driver, generation, driver.animate_to(1.0, half_ms, ease_in))


def is_idle(driver: AnimationDriver) -> bool:
    """True when the driver rests at either bound"""
    return driver.status in (AnimationStatus.DISMISSED, AnimationStatus.COMPLETED)
