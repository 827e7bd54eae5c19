"""
Config-driven playback

Plays a driver according to an AnimationConfig: initial delay, one run in
the requested direction, an optional auto-reverse leg, then repetition.
"""

import asyncio

from animations.driver import AnimationDriver
from animations.driver_helpers import await_motion, wait_unless_stopped
from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.animation_config import AnimationConfig
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)

# Pause between a run and its auto-reverse leg
AUTO_REVERSE_PAUSE_MS = 100


def apply_config(driver: AnimationDriver, config: AnimationConfig) -> None:
    """Copy the config's duration onto the driver"""
    driver.duration_ms = config.duration_ms


async def play_with_config(
    driver: AnimationDriver,
    config: AnimationConfig,
    forwards: bool = True
) -> bool:
    """
    Play a driver the way a config describes

    Args:
        driver: Driver to move; its duration is set from the config
        config: Timing, reverse and repeat settings
        forwards: Run towards the upper bound first (False runs in reverse,
            e.g. a fade-out)

    With repeat enabled and no repeat_count (or 0) this only returns once
    the driver is stopped. Each repeat cycle counts the auto-reverse leg as
    part of the cycle.

    Returns:
        True when every leg ran to the end. False once the driver is stopped;
        no further leg, pause or repeat is started after that.
    """
    apply_config(driver, config)
    log.debug(f"{driver.label}: play", config=repr(config), forwards=forwards)

    generation = driver.stop_count

    if not await wait_unless_stopped(driver, generation, config.delay_ms):
        return _stopped(driver)

    if not await await_motion(driver, generation, driver.forward() if forwards else driver.reverse()):
        return _stopped(driver)

    if config.auto_reverse:
        if not await wait_unless_stopped(driver, generation, AUTO_REVERSE_PAUSE_MS):
            return _stopped(driver)
        if not await await_motion(driver, generation, driver.reverse() if forwards else driver.forward()):
            return _stopped(driver)

    if not config.repeat:
        return True

    if config.repeats_forever:
        legs = None
    else:
        legs = config.repeat_count * (2 if config.auto_reverse else 1)
    if not await await_motion(driver, generation, driver.repeat(reverse=config.auto_reverse, count=legs)):
        return _stopped(driver)
    return True


def _stopped(driver: AnimationDriver) -> bool:
    log.debug(f"{driver.label}: config playback stopped", value=f"{driver.value:.3f}")
    return False


def start_with_config(
    driver: AnimationDriver,
    config: AnimationConfig,
    forwards: bool = True
) -> asyncio.Task:
    """Schedule play_with_config() as a tracked background task"""
    return create_tracked_task(
        play_with_config(driver, config, forwards),
        category=TaskCategory.PLAYBACK,
        description=f"{driver.label} config playback",
    )
