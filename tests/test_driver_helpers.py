"""
Tests for composite driver motions
"""

import asyncio

import pytest

from animations.driver_helpers import (
    bounce,
    is_idle,
    play_forward,
    play_forward_then_reverse,
    play_reverse,
    pulse,
    repeat_times,
    shake,
)
from models.enums import AnimationStatus


@pytest.mark.asyncio
async def test_play_forward_waits_for_delay(make_driver):
    loop = asyncio.get_running_loop()
    driver = make_driver(20)

    started = loop.time()
    await play_forward(driver, delay_ms=80)

    assert loop.time() - started >= 0.09
    assert driver.value == 1.0


@pytest.mark.asyncio
async def test_play_reverse(make_driver):
    driver = make_driver(20, value=1.0)
    await play_reverse(driver)
    assert driver.value == 0.0
    assert driver.is_dismissed


@pytest.mark.asyncio
async def test_forward_then_reverse(make_driver):
    driver = make_driver(30)
    values = []
    driver.add_listener(values.append)

    await play_forward_then_reverse(driver, pause_between_ms=20)

    assert max(values) == 1.0
    assert driver.value == 0.0
    assert driver.status == AnimationStatus.DISMISSED


@pytest.mark.asyncio
async def test_repeat_times_jumps_back_between_runs(make_driver):
    driver = make_driver(20)
    statuses = []
    driver.add_status_listener(statuses.append)

    await repeat_times(driver, count=2)

    assert statuses.count(AnimationStatus.COMPLETED) == 2
    assert driver.value == 0.0


@pytest.mark.asyncio
async def test_repeat_times_with_reverse(make_driver):
    driver = make_driver(20)
    statuses = []
    driver.add_status_listener(statuses.append)

    await repeat_times(driver, count=2, reverse=True)

    assert statuses.count(AnimationStatus.REVERSE) == 2
    assert driver.is_dismissed


@pytest.mark.asyncio
async def test_repeat_times_forever_until_stopped(make_driver):
    driver = make_driver(20)
    task = asyncio.ensure_future(repeat_times(driver, reverse=True))
    await asyncio.sleep(0.08)

    driver.stop()
    await asyncio.wait_for(task, timeout=1.0)


@pytest.mark.asyncio
async def test_bounce_restores_duration(make_driver):
    driver = make_driver(500)
    values = []
    driver.add_listener(values.append)

    await bounce(driver, intensity=0.3, duration_ms=40)

    assert max(values) == pytest.approx(0.3)
    assert driver.value == 0.0
    assert driver.duration_ms == 500


@pytest.mark.asyncio
async def test_shake_settles_on_origin(make_driver):
    driver = make_driver(500, lower=-1.0, upper=1.0, value=0.0)
    values = []
    driver.add_listener(values.append)

    await shake(driver, shake_count=2, intensity=0.1, duration_ms=80)

    assert max(values) == pytest.approx(0.1)
    assert min(values) == pytest.approx(-0.1)
    assert driver.value == pytest.approx(0.0)


@pytest.mark.asyncio
async def test_pulse_scales_up_and_back(make_driver):
    driver = make_driver(500, lower=0.0, upper=2.0, value=1.0)
    values = []
    driver.add_listener(values.append)

    await pulse(driver, scale=1.2, duration_ms=60)

    assert max(values) == pytest.approx(1.2)
    assert driver.value == pytest.approx(1.0)


@pytest.mark.asyncio
async def test_is_idle(make_driver):
    driver = make_driver(100)
    assert is_idle(driver)

    future = driver.forward()
    await asyncio.sleep(0.02)
    assert not is_idle(driver)

    await future
    assert is_idle(driver)


class TestStopBetweenLegs:
    """A stop during any leg ends the helper without starting the next leg"""

    @staticmethod
    async def _stop_after(driver, helper, delay_s=0.05):
        values = []
        driver.add_listener(values.append)

        task = asyncio.ensure_future(helper)
        await asyncio.sleep(delay_s)
        driver.stop()
        stopped_at = driver.value

        assert await asyncio.wait_for(task, timeout=0.2) is False
        seen = len(values)
        await asyncio.sleep(0.1)

        assert len(values) == seen
        assert not driver.is_animating
        assert driver.value == stopped_at
        return stopped_at

    @pytest.mark.asyncio
    async def test_forward_then_reverse(self, make_driver):
        driver = make_driver(200)
        stopped_at = await self._stop_after(driver, play_forward_then_reverse(driver))
        assert 0.0 < stopped_at < 1.0

    @pytest.mark.asyncio
    async def test_forward_then_reverse_during_pause(self, make_driver):
        driver = make_driver(20)
        stopped_at = await self._stop_after(
            driver, play_forward_then_reverse(driver, pause_between_ms=150), delay_s=0.08
        )
        assert stopped_at == 1.0

    @pytest.mark.asyncio
    async def test_repeat_times(self, make_driver):
        driver = make_driver(200)
        await self._stop_after(driver, repeat_times(driver, count=3))

    @pytest.mark.asyncio
    async def test_repeat_times_with_reverse(self, make_driver):
        driver = make_driver(200)
        await self._stop_after(driver, repeat_times(driver, count=3, reverse=True))

    @pytest.mark.asyncio
    async def test_bounce(self, make_driver):
        driver = make_driver(500)
        stopped_at = await self._stop_after(driver, bounce(driver, intensity=0.5, duration_ms=400))
        assert 0.0 < stopped_at < 0.5
        assert driver.duration_ms == 500

    @pytest.mark.asyncio
    async def test_shake(self, make_driver):
        driver = make_driver(500, lower=-1.0, upper=1.0, value=0.0)
        await self._stop_after(driver, shake(driver, shake_count=2, intensity=0.5, duration_ms=800))

    @pytest.mark.asyncio
    async def test_pulse(self, make_driver):
        driver = make_driver(500, lower=0.0, upper=2.0, value=1.0)
        stopped_at = await self._stop_after(driver, pulse(driver, scale=1.5, duration_ms=400))
        assert 1.0 < stopped_at < 1.5


@pytest.mark.asyncio
async def test_completed_helpers_report_true(make_driver):
    driver = make_driver(20)
    assert await play_forward_then_reverse(driver) is True
    assert await repeat_times(driver, count=2) is True
    assert await shake(driver, shake_count=0) is True
