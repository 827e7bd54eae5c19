"""
Tests for the stagger scheduler and staggered controller
"""

import dataclasses

import pytest

from animations.curves import ease_out, linear
from animations.errors import StaggerIndexError
from animations.stagger import (
    StaggeredAnimationController,
    compute_stagger_plan,
    staggered_item_transform,
)
from models.enums import AnimationStatus, SlideDirection, StaggeredListAnimationType
from models.offset import Offset


# ============================================================
# Plan
# ============================================================

class TestStaggerPlan:
    """compute_stagger_plan"""

    def test_three_items_over_one_second(self):
        """3 items, 1000 ms, 100 ms stagger: equal 0.8 spans starting 0.1 apart"""
        plan = compute_stagger_plan(3, 1000, 100, linear)

        assert [i.start for i in plan.intervals] == pytest.approx([0.0, 0.1, 0.2])
        assert [i.end for i in plan.intervals] == pytest.approx([0.8, 0.9, 1.0])
        assert plan.span == pytest.approx(0.8)
        assert not plan.is_degenerate

    def test_every_item_gets_same_span(self):
        plan = compute_stagger_plan(6, 1200, 90, linear)
        spans = [interval.span for interval in plan.intervals]
        assert spans == pytest.approx([spans[0]] * 6)

    def test_values_at_midpoint(self):
        plan = compute_stagger_plan(3, 1000, 100, linear)
        assert plan.values(0.5) == pytest.approx([0.625, 0.5, 0.375])
        assert plan.value_at(1, 0.5) == pytest.approx(0.5)

    def test_plan_shares_curve(self):
        plan = compute_stagger_plan(4, 1000, 50, ease_out)
        assert all(interval.curve is ease_out for interval in plan.intervals)

    def test_single_item_spans_whole_timeline(self):
        plan = compute_stagger_plan(1, 500, 100, linear)
        assert (plan.intervals[0].start, plan.intervals[0].end) == (0.0, 1.0)

    def test_zero_stagger_means_identical_intervals(self):
        plan = compute_stagger_plan(3, 1000, 0, linear)
        assert {(i.start, i.end) for i in plan.intervals} == {(0.0, 1.0)}

    def test_collapsed_span_degenerates_to_steps(self):
        """Heavy stagger clamps items to zero-width steps, no exception"""
        plan = compute_stagger_plan(5, 100, 50, linear)

        assert plan.is_degenerate
        assert all(interval.span == 0.0 for interval in plan.intervals)
        assert plan.values(0.75) == [1.0, 1.0, 0.0, 0.0, 0.0]

    def test_exactly_zero_span(self):
        plan = compute_stagger_plan(3, 1000, 500, linear)
        assert plan.is_degenerate
        assert [(i.start, i.end) for i in plan.intervals] == [(0.0, 0.0), (0.5, 0.5), (1.0, 1.0)]

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_out_of_range_index(self, index):
        plan = compute_stagger_plan(3, 1000, 100)
        with pytest.raises(StaggerIndexError):
            plan.interval(index)

    def test_index_error_is_an_index_error(self):
        plan = compute_stagger_plan(2, 1000, 100)
        with pytest.raises(IndexError, match="out of range"):
            plan.value_at(2, 0.5)

    @pytest.mark.parametrize("count,duration", [(0, 1000), (-1, 1000), (3, 0)])
    def test_invalid_inputs(self, count, duration):
        with pytest.raises(ValueError):
            compute_stagger_plan(count, duration, 100)

    def test_plan_is_immutable(self):
        plan = compute_stagger_plan(3, 1000, 100)
        with pytest.raises(dataclasses.FrozenInstanceError):
            plan.item_count = 4


# ============================================================
# Controller
# ============================================================

class TestStaggeredController:
    """StaggeredAnimationController"""

    def test_values_follow_driver(self, make_driver):
        controller = StaggeredAnimationController(3, stagger_delay_ms=100, curve=linear, driver=make_driver(1000))
        controller.driver.value = 0.5

        assert controller.values() == pytest.approx([0.625, 0.5, 0.375])
        assert controller.value_of(2) == pytest.approx(0.375)
        controller.dispose()

    def test_listener_receives_all_values(self, make_driver):
        controller = StaggeredAnimationController(2, stagger_delay_ms=500, curve=linear, driver=make_driver(1000))
        received = []
        controller.add_listener(received.append)

        controller.driver.value = 0.25

        assert received[-1] == pytest.approx([0.5, 0.0])
        controller.remove_listener(received.append)
        controller.driver.value = 1.0
        assert len(received) == 1
        controller.dispose()

    def test_value_of_out_of_range(self, make_driver):
        controller = StaggeredAnimationController(3, driver=make_driver(1000))
        with pytest.raises(StaggerIndexError):
            controller.value_of(5)
        controller.dispose()

    def test_reconfigure_replaces_plan(self, make_driver):
        controller = StaggeredAnimationController(3, stagger_delay_ms=100, driver=make_driver(1000))
        old_plan = controller.plan

        new_plan = controller.reconfigure(item_count=5)

        assert new_plan is not old_plan
        assert controller.plan is new_plan
        assert controller.item_count == 5
        assert old_plan.item_count == 3
        assert new_plan.stagger_delay_ms == 100
        controller.dispose()

    def test_reconfigure_duration_updates_driver(self, make_driver):
        controller = StaggeredAnimationController(3, stagger_delay_ms=100, driver=make_driver(1000))
        plan = controller.reconfigure(duration_ms=500)

        assert controller.driver.duration_ms == 500
        assert plan.stagger_ratio == pytest.approx(0.2)
        controller.dispose()

    @pytest.mark.asyncio
    async def test_forward_completes_every_item(self, make_driver):
        completed = []
        controller = StaggeredAnimationController(
            4,
            stagger_delay_ms=10,
            curve=linear,
            on_complete=lambda: completed.append(True),
            driver=make_driver(60),
        )

        await controller.forward()

        assert controller.is_completed
        assert controller.status == AnimationStatus.COMPLETED
        assert controller.values() == pytest.approx([1.0] * 4)
        assert completed == [True]

        await controller.reverse()
        assert controller.is_dismissed
        assert controller.values() == pytest.approx([0.0] * 4)
        controller.dispose()

    def test_dispose_is_idempotent(self, make_driver):
        controller = StaggeredAnimationController(3, driver=make_driver(100))
        controller.dispose()
        controller.dispose()
        assert controller.driver.is_disposed


# ============================================================
# List item transforms
# ============================================================

class TestItemTransform:
    """staggered_item_transform"""

    def test_fade(self):
        transform = staggered_item_transform(StaggeredListAnimationType.FADE, 0.4)
        assert transform.opacity == 0.4
        assert transform.offset == Offset.zero()
        assert transform.scale == 1.0

    def test_scale(self):
        assert staggered_item_transform(StaggeredListAnimationType.SCALE, 0.7).scale == 0.7

    def test_slide_up_starts_below(self):
        transform = staggered_item_transform(StaggeredListAnimationType.SLIDE, 0.25, SlideDirection.UP)
        assert transform.offset.dx == 0.0
        assert transform.offset.dy == pytest.approx(-0.75)
        assert transform.opacity == 1.0

    def test_fade_slide_at_start_and_end(self):
        start = staggered_item_transform(StaggeredListAnimationType.FADE_SLIDE, 0.0, SlideDirection.LEFT)
        end = staggered_item_transform(StaggeredListAnimationType.FADE_SLIDE, 1.0, SlideDirection.LEFT)

        assert start.opacity == 0.0
        assert start.offset == Offset(-1.0, 0.0)
        assert end.opacity == 1.0
        assert end.offset == Offset(-0.0, 0.0)
