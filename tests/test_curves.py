"""
Unit tests for the curve library and registry
"""

import pytest

from animations.curves import (
    CURVES,
    Curve,
    anticipate,
    bounce_out,
    create_bounce_curve,
    create_elastic_curve,
    cubic_bezier,
    ease_in,
    ease_in_out,
    ease_out,
    flipped,
    gentle_overshoot,
    get_curve,
    linear,
    normalize_curve_name,
    smooth_accelerate,
    smooth_bounce,
    smooth_decelerate,
    strong_overshoot,
)


# ============================================================
# Endpoints
# ============================================================

@pytest.mark.parametrize("curve", list(CURVES.values()), ids=list(CURVES.keys()))
def test_registered_curve_endpoints(curve):
    """Every registered curve starts at 0 and ends at 1"""
    assert curve.transform(0.0) == pytest.approx(0.0, abs=1e-9)
    assert curve.transform(1.0) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("curve", [
    cubic_bezier(0.4, 0.0, 0.2, 1.0),
    create_bounce_curve(),
    create_bounce_curve(bounciness=0.9, speed=2.0),
    create_bounce_curve(speed=0.5),
    create_elastic_curve(period=0.25, amplitude=2.0),
    flipped(ease_in),
])
def test_factory_curve_endpoints(curve):
    """Factory-built curves keep the same fixed endpoints"""
    assert curve(0.0) == pytest.approx(0.0, abs=1e-9)
    assert curve(1.0) == pytest.approx(1.0, abs=1e-9)


# ============================================================
# Formulas
# ============================================================

class TestFormulas:
    """Spot values of the closed-form curves"""

    def test_linear_is_identity(self):
        for t in (0.0, 0.25, 0.5, 0.9):
            assert linear(t) == t

    def test_smooth_decelerate_and_accelerate(self):
        assert smooth_decelerate(0.5) == pytest.approx(0.875)
        assert smooth_accelerate(0.5) == pytest.approx(0.125)

    def test_smooth_bounce_piecewise(self):
        assert smooth_bounce(0.25) == pytest.approx(0.125)
        assert smooth_bounce(0.75) == pytest.approx(0.875)

    def test_bounce_out_second_segment(self):
        assert bounce_out(0.5) == pytest.approx(0.765625)

    def test_overshoot_passes_one(self):
        """Overshoot curves exceed 1.0 before settling"""
        assert gentle_overshoot(0.8) == pytest.approx(1.04)
        assert strong_overshoot(0.8) > gentle_overshoot(0.8)

    def test_anticipate_dips_below_zero(self):
        assert anticipate(0.3) == pytest.approx(-0.099)


class TestCubicBezier:
    """Cubic bezier solving"""

    def test_ease_in_out_is_symmetric(self):
        assert ease_in_out(0.5) == pytest.approx(0.5, abs=1e-6)
        assert ease_in_out(0.2) == pytest.approx(1.0 - ease_in_out(0.8), abs=1e-6)

    def test_ease_in_lags_and_ease_out_leads(self):
        for t in (0.2, 0.5, 0.8):
            assert ease_in(t) < t
            assert ease_out(t) > t

    def test_straight_control_points_are_linear(self):
        straight = cubic_bezier(0.0, 0.0, 1.0, 1.0)
        for t in (0.1, 0.33, 0.5, 0.77):
            assert straight(t) == pytest.approx(t, abs=1e-6)

    def test_monotonic(self):
        samples = [ease_in_out(i / 50) for i in range(51)]
        assert samples == sorted(samples)


# ============================================================
# Factories
# ============================================================

class TestFactories:
    """Parameterised curve factories"""

    def test_bounce_speed_settles_early(self):
        fast = create_bounce_curve(speed=2.0)
        assert fast(0.6) == pytest.approx(1.0)
        assert fast(0.25) == pytest.approx(bounce_out(0.5))

    def test_bounciness_only_labels_the_curve(self):
        soft = create_bounce_curve(bounciness=0.1)
        hard = create_bounce_curve(bounciness=0.9)
        assert soft(0.4) == hard(0.4)
        assert soft != hard

    def test_elastic_factory_oscillates(self):
        curve = create_elastic_curve(period=0.4)
        samples = [curve(i / 100) for i in range(1, 100)]
        assert min(samples) < 0.0

    def test_flipped_mirrors(self):
        mirror = flipped(ease_in)
        assert mirror(0.3) == pytest.approx(1.0 - ease_in(0.7))
        assert mirror.name == "flipped(ease_in)"

    def test_curves_compare_by_name(self):
        assert cubic_bezier(0.4, 0.0, 0.2, 1.0) == cubic_bezier(0.4, 0.0, 0.2, 1.0)
        assert Curve("linear", lambda t: t) == linear


# ============================================================
# Registry
# ============================================================

class TestRegistry:
    """Name lookup"""

    @pytest.mark.parametrize("name", ["ease_in_out", "easeInOut", "ease-in-out", "EASE_IN_OUT"])
    def test_name_spellings(self, name):
        assert get_curve(name) is ease_in_out

    def test_normalize_camel_case(self):
        assert normalize_curve_name("elasticOut") == "elastic_out"
        assert normalize_curve_name(" bounce-out ") == "bounce_out"

    def test_unknown_curve_raises(self):
        with pytest.raises(ValueError, match="no_such_curve"):
            get_curve("no_such_curve")

    def test_registry_keys_match_curve_names(self):
        for name, curve in CURVES.items():
            assert curve.name == name
