"""Tests for direct-lashing restraint sizing."""

from __future__ import annotations

import math

import pytest

from tdstool_app.models import AnchorConstraint, LashingConfig, LashingDirection, LashingMode
from tdstool_app.services.restraint_service import (
    ANCHOR_NOT_EVALUATED,
    ANCHOR_SKIPPED,
    MSG_FORCE_OUT_OF_RANGE,
    MSG_MISSING_STRAP,
    MSG_ZERO_CAPACITY,
    SWL_NOT_CHECKED,
    PresetError,
    compute_restraint_plan,
    evaluate_direction,
    get_preset,
    plan_passed,
    starter_plan,
)

ALL_ONE_G = {d: 1.0 for d in LashingDirection}


def _manual(count: int, rating: float = 2000.0, angle: float = 0.0) -> LashingConfig:
    return LashingConfig(mode=LashingMode.MANUAL, strap_count=count, strap_rating_dan=rating, lashing_angle_deg=angle)


def _single(config, mass=1000.0, gravity=10.0, accel=1.0, sf=1.0, anchor=None, mu=0.0):
    return evaluate_direction(
        LashingDirection.FORWARD,
        load_mass_kg=mass,
        gravity_m_s2=gravity,
        accel_g=accel,
        safety_factor=sf,
        config=config,
        anchor=anchor,
        friction_coefficient=mu,
    )


class TestAutoMode:
    def test_prescribes_strap_count(self, defence_accels, auto_configs):
        plan = compute_restraint_plan(10000.0, 9.81, defence_accels, None, auto_configs)
        fwd = plan[0]
        required_n = 10000.0 * 9.81 * 0.8
        per_strap_n = 2000.0 * 10 * math.cos(math.radians(20.0))
        assert fwd.direction == LashingDirection.FORWARD
        assert fwd.required_force_dan == pytest.approx(required_n / 10)
        assert fwd.strap_capacity_per_strap_dan == pytest.approx(per_strap_n / 10)
        assert fwd.required_strap_count == math.ceil(required_n / per_strap_n) == 5
        assert fwd.strap_count_used == 5
        assert fwd.total_capacity_dan >= fwd.required_force_dan
        assert fwd.passed
        assert fwd.message.startswith("PASS")
        assert "5 strap(s)" in fwd.message

    def test_results_in_direction_order(self, defence_accels, auto_configs):
        plan = compute_restraint_plan(5000.0, 9.81, defence_accels, None, auto_configs)
        assert [e.direction for e in plan] == [
            LashingDirection.FORWARD,
            LashingDirection.REARWARD,
            LashingDirection.LATERAL,
        ]

    def test_string_keys_accepted(self, auto_configs):
        accels = {"Forward": 0.8, "Rearward": 0.5, "Lateral": 0.5}
        configs = {d.value: cfg for d, cfg in auto_configs.items()}
        plan = compute_restraint_plan(5000.0, 9.81, accels, {"Forward": 1.5}, configs)
        assert plan[0].required_force_dan == pytest.approx(5000.0 * 9.81 * 0.8 * 1.5 / 10)
        assert plan[1].required_force_dan == pytest.approx(5000.0 * 9.81 * 0.5 / 10)

    def test_exact_multiple_does_not_round_up(self):
        # 1000 daN required, 500 daN per strap at 0 degrees
        ev = _single(LashingConfig(strap_rating_dan=500.0, lashing_angle_deg=0.0))
        assert ev.required_strap_count == 2

    def test_rating_monotonicity(self):
        counts = []
        for rating in (250.0, 400.0, 500.0, 800.0, 1000.0, 2500.0, 5000.0):
            ev = _single(LashingConfig(strap_rating_dan=rating, lashing_angle_deg=25.0), mass=7300.0)
            counts.append(ev.required_strap_count)
        assert counts == sorted(counts, reverse=True)
        assert counts[0] > counts[-1]

    def test_zero_mass_trivially_passes(self, defence_accels, auto_configs):
        plan = compute_restraint_plan(0, 9.81, defence_accels, None, auto_configs)
        for ev in plan:
            assert ev.required_force_dan == 0.0
            assert ev.required_strap_count == 0
            assert ev.passed

    def test_angle_zero_is_full_efficiency(self):
        ev = _single(LashingConfig(strap_rating_dan=2000.0, lashing_angle_deg=0.0))
        assert ev.strap_capacity_per_strap_dan == pytest.approx(2000.0)


class TestManualMode:
    def test_sufficient_count_passes(self):
        ev = _single(_manual(4, rating=300.0))
        assert ev.required_force_dan == pytest.approx(1000.0)
        assert ev.total_capacity_dan == pytest.approx(1200.0)
        assert ev.force_passed and ev.passed
        assert ev.required_strap_count == 4
        assert ev.additional_straps_needed == 0

    def test_deficit_reports_additional_straps(self):
        ev = _single(_manual(2, rating=300.0))
        assert not ev.passed
        assert ev.strap_count_used == 2
        assert ev.required_strap_count == 4
        # (10000 N - 6000 N) / 3000 N -> 2 more straps
        assert ev.additional_straps_needed == 2
        assert "add 2 more strap(s)" in ev.message

    def test_zero_count_fails(self):
        ev = _single(_manual(0, rating=300.0))
        assert ev.total_capacity_dan == 0.0
        assert not ev.passed
        assert ev.additional_straps_needed == ev.required_strap_count == 4

    @pytest.mark.parametrize("count", [1, 3, 7])
    @pytest.mark.parametrize("angle", [0.0, 0.25, 17.5, 45.0, 60.0, 88.75])
    @pytest.mark.parametrize("rating", [250.0, 333.0, 500.0, 1000.0, 2000.0])
    def test_auto_count_passes_when_entered_manually(self, rating, angle, count):
        # Required force is an exact multiple of the per-strap capacity
        per_strap_dan = rating * math.cos(math.radians(angle))
        mass = count * per_strap_dan
        auto = _single(LashingConfig(strap_rating_dan=rating, lashing_angle_deg=angle), mass=mass)
        assert auto.passed
        assert auto.required_strap_count == count

        manual = _single(_manual(count, rating, angle), mass=mass)
        assert manual.passed
        assert manual.required_strap_count == count
        assert manual.additional_straps_needed == 0
        assert manual.message.startswith("PASS")

        short = _single(_manual(count - 1, rating, angle), mass=mass)
        assert not short.passed
        assert short.additional_straps_needed == 1

    def test_negative_count_treated_as_zero(self):
        ev = _single(_manual(-3, rating=300.0))
        assert ev.strap_count_used == 0
        assert not ev.passed

    def test_starter_plan(self):
        plan = starter_plan()
        assert plan[LashingDirection.FORWARD] == _manual(4, 2000.0, 20.0)
        assert plan[LashingDirection.REARWARD] == _manual(2, 4000.0, 10.0)
        assert plan[LashingDirection.LATERAL] == _manual(4, 2000.0, 30.0)

    def test_starter_plan_on_light_vehicle(self, defence_accels):
        evaluations = compute_restraint_plan(5000.0, 9.81, defence_accels, None, starter_plan())
        assert plan_passed(evaluations)


class TestInvalidInputs:
    @pytest.mark.parametrize("rating, angle", [(None, 20.0), (0.0, 20.0), (-100.0, 20.0), (2000.0, None)])
    def test_missing_rating_or_angle(self, rating, angle):
        ev = _single(LashingConfig(strap_rating_dan=rating, lashing_angle_deg=angle))
        assert not ev.passed
        assert ev.message == MSG_MISSING_STRAP
        assert ev.strap_count_used == 0

    def test_missing_direction_config(self, defence_accels, auto_configs):
        configs = dict(auto_configs)
        del configs[LashingDirection.LATERAL]
        plan = compute_restraint_plan(5000.0, 9.81, defence_accels, None, configs)
        assert plan[2].message == MSG_MISSING_STRAP
        assert not plan[2].passed
        assert plan[0].passed

    @pytest.mark.parametrize("mass", [0.0, 100.0, 50000.0])
    @pytest.mark.parametrize("rating", [100.0, 5000.0])
    @pytest.mark.parametrize("angle", [90.0, 95.0, 180.0])
    def test_angle_guard(self, mass, rating, angle):
        ev = _single(LashingConfig(strap_rating_dan=rating, lashing_angle_deg=angle), mass=mass)
        assert not ev.passed
        assert ev.message == MSG_ZERO_CAPACITY

    def test_near_ninety_degrees_degrades(self):
        ev = _single(LashingConfig(strap_rating_dan=2000.0, lashing_angle_deg=89.9))
        assert ev.strap_capacity_per_strap_dan > 0.0
        assert ev.required_strap_count > 100

    def test_overflowing_force_fails_without_raising(self, defence_accels, auto_configs):
        plan = compute_restraint_plan(1e308, 9.81, defence_accels, None, auto_configs)
        assert len(plan) == 3
        for ev in plan:
            assert not ev.passed
            assert ev.message == MSG_FORCE_OUT_OF_RANGE
            assert ev.required_force_dan == math.inf
            assert ev.anchor_warning == SWL_NOT_CHECKED

    def test_overflowing_friction_fails_without_raising(self, defence_accels, auto_configs):
        plan = compute_restraint_plan(1e200, 9.81, defence_accels, None, auto_configs, friction_coefficient=1e200)
        assert all(ev.message == MSG_FORCE_OUT_OF_RANGE for ev in plan)
        assert not any(math.isnan(ev.friction_force_dan) for ev in plan)

    def test_overflowing_strap_ratio_fails_without_raising(self):
        ev = _single(LashingConfig(strap_rating_dan=1e-9, lashing_angle_deg=0.0), mass=1e300)
        assert not ev.passed
        assert ev.message == MSG_FORCE_OUT_OF_RANGE
        assert ev.required_force_dan == pytest.approx(1e300)

    def test_blank_gravity_and_safety_factor_use_defaults(self, defence_accels, auto_configs):
        blank = compute_restraint_plan(8000.0, "", defence_accels, {"Forward": ""}, auto_configs)
        explicit = compute_restraint_plan(8000.0, 9.81, defence_accels, {"Forward": 1.0}, auto_configs)
        assert blank[0].required_force_dan == pytest.approx(explicit[0].required_force_dan)

    def test_missing_acceleration_means_no_demand(self, auto_configs):
        plan = compute_restraint_plan(8000.0, 9.81, {}, None, auto_configs)
        assert all(ev.required_force_dan == 0.0 for ev in plan)


class TestAnchorCheck:
    def test_absent_anchor_always_advises(self, defence_accels, auto_configs):
        plan = compute_restraint_plan(8000.0, 9.81, defence_accels, None, auto_configs)
        assert all(ev.anchor_warning == SWL_NOT_CHECKED for ev in plan)
        assert not any(ev.anchor_checked for ev in plan)

    def test_absent_anchor_advises_on_invalid_direction(self):
        ev = _single(LashingConfig(strap_rating_dan=None, lashing_angle_deg=None))
        assert ev.anchor_warning == SWL_NOT_CHECKED

    def test_per_strap_load_equal_to_swl_passes(self):
        # 1000 daN over 2 straps -> 500 daN per strap
        ev = _single(_manual(2), anchor=AnchorConstraint(safe_working_load_dan=500.0, margin_factor=1.0))
        assert ev.anchor_checked
        assert ev.per_strap_load_dan == 500.0
        assert ev.anchor_passed and ev.passed
        assert ev.anchor_warning.startswith("Anchor OK")

    def test_per_strap_load_above_swl_fails(self):
        ev = _single(_manual(2), anchor=AnchorConstraint(safe_working_load_dan=499.999, margin_factor=1.0))
        assert ev.force_passed
        assert not ev.anchor_passed
        assert not ev.passed
        assert "exceeds" in ev.anchor_warning
        assert ev.anchor_warning in ev.message

    def test_margin_scales_allowed_load(self):
        ev = _single(_manual(2), anchor=AnchorConstraint(safe_working_load_dan=250.0, margin_factor=2.0))
        assert ev.anchor_limit_dan == 500.0
        assert ev.passed

    def test_anchor_fails_auto_mode(self):
        cfg = LashingConfig(strap_rating_dan=2000.0, lashing_angle_deg=0.0)
        ev = _single(cfg, anchor=AnchorConstraint(safe_working_load_dan=100.0))
        assert ev.strap_count_used == 1
        assert not ev.passed
        assert ev.message.startswith("FAIL")

    def test_anchor_skipped_without_straps(self):
        ev = _single(_manual(0), anchor=AnchorConstraint(safe_working_load_dan=500.0))
        assert not ev.anchor_checked
        assert ev.anchor_warning == ANCHOR_SKIPPED

    def test_anchor_not_evaluated_on_invalid_direction(self):
        ev = _single(
            LashingConfig(strap_rating_dan=None, lashing_angle_deg=20.0),
            anchor=AnchorConstraint(safe_working_load_dan=500.0),
        )
        assert not ev.anchor_checked
        assert ev.anchor_warning == ANCHOR_NOT_EVALUATED

    def test_non_positive_swl_is_not_a_check(self):
        ev = _single(_manual(2), anchor=AnchorConstraint(safe_working_load_dan=0.0))
        assert ev.anchor_warning == SWL_NOT_CHECKED
        assert ev.passed


class TestPresetsAndFriction:
    def test_defence_preset(self):
        preset = get_preset("Defence")
        assert preset.friction_coefficient == 0.0
        assert preset.accel_by_direction[LashingDirection.FORWARD] == 0.8
        assert preset.accel_by_direction[LashingDirection.LATERAL] == 0.5

    def test_unknown_preset(self):
        with pytest.raises(PresetError):
            get_preset("mars")

    def test_friction_credit_reduces_required_force(self, auto_configs):
        preset = get_preset("uk")
        plan = compute_restraint_plan(
            10000.0,
            9.81,
            preset.accel_by_direction,
            None,
            auto_configs,
            friction_coefficient=preset.friction_coefficient,
        )
        lateral = plan[2]
        assert lateral.friction_force_dan == pytest.approx(0.3 * 10000.0 * 9.81 / 10)
        assert lateral.required_force_dan == pytest.approx((0.5 - 0.3) * 10000.0 * 9.81 / 10)

    def test_friction_never_makes_force_negative(self):
        ev = _single(LashingConfig(strap_rating_dan=2000.0, lashing_angle_deg=10.0), accel=0.2, mu=0.6)
        assert ev.required_force_dan == 0.0
        assert ev.passed

    def test_plan_passed_helper(self):
        assert not plan_passed([])
