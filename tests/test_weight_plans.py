"""Tests for the weight plan projector."""

from datetime import date

import pytest

from nutrition_engine.domain.plans import Feasibility
from nutrition_engine.domain.profile import Sex
from nutrition_engine.services.weight_plans import (
    classify_weekly_change,
    create_weight_plans,
)

TODAY = date(2024, 1, 1)


def test_create_weight_plans_for_loss() -> None:
    plan_set = create_weight_plans(90, 80, 2500, Sex.MALE, TODAY)

    assert [plan.horizon_months for plan in plan_set.plans] == [3, 6, 9, 12]
    assert [plan.weeks for plan in plan_set.plans] == [12, 24, 36, 48]
    assert [plan.daily_calories for plan in plan_set.plans] == [
        1583,
        2042,
        2194,
        2271,
    ]
    assert [plan.calorie_delta_per_day for plan in plan_set.plans] == [
        917,
        458,
        306,
        229,
    ]
    assert [plan.feasibility for plan in plan_set.plans] == [
        Feasibility.HEALTHY,
        Feasibility.HEALTHY,
        Feasibility.HEALTHY,
        Feasibility.TOO_SLOW,
    ]
    assert plan_set.is_losing is True
    assert plan_set.weight_diff_kg == -10
    assert plan_set.recommended.horizon_months == 3


def test_plan_keeps_unrounded_weekly_change() -> None:
    plan = create_weight_plans(90, 80, 2500, Sex.MALE, TODAY).plans[0]

    assert plan.weekly_change_kg == pytest.approx(10 / 12)
    assert plan.weekly_change_display == 0.83


def test_plan_macros_follow_plan_calories() -> None:
    plan = create_weight_plans(90, 80, 2500, Sex.FEMALE, TODAY).plans[0]

    assert (plan.macros.protein_g, plan.macros.carbs_g, plan.macros.fat_g) == (
        139,
        158,
        44,
    )


def test_plan_projected_end_date() -> None:
    plan_set = create_weight_plans(90, 80, 2500, Sex.MALE, TODAY)

    assert plan_set.plans[0].projected_end_date == date(2024, 3, 31)


def test_gain_plans_add_calories() -> None:
    plan_set = create_weight_plans(60, 61, 2000, Sex.FEMALE, TODAY)

    assert plan_set.is_losing is False
    assert all(plan.daily_calories > 2000 for plan in plan_set.plans)
    assert plan_set.plans[2].daily_calories == 2031


def test_recommended_falls_back_to_nine_months_when_nothing_is_healthy() -> None:
    plan_set = create_weight_plans(60, 61, 2000, Sex.FEMALE, TODAY)

    assert all(plan.is_too_slow for plan in plan_set.plans)
    assert plan_set.recommended.horizon_months == 9


def test_recommended_skips_too_fast_plans() -> None:
    plan_set = create_weight_plans(100, 80, 2800, Sex.MALE, TODAY)

    assert plan_set.plans[0].is_too_fast
    assert plan_set.recommended.horizon_months == 6


def test_zero_difference_yields_too_slow_plans_at_tdee() -> None:
    plan_set = create_weight_plans(70, 70, 2200, Sex.MALE, TODAY)

    assert all(plan.weekly_change_kg == 0 for plan in plan_set.plans)
    assert all(plan.is_too_slow for plan in plan_set.plans)
    assert all(plan.daily_calories == 2200 for plan in plan_set.plans)
    assert plan_set.recommended.horizon_months == 9


def test_healthy_bounds_are_inclusive() -> None:
    plan_set = create_weight_plans(80, 68, 2500, Sex.MALE, TODAY)

    assert plan_set.plans[0].weekly_change_kg == 1.0
    assert plan_set.plans[-1].weekly_change_kg == 0.25
    assert all(plan.is_healthy for plan in plan_set.plans)


def test_custom_horizons_fall_back_to_last_plan() -> None:
    plan_set = create_weight_plans(70, 70.5, 2200, Sex.MALE, TODAY, horizons=(1, 2))

    assert [plan.horizon_months for plan in plan_set.plans] == [1, 2]
    assert plan_set.recommended.horizon_months == 2


@pytest.mark.parametrize(
    ("current", "target"),
    [(90, 80), (100, 80), (60, 61), (70, 70), (80, 68), (120, 60), (50, 95)],
)
def test_feasibility_labels_partition_plans(current: float, target: float) -> None:
    for plan in create_weight_plans(current, target, 2400, Sex.OTHER, TODAY).plans:
        flags = [plan.is_healthy, plan.is_too_fast, plan.is_too_slow]
        assert flags.count(True) == 1
        assert plan.is_healthy == (0.25 <= plan.weekly_change_kg <= 1.0)


def test_classify_weekly_change() -> None:
    assert classify_weekly_change(1.01) is Feasibility.TOO_FAST
    assert classify_weekly_change(1.0) is Feasibility.HEALTHY
    assert classify_weekly_change(0.25) is Feasibility.HEALTHY
    assert classify_weekly_change(0.2) is Feasibility.TOO_SLOW
