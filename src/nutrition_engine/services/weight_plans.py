"""Weight plan projector.

Builds one calorie plan per horizon for moving from the current weight to a
target weight, and labels each plan by how sustainable its weekly rate is.
"""

import logging
from collections.abc import Sequence
from datetime import date, timedelta

from nutrition_engine.domain.plans import (
    FALLBACK_PLAN_INDEX,
    MAX_HEALTHY_WEEKLY_CHANGE_KG,
    MIN_HEALTHY_WEEKLY_CHANGE_KG,
    PLAN_HORIZON_MONTHS,
    Feasibility,
    WeightPlan,
    WeightPlanSet,
)
from nutrition_engine.domain.profile import Goal, Sex
from nutrition_engine.domain.units import (
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    KCAL_PER_KG_FAT,
    WEEKS_PER_MONTH,
    round_half_up,
)
from nutrition_engine.services.energy import compute_macros

_logger = logging.getLogger(__name__)

RECOMMENDATIONS: dict[Feasibility, str] = {
    Feasibility.HEALTHY: "Healthy and sustainable",
    Feasibility.TOO_FAST: "Too fast, may be unhealthy",
    Feasibility.TOO_SLOW: "Progress is very slow",
}


def classify_weekly_change(weekly_change_kg: float) -> Feasibility:
    """Return the feasibility label for a weekly rate of change."""
    if weekly_change_kg > MAX_HEALTHY_WEEKLY_CHANGE_KG:
        return Feasibility.TOO_FAST
    if weekly_change_kg < MIN_HEALTHY_WEEKLY_CHANGE_KG:
        return Feasibility.TOO_SLOW
    return Feasibility.HEALTHY


def create_weight_plans(  # noqa: PLR0913
    current_weight_kg: float,
    target_weight_kg: float,
    tdee: int,
    sex: Sex,  # noqa: ARG001
    today: date,
    horizons: Sequence[int] = PLAN_HORIZON_MONTHS,
) -> WeightPlanSet:
    """Project plans for each horizon and pick the recommended one.

    The caller is expected not to ask for a plan when current and target
    weight are equal; if it does, every plan has a zero weekly change and is
    labelled too slow.
    """
    weight_diff = target_weight_kg - current_weight_kg
    is_losing = weight_diff < 0
    absolute_diff = abs(weight_diff)
    goal = Goal.LOSE_WEIGHT if is_losing else Goal.GAIN_WEIGHT

    plans = [
        _build_plan(months, absolute_diff, tdee, is_losing, goal, today)
        for months in horizons
    ]
    recommended = _recommend(plans)
    _logger.debug(
        "Weight plans built: diff=%s horizons=%s recommended=%s",
        weight_diff,
        list(horizons),
        recommended.horizon_months,
    )
    return WeightPlanSet(
        plans=plans,
        recommended=recommended,
        current_weight_kg=current_weight_kg,
        target_weight_kg=target_weight_kg,
        weight_diff_kg=weight_diff,
        is_losing=is_losing,
    )


def _build_plan(  # noqa: PLR0913
    months: int,
    absolute_diff: float,
    tdee: int,
    is_losing: bool,
    goal: Goal,
    today: date,
) -> WeightPlan:
    weeks = months * WEEKS_PER_MONTH
    weekly_change = absolute_diff / weeks if weeks else 0.0
    daily_change = weekly_change * KCAL_PER_KG_FAT / DAYS_PER_WEEK
    daily_calories = round_half_up(
        tdee - daily_change if is_losing else tdee + daily_change
    )
    feasibility = classify_weekly_change(weekly_change)
    return WeightPlan(
        horizon_months=months,
        weeks=weeks,
        weekly_change_kg=weekly_change,
        daily_calories=daily_calories,
        calorie_delta_per_day=round_half_up(daily_change),
        macros=compute_macros(daily_calories, goal),
        feasibility=feasibility,
        recommendation=RECOMMENDATIONS[feasibility],
        projected_end_date=today + timedelta(days=months * DAYS_PER_MONTH),
    )


def _recommend(plans: list[WeightPlan]) -> WeightPlan:
    for plan in plans:
        if plan.is_healthy:
            return plan
    if len(plans) > FALLBACK_PLAN_INDEX:
        return plans[FALLBACK_PLAN_INDEX]
    return plans[-1]
