"""Energy calculator: BMR, TDEE, goal calories and macro split.

Uses the Mifflin-St Jeor equation for basal metabolic rate and fixed
activity multipliers for total daily energy expenditure. Every value is
rounded before it feeds the next step, so displayed numbers depend on the
order of rounding, not only on the final accuracy.
"""

import logging
import math

from nutrition_engine.domain.profile import (
    ActivityLevel,
    CalorieGoals,
    Goal,
    MacroSplit,
    Profile,
    Sex,
)
from nutrition_engine.domain.units import (
    KCAL_PER_GRAM_CARBS,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    WEEKS_PER_MONTH,
    round_half_up,
)

_logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

GOAL_CALORIE_DELTAS: dict[Goal, int] = {
    Goal.LOSE_WEIGHT: -500,
    Goal.MAINTAIN: 0,
    Goal.GAIN_WEIGHT: 300,
    Goal.GAIN_MUSCLE: 500,
}

# (protein, fat, carbs) shares of target calories.
GOAL_MACRO_RATIOS: dict[Goal, tuple[float, float, float]] = {
    Goal.LOSE_WEIGHT: (0.35, 0.25, 0.40),
    Goal.GAIN_MUSCLE: (0.40, 0.25, 0.35),
    Goal.GAIN_WEIGHT: (0.25, 0.25, 0.50),
    Goal.MAINTAIN: (0.30, 0.30, 0.40),
}

GOAL_WEEKLY_CHANGE_KG: dict[Goal, float] = {
    Goal.LOSE_WEIGHT: -0.5,
    Goal.MAINTAIN: 0.0,
    Goal.GAIN_WEIGHT: 0.3,
    Goal.GAIN_MUSCLE: 0.5,
}

DEFAULT_ACTIVITY_LEVEL = ActivityLevel.MODERATE
DEFAULT_GOAL = Goal.MAINTAIN

SIMPLE_PLAN_WEEKLY_CHANGE_KG = 0.5


def compute_bmr(weight_kg: float, height_cm: float, age: int, sex: Sex) -> int:
    """Return basal metabolic rate in kcal.

    Male:         10 x weight + 6.25 x height - 5 x age + 5
    Female/other: 10 x weight + 6.25 x height - 5 x age - 161
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    bmr = base + 5 if sex is Sex.MALE else base - 161
    return round_half_up(bmr)


def compute_tdee(bmr: int, activity_level: ActivityLevel) -> int:
    """Return total daily energy expenditure in kcal."""
    return round_half_up(bmr * ACTIVITY_MULTIPLIERS[activity_level])


def compute_target_calories(tdee: int, goal: Goal) -> int:
    """Return daily calorie target for a goal.

    The fixed deltas approximate -0.5 kg/week when losing and +0.3 to
    +0.5 kg/week when gaining, at 7700 kcal per kg.
    """
    return round_half_up(tdee + GOAL_CALORIE_DELTAS[goal])


def compute_macros(target_calories: int, goal: Goal) -> MacroSplit:
    """Split target calories into protein, carbs and fat grams.

    Each gram value is rounded on its own, so the macros may not add back up
    to exactly ``target_calories``.
    """
    protein_ratio, fat_ratio, carbs_ratio = GOAL_MACRO_RATIOS[goal]
    return MacroSplit(
        protein_g=round_half_up(
            target_calories * protein_ratio / KCAL_PER_GRAM_PROTEIN
        ),
        carbs_g=round_half_up(target_calories * carbs_ratio / KCAL_PER_GRAM_CARBS),
        fat_g=round_half_up(target_calories * fat_ratio / KCAL_PER_GRAM_FAT),
    )


def compute_user_goals(profile: Profile) -> CalorieGoals | None:
    """Return calorie and macro goals, or None for an incomplete profile.

    Activity level and goal fall back to moderate/maintain; the physiological
    fields never get defaults.
    """
    if not profile.is_complete:
        _logger.warning("Cannot compute goals: incomplete profile")
        return None

    activity_level = profile.activity_level or DEFAULT_ACTIVITY_LEVEL
    goal = profile.goal or DEFAULT_GOAL

    bmr = compute_bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex)
    tdee = compute_tdee(bmr, activity_level)
    target_calories = compute_target_calories(tdee, goal)
    macros = compute_macros(target_calories, goal)
    _logger.debug(
        "Goals computed: bmr=%s tdee=%s target=%s goal=%s",
        bmr,
        tdee,
        target_calories,
        goal,
    )
    return CalorieGoals(
        bmr=bmr,
        tdee=tdee,
        target_calories=target_calories,
        protein_g=macros.protein_g,
        carbs_g=macros.carbs_g,
        fat_g=macros.fat_g,
    )


def weekly_weight_change(goal: Goal) -> float:
    """Return the expected weekly weight change in kg for a goal."""
    return GOAL_WEEKLY_CHANGE_KG[goal]


def estimate_weeks_to_goal(
    current_weight_kg: float, target_weight_kg: float, goal: Goal
) -> int:
    """Return whole weeks needed to reach the target at the goal's pace."""
    weekly_change = abs(weekly_weight_change(goal))
    if weekly_change == 0:
        return 0
    return math.ceil(abs(target_weight_kg - current_weight_kg) / weekly_change)


def simple_plan_months(
    current_weight_kg: float, target_weight_kg: float
) -> int | None:
    """Return months needed at 0.5 kg/week, or None when already at target."""
    diff = abs(target_weight_kg - current_weight_kg)
    if diff == 0:
        return None
    weeks = math.ceil(diff / SIMPLE_PLAN_WEEKLY_CHANGE_KG)
    return math.ceil(weeks / WEEKS_PER_MONTH)
