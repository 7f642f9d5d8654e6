"""Reporting surface.

Plain-data query functions a UI or API layer calls directly, plus a service
that reads the logs and the profile and feeds them to those functions.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from nutrition_engine.domain.log import MealEntry, WeightEntry
from nutrition_engine.domain.plans import (
    PLAN_HORIZON_MONTHS,
    GoalEstimate,
    WeightPlanSet,
)
from nutrition_engine.domain.profile import CalorieGoals, Profile, Sex
from nutrition_engine.domain.stats import (
    AverageNutrition,
    BestWorstDays,
    CalorieTrend,
    DailyNutrition,
    DailyProgress,
    MacroDistribution,
    MealTypeDistribution,
    PeriodStats,
    StreakSummary,
    WeightSummary,
)
from nutrition_engine.services import stats, streaks, weight_stats
from nutrition_engine.services.energy import (
    compute_user_goals,
    estimate_weeks_to_goal,
    simple_plan_months,
)
from nutrition_engine.services.event_log import EventLogService
from nutrition_engine.services.profiles import ProfileService
from nutrition_engine.services.weight_plans import create_weight_plans

_logger = logging.getLogger(__name__)


def get_user_goals(profile: Profile) -> CalorieGoals | None:
    """Return goals for a profile, or None when it is incomplete."""
    return compute_user_goals(profile)


def get_weight_plans(  # noqa: PLR0913
    current_weight_kg: float,
    target_weight_kg: float,
    tdee: int,
    sex: Sex,
    today: date,
    horizons: Sequence[int] = PLAN_HORIZON_MONTHS,
) -> WeightPlanSet:
    """Return horizon plans for reaching the target weight."""
    return create_weight_plans(
        current_weight_kg, target_weight_kg, tdee, sex, today, horizons
    )


def get_current_streak(meals: Sequence[MealEntry], today: date) -> int:
    """Return consecutive tracked days ending today."""
    return streaks.current_streak(meals, today)


def get_longest_streak(meals: Sequence[MealEntry]) -> int:
    """Return the longest run of tracked days."""
    return streaks.longest_streak(meals)


def get_period_stats(
    meals: Sequence[MealEntry], start: date, end: date
) -> PeriodStats:
    """Return totals for tracked days in [start, end]."""
    return stats.period_stats(meals, start, end)


def get_calorie_trend(
    meals: Sequence[MealEntry], days: int, today: date
) -> CalorieTrend:
    """Return the trailing-window calorie trend."""
    return stats.trailing_calorie_trend(meals, days, today)


def get_meal_type_distribution(
    meals: Sequence[MealEntry], days: int, today: date
) -> MealTypeDistribution:
    """Return meal counts per type over the trailing window."""
    return stats.meal_type_distribution(meals, days, today)


def get_macro_distribution(
    protein_g: float, carbs_g: float, fat_g: float
) -> MacroDistribution:
    """Return each macro's share of energy in percent."""
    return stats.macro_distribution_percent(protein_g, carbs_g, fat_g)


@dataclass
class ReportService:
    """Loads the logs and profile on demand and runs the reports.

    Nothing is cached: every call reads the current state, so callers can
    re-invoke after each log mutation.
    """

    event_log: EventLogService
    profile_service: ProfileService
    horizons: Sequence[int] = PLAN_HORIZON_MONTHS

    def goals(self) -> CalorieGoals | None:
        """Return goals for the stored profile."""
        return self.profile_service.get_goals()

    async def weight_plans(self, today: date) -> WeightPlanSet | None:
        """Return plans toward the profile's target weight.

        The latest weight sample takes precedence over the profile weight.
        Returns None without a target, without goals, or when already at the
        target.
        """
        profile = self.profile_service.get_profile()
        if profile is None or profile.target_weight_kg is None:
            return None
        goals = compute_user_goals(profile)
        if goals is None:
            return None
        current = await self._current_weight(profile)
        if current is None or current == profile.target_weight_kg:
            _logger.info("Weight plans skipped: already at target weight")
            return None
        return get_weight_plans(
            current,
            profile.target_weight_kg,
            goals.tdee,
            profile.sex,
            today,
            self.horizons,
        )

    async def goal_estimate(self) -> GoalEstimate | None:
        """Return weeks at the goal pace and months at 0.5 kg/week to target."""
        profile = self.profile_service.get_profile()
        if profile is None or profile.target_weight_kg is None:
            return None
        current = await self._current_weight(profile)
        if current is None:
            return None
        weeks = (
            estimate_weeks_to_goal(current, profile.target_weight_kg, profile.goal)
            if profile.goal is not None
            else None
        )
        return GoalEstimate(
            current_weight_kg=current,
            target_weight_kg=profile.target_weight_kg,
            weeks_at_goal_pace=weeks,
            months_at_half_kg_pace=simple_plan_months(
                current, profile.target_weight_kg
            ),
        )

    async def streak_summary(self, today: date) -> StreakSummary:
        """Return current/longest streak state."""
        return streaks.streak_summary(await self.event_log.read_meals(), today)

    async def period_stats(self, start: date, end: date) -> PeriodStats:
        """Return stats for an explicit date range."""
        return get_period_stats(await self.event_log.read_meals(), start, end)

    async def weekly_stats(self, today: date) -> PeriodStats:
        """Return stats for the trailing week."""
        return stats.weekly_stats(await self.event_log.read_meals(), today)

    async def monthly_stats(self, today: date) -> PeriodStats:
        """Return stats for the trailing 30 days."""
        return stats.monthly_stats(await self.event_log.read_meals(), today)

    async def calorie_trend(self, days: int, today: date) -> CalorieTrend:
        """Return the trailing calorie trend."""
        return get_calorie_trend(await self.event_log.read_meals(), days, today)

    async def meal_type_distribution(
        self, days: int, today: date
    ) -> MealTypeDistribution:
        """Return meal-type counts for the trailing window."""
        return get_meal_type_distribution(
            await self.event_log.read_meals(), days, today
        )

    async def average_nutrition(self, days: int, today: date) -> AverageNutrition:
        """Return per-tracked-day averages."""
        return stats.average_nutrition(await self.event_log.read_meals(), days, today)

    async def best_and_worst_days(self, days: int, today: date) -> BestWorstDays:
        """Rank tracked days against the goal target, or the default target."""
        goals = self.goals()
        target = goals.target_calories if goals else stats.DEFAULT_TARGET_CALORIES
        return stats.best_and_worst_days(
            await self.event_log.read_meals(), days, today, target
        )

    async def today(self, today: date) -> tuple[DailyNutrition, DailyProgress | None]:
        """Return today's totals and progress against the goal, if any."""
        totals = stats.daily_nutrition(await self.event_log.read_meals(), today)
        goals = self.goals()
        if goals is None:
            return totals, None
        return totals, stats.daily_progress(totals.calories, goals.target_calories)

    async def week_calendar(self, today: date) -> list[DailyNutrition]:
        """Return per-day totals for the Monday-first week containing today."""
        meals = await self.event_log.read_meals()
        return [stats.daily_nutrition(meals, day) for day in stats.week_dates(today)]

    async def weight_history(self, start: date, end: date) -> list[WeightEntry]:
        """Return weight samples dated within [start, end], oldest first."""
        return weight_stats.weight_history_range(
            await self.event_log.read_weights(), start, end
        )

    async def weight_summary(self) -> WeightSummary:
        """Return latest sample, total change and weekly pace."""
        entries = await self.event_log.read_weights()
        return WeightSummary(
            latest=weight_stats.latest_weight(entries),
            change=weight_stats.weight_change_stats(entries),
            average_weekly_change_kg=weight_stats.average_weekly_change(entries),
        )

    async def _current_weight(self, profile: Profile) -> float | None:
        latest = weight_stats.latest_weight(await self.event_log.read_weights())
        return latest.weight_kg if latest else profile.weight_kg
