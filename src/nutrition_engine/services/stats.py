"""Statistics engine: period summaries, distributions and trends."""

import logging
from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from nutrition_engine.domain.log import DailyAggregate, MealEntry, MealType
from nutrition_engine.domain.stats import (
    AverageNutrition,
    BestWorstDays,
    CalorieTrend,
    DailyNutrition,
    DailyProgress,
    DayCalories,
    MacroDistribution,
    MealTypeDistribution,
    PeriodStats,
    Trend,
)
from nutrition_engine.domain.units import (
    KCAL_PER_GRAM_CARBS,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    round_half_up,
)
from nutrition_engine.services.aggregation import (
    daily_aggregates,
    meals_in_range,
    trailing_window,
)

_logger = logging.getLogger(__name__)

WEEK_DAYS = 7
MONTH_DAYS = 30

# Mean daily change (kcal) that must be exceeded to call a trend.
TREND_THRESHOLD_KCAL = 50

DEFAULT_TARGET_CALORIES = 2000


def period_stats(meals: Iterable[MealEntry], start: date, end: date) -> PeriodStats:
    """Summarize tracked days within [start, end]."""
    aggregates = daily_aggregates(meals, start, end)
    total_calories = sum(day.calories for day in aggregates)
    days_tracked = len(aggregates)
    avg_calories = round_half_up(total_calories / days_tracked) if days_tracked else 0
    return PeriodStats(
        total_calories=total_calories,
        avg_calories=avg_calories,
        total_protein_g=sum(day.protein_g for day in aggregates),
        total_carbs_g=sum(day.carbs_g for day in aggregates),
        total_fat_g=sum(day.fat_g for day in aggregates),
        total_meals=sum(day.meal_count for day in aggregates),
        days_tracked=days_tracked,
    )


def weekly_stats(meals: Iterable[MealEntry], today: date) -> PeriodStats:
    """Summarize the trailing week."""
    return period_stats(meals, *trailing_window(today, WEEK_DAYS))


def monthly_stats(meals: Iterable[MealEntry], today: date) -> PeriodStats:
    """Summarize the trailing 30 days."""
    return period_stats(meals, *trailing_window(today, MONTH_DAYS))


def macro_distribution_percent(
    protein_g: float, carbs_g: float, fat_g: float
) -> MacroDistribution:
    """Return each macro's share of total energy in whole percent.

    Percentages are rounded independently and may not sum to 100.
    """
    protein_kcal = protein_g * KCAL_PER_GRAM_PROTEIN
    carbs_kcal = carbs_g * KCAL_PER_GRAM_CARBS
    fat_kcal = fat_g * KCAL_PER_GRAM_FAT
    total = protein_kcal + carbs_kcal + fat_kcal
    if total == 0:
        return MacroDistribution(protein_pct=0, carbs_pct=0, fat_pct=0)
    return MacroDistribution(
        protein_pct=round_half_up(protein_kcal / total * 100),
        carbs_pct=round_half_up(carbs_kcal / total * 100),
        fat_pct=round_half_up(fat_kcal / total * 100),
    )


def meal_type_distribution(
    meals: Iterable[MealEntry], days: int, today: date
) -> MealTypeDistribution:
    """Count meals per declared type over the trailing window."""
    counts = dict.fromkeys(MealType, 0)
    for meal in meals_in_range(meals, *trailing_window(today, days)):
        counts[meal.meal_type] += 1
    return MealTypeDistribution(
        breakfast=counts[MealType.BREAKFAST],
        lunch=counts[MealType.LUNCH],
        dinner=counts[MealType.DINNER],
        snack=counts[MealType.SNACK],
    )


def calorie_trend(aggregates: Sequence[DailyAggregate]) -> CalorieTrend:
    """Compare mean calories of the earlier and later halves of the sequence.

    The split is by index, so with an odd count the later half is longer.
    """
    if len(aggregates) < 2:  # noqa: PLR2004
        return CalorieTrend(trend=Trend.STABLE, change=0)
    midpoint = len(aggregates) // 2
    earlier = aggregates[:midpoint]
    later = aggregates[midpoint:]
    mean_earlier = sum(day.calories for day in earlier) / len(earlier)
    mean_later = sum(day.calories for day in later) / len(later)
    change = round_half_up(mean_later - mean_earlier)
    if change > TREND_THRESHOLD_KCAL:
        trend = Trend.INCREASING
    elif change < -TREND_THRESHOLD_KCAL:
        trend = Trend.DECREASING
    else:
        trend = Trend.STABLE
    _logger.debug("Calorie trend: %s (%s kcal)", trend, change)
    return CalorieTrend(trend=trend, change=change)


def trailing_calorie_trend(
    meals: Iterable[MealEntry], days: int, today: date
) -> CalorieTrend:
    """Return the calorie trend for the trailing window."""
    return calorie_trend(daily_aggregates(meals, *trailing_window(today, days)))


def average_nutrition(
    meals: Iterable[MealEntry], days: int, today: date
) -> AverageNutrition:
    """Return rounded per-tracked-day averages over the trailing window."""
    aggregates = daily_aggregates(meals, *trailing_window(today, days))
    if not aggregates:
        return AverageNutrition(
            avg_calories=0, avg_protein_g=0, avg_carbs_g=0, avg_fat_g=0
        )
    count = len(aggregates)
    return AverageNutrition(
        avg_calories=round_half_up(sum(day.calories for day in aggregates) / count),
        avg_protein_g=round_half_up(sum(day.protein_g for day in aggregates) / count),
        avg_carbs_g=round_half_up(sum(day.carbs_g for day in aggregates) / count),
        avg_fat_g=round_half_up(sum(day.fat_g for day in aggregates) / count),
    )


def best_and_worst_days(
    meals: Iterable[MealEntry],
    days: int,
    today: date,
    target_calories: int = DEFAULT_TARGET_CALORIES,
) -> BestWorstDays:
    """Return the tracked days closest to and farthest from the target."""
    aggregates = daily_aggregates(meals, *trailing_window(today, days))
    if not aggregates:
        return BestWorstDays(best_day=None, worst_day=None)
    ranked = sorted(aggregates, key=lambda day: abs(day.calories - target_calories))
    best, worst = ranked[0], ranked[-1]
    return BestWorstDays(
        best_day=DayCalories(day=best.day, calories=best.calories),
        worst_day=DayCalories(day=worst.day, calories=worst.calories),
    )


def daily_nutrition(meals: Iterable[MealEntry], day: date) -> DailyNutrition:
    """Return totals for one date, zero when nothing was logged."""
    aggregates = daily_aggregates(meals, day, day)
    if not aggregates:
        return DailyNutrition(day=day, calories=0, protein_g=0, carbs_g=0, fat_g=0)
    total = aggregates[0]
    return DailyNutrition(
        day=day,
        calories=total.calories,
        protein_g=total.protein_g,
        carbs_g=total.carbs_g,
        fat_g=total.fat_g,
    )


def daily_progress(consumed: float, target: int) -> DailyProgress:
    """Return remaining calories and progress capped at 100 percent."""
    percent = min(consumed / target * 100, 100.0) if target > 0 else 0.0
    return DailyProgress(
        consumed=consumed,
        target=target,
        remaining=target - consumed,
        percent=percent,
        is_over_target=consumed > target,
    )


def week_dates(day: date) -> list[date]:
    """Return the Monday-first week containing ``day``."""
    monday = day - timedelta(days=day.weekday())
    return [monday + timedelta(days=offset) for offset in range(7)]
