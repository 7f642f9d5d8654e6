"""Per-day aggregation of the meal log.

Every higher-level report is built from ``daily_aggregates`` so that date
truncation happens in exactly one place.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from nutrition_engine.domain.log import DailyAggregate, MealEntry


def meals_in_range(
    meals: Iterable[MealEntry],
    start: date | None = None,
    end: date | None = None,
) -> list[MealEntry]:
    """Return meals whose calendar date falls within [start, end]."""
    return [
        meal
        for meal in meals
        if (start is None or meal.day >= start) and (end is None or meal.day <= end)
    ]


def daily_aggregates(
    meals: Iterable[MealEntry],
    start: date | None = None,
    end: date | None = None,
) -> list[DailyAggregate]:
    """Sum meals per calendar date, ascending.

    Only dates with at least one meal appear; days without meals are omitted
    rather than zero-filled, so a present date means "tracked that day".
    Open bounds cover the whole log.
    """
    totals: dict[date, DailyAggregate] = {}
    for meal in meals_in_range(meals, start, end):
        current = totals.get(meal.day)
        if current is None:
            current = DailyAggregate(
                day=meal.day,
                calories=0,
                protein_g=0,
                carbs_g=0,
                fat_g=0,
                meal_count=0,
            )
        totals[meal.day] = DailyAggregate(
            day=meal.day,
            calories=current.calories + meal.calories,
            protein_g=current.protein_g + meal.protein_g,
            carbs_g=current.carbs_g + meal.carbs_g,
            fat_g=current.fat_g + meal.fat_g,
            meal_count=current.meal_count + 1,
        )
    return [totals[day] for day in sorted(totals)]


def tracked_dates(meals: Iterable[MealEntry]) -> list[date]:
    """Return the distinct dates with at least one meal, ascending."""
    return [aggregate.day for aggregate in daily_aggregates(meals)]


def trailing_window(today: date, days: int) -> tuple[date, date]:
    """Return the inclusive [today - days, today] window."""
    return today - timedelta(days=days), today
