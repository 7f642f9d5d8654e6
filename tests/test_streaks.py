"""Tests for the streak analyzer."""

from datetime import date

from nutrition_engine.services.reports import get_current_streak, get_longest_streak
from nutrition_engine.services.streaks import (
    current_streak,
    has_today_meal,
    longest_streak,
    streak_milestone,
    streak_summary,
)
from tests.conftest import make_meal


def _meals_on(*days: date) -> list:
    return [make_meal(day) for day in days]


def test_current_streak_counts_consecutive_days_ending_today() -> None:
    meals = _meals_on(date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3))

    assert current_streak(meals, date(2024, 1, 3)) == 3


def test_current_streak_stops_at_gap() -> None:
    meals = _meals_on(date(2024, 1, 1), date(2024, 1, 3))

    assert current_streak(meals, date(2024, 1, 3)) == 1


def test_current_streak_zero_without_meal_today() -> None:
    meals = _meals_on(date(2024, 1, 1), date(2024, 1, 2))

    assert current_streak(meals, date(2024, 1, 3)) == 0


def test_current_streak_counts_each_date_once() -> None:
    meals = [
        make_meal(date(2024, 1, 2), hour=8),
        make_meal(date(2024, 1, 2), hour=20),
        make_meal(date(2024, 1, 3), hour=8),
        make_meal(date(2024, 1, 3), hour=13),
    ]

    assert current_streak(meals, date(2024, 1, 3)) == 2


def test_current_streak_ignores_future_dates() -> None:
    meals = _meals_on(date(2024, 1, 2), date(2024, 1, 3), date(2024, 1, 4))

    assert current_streak(meals, date(2024, 1, 3)) == 2


def test_current_streak_empty_log() -> None:
    assert get_current_streak([], date(2024, 1, 3)) == 0


def test_longest_streak() -> None:
    meals = _meals_on(
        date(2024, 1, 10),
        date(2024, 1, 1),
        date(2024, 1, 2),
        date(2024, 1, 11),
        date(2024, 1, 3),
    )

    assert longest_streak(meals) == 3
    assert get_longest_streak(meals) == 3


def test_longest_streak_single_and_empty() -> None:
    assert longest_streak(_meals_on(date(2024, 1, 1))) == 1
    assert longest_streak([]) == 0


def test_longest_streak_across_month_boundary() -> None:
    meals = _meals_on(date(2024, 1, 31), date(2024, 2, 1), date(2024, 2, 2))

    assert longest_streak(meals) == 3


def test_has_today_meal() -> None:
    meals = _meals_on(date(2024, 1, 2))

    assert has_today_meal(meals, date(2024, 1, 2)) is True
    assert has_today_meal(meals, date(2024, 1, 3)) is False


def test_has_today_meal_agrees_with_tracked_dates() -> None:
    meals = [
        make_meal(date(2024, 1, 2), hour=8),
        make_meal(date(2024, 1, 2), hour=19),
        make_meal(date(2024, 1, 2), calories=0, hour=21),
    ]

    assert has_today_meal(meals, date(2024, 1, 2)) is True
    assert has_today_meal([], date(2024, 1, 2)) is False


def test_streak_milestone() -> None:
    assert streak_milestone(7) is not None
    assert streak_milestone(7).days == 7
    assert streak_milestone(8) is None
    assert streak_milestone(0) is None


def test_streak_summary() -> None:
    meals = _meals_on(
        date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3), date(2024, 1, 5)
    )

    summary = streak_summary(meals, date(2024, 1, 5))

    assert summary.current == 1
    assert summary.longest == 3
    assert summary.has_today_meal is True
    assert summary.milestone is not None
    assert summary.milestone.days == 1
