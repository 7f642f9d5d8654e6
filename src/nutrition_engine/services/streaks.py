"""Streak analyzer over the distinct tracked dates of the meal log."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from nutrition_engine.domain.log import MealEntry
from nutrition_engine.domain.stats import StreakMilestone, StreakSummary
from nutrition_engine.services.aggregation import tracked_dates

_logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)

STREAK_MILESTONES: tuple[StreakMilestone, ...] = (
    StreakMilestone(1, "First step taken!"),
    StreakMilestone(3, "3 days in a row! Great!"),
    StreakMilestone(7, "One week complete!"),
    StreakMilestone(14, "Two weeks! You're on fire!"),
    StreakMilestone(30, "One month! Incredible!"),
    StreakMilestone(60, "Two months! Legendary!"),
    StreakMilestone(100, "100 days! Unforgettable!"),
)


def current_streak(meals: Iterable[MealEntry], today: date) -> int:
    """Count consecutive tracked days ending today.

    Walks backward from today; the first missing day ends the streak, and a
    day without a meal today means the streak is zero.
    """
    streak = 0
    cursor = today
    for day in sorted(tracked_dates(meals), reverse=True):
        if day == cursor:
            streak += 1
            cursor -= _ONE_DAY
        elif day < cursor:
            break
    _logger.debug("Current streak: %s", streak)
    return streak


def longest_streak(meals: Iterable[MealEntry]) -> int:
    """Return the longest run of consecutive tracked days in the log."""
    days = tracked_dates(meals)
    if not days:
        return 0
    longest = 1
    running = 1
    for previous, current in zip(days, days[1:], strict=False):
        if current - previous == _ONE_DAY:
            running += 1
            longest = max(longest, running)
        else:
            running = 1
    return longest


def has_today_meal(meals: Iterable[MealEntry], today: date) -> bool:
    """Return True when at least one meal is logged today."""
    return today in tracked_dates(meals)


def streak_milestone(streak: int) -> StreakMilestone | None:
    """Return the milestone reached at exactly this streak length."""
    for milestone in STREAK_MILESTONES:
        if milestone.days == streak:
            return milestone
    return None


def streak_summary(meals: Iterable[MealEntry], today: date) -> StreakSummary:
    """Bundle current and longest streak with today's status."""
    entries = list(meals)
    current = current_streak(entries, today)
    return StreakSummary(
        current=current,
        longest=longest_streak(entries),
        has_today_meal=has_today_meal(entries, today),
        milestone=streak_milestone(current),
    )
