"""Analytics over the body-weight log."""

from collections.abc import Iterable
from datetime import date, timedelta

from nutrition_engine.domain.log import WeightEntry
from nutrition_engine.domain.stats import Trend, WeightChangeStats
from nutrition_engine.domain.units import round_to

# Total change (kg) that must be exceeded to call a weight trend.
WEIGHT_TREND_THRESHOLD_KG = 0.5

_ONE_WEEK = timedelta(weeks=1)


def weight_history_range(
    entries: Iterable[WeightEntry], start: date, end: date
) -> list[WeightEntry]:
    """Return samples dated within [start, end], oldest first."""
    selected = [
        entry for entry in entries if start <= entry.logged_at.date() <= end
    ]
    return sorted(selected, key=lambda entry: entry.logged_at)


def latest_weight(entries: Iterable[WeightEntry]) -> WeightEntry | None:
    """Return the most recent sample, if any."""
    return max(entries, key=lambda entry: entry.logged_at, default=None)


def weight_change_stats(entries: Iterable[WeightEntry]) -> WeightChangeStats:
    """Compare the oldest and newest samples."""
    ordered = sorted(entries, key=lambda entry: entry.logged_at)
    if not ordered:
        return WeightChangeStats(
            current_weight_kg=None,
            start_weight_kg=None,
            total_change_kg=0.0,
            change_pct=0.0,
            trend=Trend.STABLE,
        )
    start = ordered[0].weight_kg
    current = ordered[-1].weight_kg
    total_change = current - start
    change_pct = total_change / start * 100 if start else 0.0
    if total_change > WEIGHT_TREND_THRESHOLD_KG:
        trend = Trend.INCREASING
    elif total_change < -WEIGHT_TREND_THRESHOLD_KG:
        trend = Trend.DECREASING
    else:
        trend = Trend.STABLE
    return WeightChangeStats(
        current_weight_kg=current,
        start_weight_kg=start,
        total_change_kg=round_to(total_change, 1),
        change_pct=round_to(change_pct, 1),
        trend=trend,
    )


def average_weekly_change(entries: Iterable[WeightEntry]) -> float:
    """Return the mean weekly change in kg between the oldest and newest samples."""
    ordered = sorted(entries, key=lambda entry: entry.logged_at)
    if len(ordered) < 2:  # noqa: PLR2004
        return 0.0
    first, last = ordered[0], ordered[-1]
    weeks = (last.logged_at - first.logged_at) / _ONE_WEEK
    if weeks == 0:
        return 0.0
    return round_to((last.weight_kg - first.weight_kg) / weeks, 2)
