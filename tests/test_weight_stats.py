"""Tests for body-weight analytics."""

from datetime import date

from nutrition_engine.domain.stats import Trend
from nutrition_engine.services.weight_stats import (
    average_weekly_change,
    latest_weight,
    weight_change_stats,
    weight_history_range,
)
from tests.conftest import make_weight


def test_weight_change_stats_decreasing() -> None:
    entries = [
        make_weight(date(2024, 1, 15), 78.5),
        make_weight(date(2024, 1, 1), 80),
    ]

    stats = weight_change_stats(entries)

    assert stats.start_weight_kg == 80
    assert stats.current_weight_kg == 78.5
    assert stats.total_change_kg == -1.5
    assert stats.change_pct == -1.9
    assert stats.trend is Trend.DECREASING


def test_weight_change_stats_small_change_is_stable() -> None:
    entries = [
        make_weight(date(2024, 1, 1), 80),
        make_weight(date(2024, 1, 8), 80.3),
    ]

    stats = weight_change_stats(entries)

    assert stats.total_change_kg == 0.3
    assert stats.trend is Trend.STABLE


def test_weight_change_stats_empty_log() -> None:
    stats = weight_change_stats([])

    assert stats.current_weight_kg is None
    assert stats.start_weight_kg is None
    assert stats.total_change_kg == 0.0
    assert stats.trend is Trend.STABLE


def test_average_weekly_change() -> None:
    entries = [
        make_weight(date(2024, 1, 1), 80),
        make_weight(date(2024, 1, 8), 79.4),
        make_weight(date(2024, 1, 15), 78.5),
    ]

    assert average_weekly_change(entries) == -0.75


def test_average_weekly_change_needs_two_samples() -> None:
    assert average_weekly_change([]) == 0.0
    assert average_weekly_change([make_weight(date(2024, 1, 1), 80)]) == 0.0


def test_average_weekly_change_same_timestamp() -> None:
    entries = [
        make_weight(date(2024, 1, 1), 80, entry_id="a"),
        make_weight(date(2024, 1, 1), 81, entry_id="b"),
    ]

    assert average_weekly_change(entries) == 0.0


def test_latest_weight() -> None:
    entries = [
        make_weight(date(2024, 1, 8), 79, entry_id="new"),
        make_weight(date(2024, 1, 1), 80, entry_id="old"),
    ]

    latest = latest_weight(entries)

    assert latest is not None
    assert latest.id == "new"
    assert latest_weight([]) is None


def test_weight_history_range() -> None:
    entries = [make_weight(date(2024, 1, day), 80 - day / 10) for day in (9, 1, 5)]

    selected = weight_history_range(entries, date(2024, 1, 2), date(2024, 1, 9))

    assert [entry.logged_at.day for entry in selected] == [5, 9]
