"""Tests for configuration helpers."""

from datetime import UTC

from nutrition_engine.config import Settings, parse_plan_horizons, parse_timezone
from nutrition_engine.domain.plans import PLAN_HORIZON_MONTHS


def test_settings_defaults(settings) -> None:
    assert settings.timezone == "UTC"
    assert settings.log_records_table == "log_records"
    assert settings.profiles_table == "profiles"
    assert settings.plan_horizon_months is None
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "env-key")
    monkeypatch.setenv("PLAN_HORIZON_MONTHS", "1,2")
    monkeypatch.setenv("TIMEZONE", "Europe/Berlin")

    settings = Settings()

    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.plan_horizon_months == "1,2"
    assert settings.timezone == "Europe/Berlin"


def test_parse_plan_horizons() -> None:
    assert parse_plan_horizons(None) == PLAN_HORIZON_MONTHS
    assert parse_plan_horizons("1, 2,4") == (1, 2, 4)
    assert parse_plan_horizons("3,abc,0,-1,6") == (3, 6)
    assert parse_plan_horizons("") == PLAN_HORIZON_MONTHS
    assert parse_plan_horizons("nope") == PLAN_HORIZON_MONTHS


def test_parse_timezone_falls_back_to_utc() -> None:
    assert parse_timezone("UTC") is UTC
    assert parse_timezone("Not/AZone") is UTC
    assert parse_timezone("") is UTC
