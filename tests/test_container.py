"""Tests for container wiring."""

from datetime import UTC

from nutrition_engine.adapters.supabase_log_store import SupabaseLogStore
from nutrition_engine.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.event_log_service is not None
    assert container.report_service.event_log is container.event_log_service
    assert isinstance(container.event_log_service.store, SupabaseLogStore)
    assert container.report_service.horizons == (3, 6, 9, 12)
    assert container.event_log_service.tz is UTC


def test_build_container_uses_configured_horizons(settings) -> None:
    settings.plan_horizon_months = "2,4"
    settings.log_records_table = "events"

    container = build_container(settings)

    assert container.report_service.horizons == (2, 4)
    assert container.event_log_service.store.table == "events"
