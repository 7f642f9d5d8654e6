"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_engine.adapters.supabase_log_store import SupabaseLogStore
from nutrition_engine.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrition_engine.config import Settings, parse_plan_horizons, parse_timezone
from nutrition_engine.services.event_log import EventLogService
from nutrition_engine.services.profiles import ProfileService
from nutrition_engine.services.reports import ReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    event_log_service: EventLogService
    profile_service: ProfileService
    report_service: ReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    log_store = SupabaseLogStore(
        supabase_client, table=resolved_settings.log_records_table
    )
    profile_repository = SupabaseProfileRepository(
        supabase_client, table=resolved_settings.profiles_table
    )
    event_log_service = EventLogService(
        log_store, tz=parse_timezone(resolved_settings.timezone)
    )
    profile_service = ProfileService(profile_repository)
    report_service = ReportService(
        event_log=event_log_service,
        profile_service=profile_service,
        horizons=parse_plan_horizons(resolved_settings.plan_horizon_months),
    )
    return AppContainer(
        settings=resolved_settings,
        event_log_service=event_log_service,
        profile_service=profile_service,
        report_service=report_service,
    )
