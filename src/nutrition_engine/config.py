"""Application configuration."""

import logging
import os
from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_engine.domain.plans import PLAN_HORIZON_MONTHS

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

_logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    timezone: str = "UTC"
    log_records_table: str = "log_records"
    profiles_table: str = "profiles"
    plan_horizon_months: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_plan_horizons(raw: str | None) -> tuple[int, ...]:
    """Parse plan horizons in months from env, e.g. ``"3,6,9,12"``."""
    if raw is None:
        return PLAN_HORIZON_MONTHS
    horizons: list[int] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value.isdigit() and int(value) > 0:
            horizons.append(int(value))
    return tuple(horizons) or PLAN_HORIZON_MONTHS


def parse_timezone(name: str) -> tzinfo:
    """Return the zone for an IANA name, falling back to UTC."""
    if name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        _logger.warning("Unknown timezone %r, falling back to UTC", name)
        return UTC
