"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time

import pytest

from nutrition_engine.config import Settings
from nutrition_engine.containers import AppContainer
from nutrition_engine.domain.log import MealEntry, MealType, WeightEntry
from nutrition_engine.domain.profile import Profile
from nutrition_engine.services.event_log import EventLogService, LogStore
from nutrition_engine.services.profiles import ProfileRepository, ProfileService
from nutrition_engine.services.reports import ReportService


@dataclass
class InMemoryLogStore(LogStore):
    """In-memory log store for tests."""

    collections: dict[str, list[dict[str, object]]] = field(default_factory=dict)

    def read_all(self, collection: str) -> list[dict[str, object]]:
        return [dict(record) for record in self.collections.get(collection, [])]

    def append(self, collection: str, record: dict[str, object]) -> None:
        self.collections.setdefault(collection, []).append(dict(record))

    def remove_by_id(self, collection: str, record_id: str) -> None:
        records = self.collections.get(collection, [])
        self.collections[collection] = [
            record for record in records if record.get("id") != record_id
        ]


@dataclass
class FailingLogStore(LogStore):
    """Log store whose backend is unreachable."""

    def read_all(self, collection: str) -> list[dict[str, object]]:
        raise RuntimeError(f"Failed to read {collection}")

    def append(self, collection: str, record: dict[str, object]) -> None:
        raise RuntimeError(f"Failed to append record to {collection}")

    def remove_by_id(self, collection: str, record_id: str) -> None:
        raise RuntimeError(f"Failed to delete {record_id} from {collection}")


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: Profile | None = None
    saved: list[Profile] = field(default_factory=list)

    def get_profile(self) -> Profile | None:
        return self.profile

    def save_profile(self, profile: Profile) -> None:
        self.profile = profile
        self.saved.append(profile)


def make_meal(  # noqa: PLR0913
    day: date,
    calories: float = 500,
    protein_g: float = 0,
    carbs_g: float = 0,
    fat_g: float = 0,
    meal_type: MealType = MealType.LUNCH,
    hour: int = 12,
    meal_id: str | None = None,
) -> MealEntry:
    """Build a meal logged on ``day`` at ``hour``."""
    return MealEntry(
        id=meal_id or f"meal-{day.isoformat()}-{hour}-{calories}",
        name="Test meal",
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        logged_at=datetime.combine(day, time(hour=hour), tzinfo=UTC),
        meal_type=meal_type,
    )


def make_weight(
    day: date, weight_kg: float, entry_id: str | None = None
) -> WeightEntry:
    """Build a weight sample taken on ``day`` at 08:00."""
    return WeightEntry(
        id=entry_id or f"weight-{day.isoformat()}",
        weight_kg=weight_kg,
        logged_at=datetime.combine(day, time(hour=8), tzinfo=UTC),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.eyJyb2xlIjoic2VydmljZV9yb2xlIn0.signature",
        environment="test",
    )


@pytest.fixture
def log_store() -> InMemoryLogStore:
    return InMemoryLogStore()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def event_log_service(log_store) -> EventLogService:
    return EventLogService(log_store)


@pytest.fixture
def profile_service(profile_repository) -> ProfileService:
    return ProfileService(profile_repository)


@pytest.fixture
def report_service(event_log_service, profile_service) -> ReportService:
    return ReportService(event_log=event_log_service, profile_service=profile_service)


@pytest.fixture
def container(
    settings, event_log_service, profile_service, report_service
) -> AppContainer:
    return AppContainer(
        settings=settings,
        event_log_service=event_log_service,
        profile_service=profile_service,
        report_service=report_service,
    )
