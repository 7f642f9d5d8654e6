"""Event log service over the external meal and weight collections."""

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime, tzinfo
from typing import Protocol
from uuid import uuid4

from nutrition_engine.domain.log import MealEntry, MealType, WeightEntry
from nutrition_engine.domain.records import (
    MEALS_COLLECTION,
    WEIGHTS_COLLECTION,
    meal_from_record,
    meal_to_record,
    weight_from_record,
    weight_to_record,
)

_logger = logging.getLogger(__name__)

MIN_PLAUSIBLE_WEIGHT_KG = 30.0
MAX_PLAUSIBLE_WEIGHT_KG = 300.0


class LogStore(Protocol):
    """Append/delete-only document store holding the event collections."""

    def read_all(self, collection: str) -> list[dict[str, object]]:
        """Return every record in a collection."""

    def append(self, collection: str, record: dict[str, object]) -> None:
        """Append a record to a collection."""

    def remove_by_id(self, collection: str, record_id: str) -> None:
        """Delete a record by id; unknown ids are ignored."""


def to_local_time(moment: datetime, tz: tzinfo) -> datetime:
    """Express a timestamp in ``tz``; naive values are taken as already local."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


@dataclass
class EventLogService:
    """Reads and mutates the meal and weight logs.

    Reads return the full collection and run in a worker thread so callers
    can await them; the engine keeps no cache of its own. Every timestamp
    going in or coming out is expressed in ``tz``, so calendar dates agree
    with the caller's notion of "today".
    """

    store: LogStore
    tz: tzinfo = UTC

    async def read_meals(self) -> list[MealEntry]:
        """Return every logged meal."""
        records = await asyncio.to_thread(self.store.read_all, MEALS_COLLECTION)
        meals = [meal_from_record(record) for record in records]
        return [
            replace(meal, logged_at=to_local_time(meal.logged_at, self.tz))
            for meal in meals
        ]

    async def read_weights(self) -> list[WeightEntry]:
        """Return every weight sample."""
        records = await asyncio.to_thread(self.store.read_all, WEIGHTS_COLLECTION)
        entries = [weight_from_record(record) for record in records]
        return [
            replace(entry, logged_at=to_local_time(entry.logged_at, self.tz))
            for entry in entries
        ]

    def log_meal(  # noqa: PLR0913
        self,
        name: str,
        calories: float,
        protein_g: float,
        carbs_g: float,
        fat_g: float,
        meal_type: MealType,
        logged_at: datetime,
    ) -> MealEntry:
        """Create and persist a meal entry."""
        meal = MealEntry(
            id=str(uuid4()),
            name=name,
            calories=calories,
            protein_g=protein_g,
            carbs_g=carbs_g,
            fat_g=fat_g,
            logged_at=to_local_time(logged_at, self.tz),
            meal_type=meal_type,
        )
        self.store.append(MEALS_COLLECTION, meal_to_record(meal))
        _logger.info("Meal logged: id=%s calories=%s", meal.id, meal.calories)
        return meal

    def delete_meal(self, meal_id: str) -> None:
        """Delete a meal entry."""
        self.store.remove_by_id(MEALS_COLLECTION, meal_id)
        _logger.info("Meal deleted: id=%s", meal_id)

    def add_weight(
        self, weight_kg: float, logged_at: datetime, note: str | None = None
    ) -> WeightEntry | None:
        """Persist a weight sample, or return None when it is implausible."""
        if not MIN_PLAUSIBLE_WEIGHT_KG <= weight_kg <= MAX_PLAUSIBLE_WEIGHT_KG:
            _logger.warning("Rejected implausible weight sample: %s kg", weight_kg)
            return None
        entry = WeightEntry(
            id=str(uuid4()),
            weight_kg=weight_kg,
            logged_at=to_local_time(logged_at, self.tz),
            note=note,
        )
        self.store.append(WEIGHTS_COLLECTION, weight_to_record(entry))
        _logger.info("Weight logged: id=%s weight=%s", entry.id, entry.weight_kg)
        return entry

    def delete_weight(self, entry_id: str) -> None:
        """Delete a weight sample."""
        self.store.remove_by_id(WEIGHTS_COLLECTION, entry_id)
        _logger.info("Weight deleted: id=%s", entry_id)
