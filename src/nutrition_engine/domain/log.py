"""Domain models for the meal and weight event logs."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class MealType(StrEnum):
    """Declared slot of a meal within the day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class MealEntry:
    """A logged meal with its nutrition totals."""

    id: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    logged_at: datetime
    meal_type: MealType

    @property
    def day(self) -> date:
        """Calendar date of the meal, ignoring time of day."""
        return self.logged_at.date()


@dataclass(frozen=True)
class WeightEntry:
    """A body-weight sample."""

    id: str
    weight_kg: float
    logged_at: datetime
    note: str | None = None


@dataclass(frozen=True)
class DailyAggregate:
    """Sum of all meals logged on one calendar date."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    meal_count: int
