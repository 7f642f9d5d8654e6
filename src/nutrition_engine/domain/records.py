"""Conversion between domain models and persisted record payloads.

The log store treats records as opaque JSON blobs, so the key names below
are the stable storage schema.
"""

from datetime import datetime
from enum import StrEnum

from nutrition_engine.domain.log import MealEntry, MealType, WeightEntry
from nutrition_engine.domain.profile import ActivityLevel, Goal, Profile, Sex

MEALS_COLLECTION = "meals"
WEIGHTS_COLLECTION = "weights"


def meal_to_record(meal: MealEntry) -> dict[str, object]:
    """Serialize a meal entry."""
    return {
        "id": meal.id,
        "name": meal.name,
        "calories": meal.calories,
        "protein": meal.protein_g,
        "carbs": meal.carbs_g,
        "fat": meal.fat_g,
        "date": meal.logged_at.isoformat(),
        "mealType": meal.meal_type.value,
    }


def meal_from_record(record: dict[str, object]) -> MealEntry:
    """Deserialize a meal entry."""
    return MealEntry(
        id=str(record["id"]),
        name=str(record.get("name", "")),
        calories=_to_float(record.get("calories")),
        protein_g=_to_float(record.get("protein")),
        carbs_g=_to_float(record.get("carbs")),
        fat_g=_to_float(record.get("fat")),
        logged_at=datetime.fromisoformat(str(record["date"])),
        meal_type=_parse_enum(MealType, record.get("mealType")) or MealType.SNACK,
    )


def weight_to_record(entry: WeightEntry) -> dict[str, object]:
    """Serialize a weight entry."""
    record: dict[str, object] = {
        "id": entry.id,
        "weight": entry.weight_kg,
        "date": entry.logged_at.isoformat(),
    }
    if entry.note is not None:
        record["note"] = entry.note
    return record


def weight_from_record(record: dict[str, object]) -> WeightEntry:
    """Deserialize a weight entry."""
    note = record.get("note")
    return WeightEntry(
        id=str(record["id"]),
        weight_kg=_to_float(record.get("weight")),
        logged_at=datetime.fromisoformat(str(record["date"])),
        note=str(note) if note is not None else None,
    )


def profile_to_record(profile: Profile) -> dict[str, object]:
    """Serialize a profile, omitting unset fields."""
    record: dict[str, object] = {
        "weight": profile.weight_kg,
        "height": profile.height_cm,
        "age": profile.age,
        "gender": profile.sex.value if profile.sex else None,
        "activityLevel": (
            profile.activity_level.value if profile.activity_level else None
        ),
        "goal": profile.goal.value if profile.goal else None,
        "targetWeight": profile.target_weight_kg,
    }
    return {key: value for key, value in record.items() if value is not None}


def profile_from_record(record: dict[str, object]) -> Profile:
    """Deserialize a profile; unknown or missing values become None."""
    age = record.get("age")
    return Profile(
        weight_kg=_optional_float(record.get("weight")),
        height_cm=_optional_float(record.get("height")),
        age=int(age) if isinstance(age, int | float) else None,
        sex=_parse_enum(Sex, record.get("gender")),
        activity_level=_parse_enum(ActivityLevel, record.get("activityLevel")),
        goal=_parse_enum(Goal, record.get("goal")),
        target_weight_kg=_optional_float(record.get("targetWeight")),
    )


def _parse_enum(enum_type: type[StrEnum], value: object) -> StrEnum | None:
    if not isinstance(value, str):
        return None
    try:
        return enum_type(value)
    except ValueError:
        return None


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
