"""Domain models for the user's physiological profile and derived goals."""

from dataclasses import dataclass
from enum import StrEnum


class Sex(StrEnum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(StrEnum):
    """Ordinal activity tiers, least to most active."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Goal(StrEnum):
    """Body-weight objective."""

    LOSE_WEIGHT = "lose_weight"
    MAINTAIN = "maintain"
    GAIN_WEIGHT = "gain_weight"
    GAIN_MUSCLE = "gain_muscle"


@dataclass(frozen=True)
class Profile:
    """Physiological inputs for energy calculations.

    The physiological fields are optional because a new user fills them in
    gradually; goal computation treats any missing one as an incomplete
    profile.
    """

    weight_kg: float | None = None
    height_cm: float | None = None
    age: int | None = None
    sex: Sex | None = None
    activity_level: ActivityLevel | None = None
    goal: Goal | None = None
    target_weight_kg: float | None = None

    @property
    def is_complete(self) -> bool:
        """Return True when every field required by the BMR equation is set."""
        return bool(self.weight_kg and self.height_cm and self.age and self.sex)


@dataclass(frozen=True)
class MacroSplit:
    """Daily macronutrient targets in grams."""

    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class CalorieGoals:
    """Energy and macro targets derived from a profile."""

    bmr: int
    tdee: int
    target_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
