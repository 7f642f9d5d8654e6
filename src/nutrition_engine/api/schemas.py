"""Pydantic models for API request payloads."""

from datetime import datetime

from pydantic import BaseModel, Field

from nutrition_engine.domain.log import MealType
from nutrition_engine.domain.profile import ActivityLevel, Goal, Sex


class MealCreate(BaseModel):
    """Meal to append to the log."""

    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein_g: float = Field(default=0, ge=0)
    carbs_g: float = Field(default=0, ge=0)
    fat_g: float = Field(default=0, ge=0)
    meal_type: MealType
    logged_at: datetime | None = None


class WeightCreate(BaseModel):
    """Body-weight sample to append to the log."""

    weight_kg: float = Field(ge=30, le=300)
    logged_at: datetime | None = None
    note: str | None = None


class ProfileUpdate(BaseModel):
    """Replacement profile; unset physiological fields leave goals undefined."""

    weight_kg: float | None = Field(default=None, gt=0)
    height_cm: float | None = Field(default=None, gt=0)
    age: int | None = Field(default=None, gt=0)
    sex: Sex | None = None
    activity_level: ActivityLevel | None = None
    goal: Goal | None = None
    target_weight_kg: float | None = Field(default=None, gt=0)
