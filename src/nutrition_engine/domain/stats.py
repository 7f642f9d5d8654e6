"""Domain models for statistics, trends and streaks."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from nutrition_engine.domain.log import WeightEntry


class Trend(StrEnum):
    """Direction of a heuristic trend."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True)
class PeriodStats:
    """Totals across the tracked days of a period."""

    total_calories: float
    avg_calories: int
    total_protein_g: float
    total_carbs_g: float
    total_fat_g: float
    total_meals: int
    days_tracked: int


@dataclass(frozen=True)
class MacroDistribution:
    """Share of energy from each macronutrient, in whole percent."""

    protein_pct: int
    carbs_pct: int
    fat_pct: int


@dataclass(frozen=True)
class MealTypeDistribution:
    """Number of meals logged per declared meal type."""

    breakfast: int = 0
    lunch: int = 0
    dinner: int = 0
    snack: int = 0


@dataclass(frozen=True)
class CalorieTrend:
    """Two-window calorie trend."""

    trend: Trend
    change: int


@dataclass(frozen=True)
class AverageNutrition:
    """Rounded per-tracked-day averages."""

    avg_calories: int
    avg_protein_g: int
    avg_carbs_g: int
    avg_fat_g: int


@dataclass(frozen=True)
class DayCalories:
    """Calories consumed on a single date."""

    day: date
    calories: float


@dataclass(frozen=True)
class BestWorstDays:
    """Days closest to and farthest from a calorie target."""

    best_day: DayCalories | None
    worst_day: DayCalories | None


@dataclass(frozen=True)
class DailyNutrition:
    """Nutrition totals for one date, zero when nothing was logged."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class DailyProgress:
    """Progress of consumed calories against the target."""

    consumed: float
    target: int
    remaining: float
    percent: float
    is_over_target: bool


@dataclass(frozen=True)
class WeightChangeStats:
    """Change between the first and last weight samples."""

    current_weight_kg: float | None
    start_weight_kg: float | None
    total_change_kg: float
    change_pct: float
    trend: Trend


@dataclass(frozen=True)
class StreakMilestone:
    """Celebration reached at a specific streak length."""

    days: int
    message: str


@dataclass(frozen=True)
class StreakSummary:
    """Current adherence streak state."""

    current: int
    longest: int
    has_today_meal: bool
    milestone: StreakMilestone | None


@dataclass(frozen=True)
class WeightSummary:
    """Weight log overview."""

    latest: WeightEntry | None
    change: WeightChangeStats
    average_weekly_change_kg: float
