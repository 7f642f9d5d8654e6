"""Domain models for weight-change plans."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from nutrition_engine.domain.profile import MacroSplit
from nutrition_engine.domain.units import round_to

PLAN_HORIZON_MONTHS: tuple[int, ...] = (3, 6, 9, 12)

# Index of the plan recommended when no horizon is healthy (9 months).
FALLBACK_PLAN_INDEX = 2

MIN_HEALTHY_WEEKLY_CHANGE_KG = 0.25
MAX_HEALTHY_WEEKLY_CHANGE_KG = 1.0


class Feasibility(StrEnum):
    """How sustainable a plan's weekly rate of change is."""

    HEALTHY = "healthy"
    TOO_FAST = "too_fast"
    TOO_SLOW = "too_slow"


@dataclass(frozen=True)
class WeightPlan:
    """Calorie plan that reaches the target weight over a fixed horizon."""

    horizon_months: int
    weeks: int
    weekly_change_kg: float
    daily_calories: int
    calorie_delta_per_day: int
    macros: MacroSplit
    feasibility: Feasibility
    recommendation: str
    projected_end_date: date

    @property
    def weekly_change_display(self) -> float:
        """Weekly change rounded to two decimals for display."""
        return round_to(self.weekly_change_kg, 2)

    @property
    def is_healthy(self) -> bool:
        """Whether the weekly pace sits inside the healthy band."""
        return self.feasibility is Feasibility.HEALTHY

    @property
    def is_too_fast(self) -> bool:
        """Whether the weekly pace exceeds the healthy maximum."""
        return self.feasibility is Feasibility.TOO_FAST

    @property
    def is_too_slow(self) -> bool:
        """Whether the weekly pace falls below the healthy minimum."""
        return self.feasibility is Feasibility.TOO_SLOW


@dataclass(frozen=True)
class WeightPlanSet:
    """All horizon plans plus the recommended one."""

    plans: list[WeightPlan]
    recommended: WeightPlan
    current_weight_kg: float
    target_weight_kg: float
    weight_diff_kg: float
    is_losing: bool


@dataclass(frozen=True)
class GoalEstimate:
    """Rough time-to-target figures next to the horizon plans."""

    current_weight_kg: float
    target_weight_kg: float
    weeks_at_goal_pace: int | None
    months_at_half_kg_pace: int | None
