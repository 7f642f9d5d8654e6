"""Energy constants and rounding helpers shared by the engine."""

import math

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

# Approximate energy stored in 1 kg of adipose tissue.
KCAL_PER_KG_FAT = 7700

DAYS_PER_WEEK = 7
WEEKS_PER_MONTH = 4
DAYS_PER_MONTH = 30


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def round_to(value: float, digits: int) -> float:
    """Round to a number of decimal places using half-up semantics."""
    factor = 10**digits
    return round_half_up(value * factor) / factor
