"""Domain models for statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MealStatistics:
    """Totals for a user's meals over a trailing window of days."""

    meal_count: int
    total_calories: int
    avg_calories_per_day: float


EMPTY_STATISTICS = MealStatistics(
    meal_count=0, total_calories=0, avg_calories_per_day=0.0
)
