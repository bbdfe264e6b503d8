"""Meal logging service."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Protocol

from diet_tracker.domain.models import (
    DailyLog,
    FoodItem,
    Meal,
    MealType,
    is_storable_text,
)
from diet_tracker.domain.stats import EMPTY_STATISTICS, MealStatistics
from diet_tracker.services.users import UserService

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def load_meals(self) -> list[Meal]:
        """Return all stored meals in ledger order."""

    def save_meals(self, meals: list[Meal]) -> None:
        """Replace the stored meals with the given list."""


@dataclass
class MealLogService:
    """Ledger of logged meals with per-day and per-period aggregation."""

    user_service: UserService
    repository: MealRepository
    _meals: list[Meal] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._meals = self.repository.load_meals()

    def add_meal(
        self,
        username: str | None,
        meal_type: MealType | None,
        food_items: Sequence[FoodItem] | None,
    ) -> bool:
        """Log a meal stamped with the current time for an existing user."""
        if username is None or meal_type is None or not food_items:
            return False
        if not all(is_valid_food_item(item) for item in food_items):
            return False
        if self.user_service.find_by_username(username) is None:
            return False
        meal = Meal(username=username, meal_type=meal_type)
        for item in food_items:
            meal.add_food_item(item)
        self._meals.append(meal)
        _logger.info(
            "Meal logged: user=%s type=%s calories=%s",
            username,
            meal_type.name,
            meal.total_calories,
        )
        self.persist()
        return True

    def meals_by_user(self, username: str | None) -> list[Meal]:
        if username is None:
            return []
        return [meal for meal in self._meals if meal.username == username]

    def meals_by_user_and_date(
        self, username: str | None, day: date | None
    ) -> list[Meal]:
        if username is None or day is None:
            return []
        return [
            meal
            for meal in self._meals
            if meal.username == username and meal.timestamp.date() == day
        ]

    def meals_by_user_and_type(
        self, username: str | None, meal_type: MealType | None
    ) -> list[Meal]:
        if username is None or meal_type is None:
            return []
        return [
            meal
            for meal in self._meals
            if meal.username == username and meal.meal_type is meal_type
        ]

    def total_calories_for_date(self, username: str | None, day: date) -> int:
        return sum(
            meal.total_calories for meal in self.meals_by_user_and_date(username, day)
        )

    def build_daily_log(self, username: str | None, day: date) -> DailyLog | None:
        """Assemble a day's log using the user's current calorie goal."""
        user = self.user_service.find_by_username(username)
        if user is None:
            return None
        return DailyLog(
            username=user.username,
            date=day,
            daily_calorie_goal=user.daily_calorie_goal,
            meals=self.meals_by_user_and_date(user.username, day),
        )

    def remove_meal(
        self, username: str, meal_type: MealType, timestamp: datetime
    ) -> bool:
        """Remove the first meal matching user, type and exact timestamp."""
        for index, meal in enumerate(self._meals):
            if (
                meal.username == username
                and meal.meal_type is meal_type
                and meal.timestamp == timestamp
            ):
                del self._meals[index]
                self.persist()
                return True
        return False

    def most_recent_meal(self, username: str | None) -> Meal | None:
        meals = self.meals_by_user(username)
        if not meals:
            return None
        return max(meals, key=lambda meal: meal.timestamp)

    def statistics(self, username: str | None, days: int) -> MealStatistics:
        """Return totals over the last ``days`` days, today included.

        The average divides by the window length, so days without meals
        count as zero.
        """
        if username is None or days <= 0:
            return EMPTY_STATISTICS
        end = date.today()
        start = end - timedelta(days=days - 1)
        recent = [
            meal
            for meal in self.meals_by_user(username)
            if start <= meal.timestamp.date() <= end
        ]
        total_calories = sum(meal.total_calories for meal in recent)
        return MealStatistics(
            meal_count=len(recent),
            total_calories=total_calories,
            avg_calories_per_day=total_calories / days,
        )

    def persist(self) -> None:
        """Write the full ledger to the repository."""
        self.repository.save_meals(self._meals)


def is_valid_food_item(item: FoodItem | None) -> bool:
    """Return True for an item that can be logged and written back to disk.

    The name must be non-blank, calories non-negative and the quantity a
    finite positive number. Name and unit may not contain separators.
    """
    if item is None:
        return False
    if not item.name.strip() or item.calories_per_unit < 0:
        return False
    if not math.isfinite(item.quantity) or item.quantity <= 0:
        return False
    return is_storable_text(item.name) and is_storable_text(item.unit)
