"""Domain models for the diet tracker."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

DEFAULT_CALORIE_GOAL = 2000
DEFAULT_UNIT = "grams"
RESERVED_CHARACTERS = (",", "\n", "\r")


@dataclass
class User:
    """Represents a registered user and their daily calorie goal."""

    username: str
    password: str
    daily_calorie_goal: int = DEFAULT_CALORIE_GOAL


@dataclass(frozen=True)
class FoodItem:
    """A consumed food with its per-unit calories and quantity."""

    name: str
    calories_per_unit: int
    quantity: float
    unit: str = DEFAULT_UNIT

    @property
    def total_calories(self) -> int:
        """Return calories for the consumed quantity, truncated to an int."""
        return math.floor(self.calories_per_unit * self.quantity)


class MealType(Enum):
    """Closed set of meal classifications with display names."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "MealType":
        """Return the member for a stored name such as ``LUNCH``."""
        return cls[name.strip().upper()]

    @classmethod
    def from_choice(cls, choice: int) -> "MealType":
        """Return the member at a 1-based menu position."""
        members = list(cls)
        if not 1 <= choice <= len(members):
            raise ValueError(f"Meal type choice out of range: {choice}")
        return members[choice - 1]


@dataclass
class Meal:
    """A meal logged by a user at a point in time."""

    username: str
    meal_type: MealType
    food_items: list[FoodItem] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def total_calories(self) -> int:
        return sum(item.total_calories for item in self.food_items)

    @property
    def formatted_date(self) -> str:
        return self.timestamp.strftime("%Y-%m-%d")

    @property
    def formatted_time(self) -> str:
        return self.timestamp.strftime("%H:%M")

    def add_food_item(self, item: FoodItem) -> None:
        self.food_items.append(item)

    def remove_food_item(self, name: str) -> bool:
        """Remove the first food item with the given name."""
        for index, item in enumerate(self.food_items):
            if item.name == name:
                del self.food_items[index]
                return True
        return False


@dataclass
class DailyLog:
    """Computed view of one user's meals for a single calendar date.

    The goal is a snapshot of the user's goal at the time the view was built.
    """

    username: str
    date: date
    daily_calorie_goal: int
    meals: list[Meal] = field(default_factory=list)

    @property
    def total_calories_consumed(self) -> int:
        return sum(meal.total_calories for meal in self.meals)

    @property
    def remaining_calories(self) -> int:
        return self.daily_calorie_goal - self.total_calories_consumed

    @property
    def goal_percentage(self) -> float:
        """Return consumed calories as a fraction of the goal (0.0 for no goal)."""
        if self.daily_calorie_goal == 0:
            return 0.0
        return self.total_calories_consumed / self.daily_calorie_goal

    @property
    def is_goal_exceeded(self) -> bool:
        return self.total_calories_consumed > self.daily_calorie_goal

    @property
    def formatted_date(self) -> str:
        return self.date.strftime("%Y-%m-%d")

    def meals_by_type(self, meal_type: MealType) -> list[Meal]:
        """Return the day's meals of one type, in logged order."""
        return [meal for meal in self.meals if meal.meal_type is meal_type]


@dataclass(frozen=True)
class DailySummary:
    """Persisted aggregate of a daily log. Carries no meals."""

    username: str
    date: date
    total_calories: int
    daily_calorie_goal: int


def is_storable_text(value: str) -> bool:
    """Return True when the value holds no field or record separators."""
    return not any(char in value for char in RESERVED_CHARACTERS)
