"""Comma-delimited line encoding for persisted records.

Each record occupies one line. Meals append one four-field group per food
item after the username, meal type and ISO timestamp.
"""

import math
from datetime import datetime

from diet_tracker.domain.models import (
    DailySummary,
    FoodItem,
    Meal,
    MealType,
    User,
    is_storable_text,
)

DELIMITER = ","
USER_FIELDS = 3
MEAL_HEADER_FIELDS = 3
FOOD_ITEM_FIELDS = 4
DAILY_SUMMARY_FIELDS = 4
DATE_FORMAT = "%Y-%m-%d"


def encode_user(user: User) -> str:
    return _join(user.username, user.password, str(user.daily_calorie_goal))


def decode_user(line: str) -> User:
    parts = _split(line, USER_FIELDS)
    return User(
        username=parts[0],
        password=parts[1],
        daily_calorie_goal=int(parts[2]),
    )


def encode_meal(meal: Meal) -> str:
    """Encode a meal and its food items as a single line."""
    fields = [meal.username, meal.meal_type.name, meal.timestamp.isoformat()]
    for item in meal.food_items:
        fields.extend(
            [
                item.name,
                str(item.calories_per_unit),
                str(float(item.quantity)),
                item.unit,
            ]
        )
    return _join(*fields)


def decode_meal(line: str) -> Meal:
    """Parse a meal line; trailing partial food-item groups are ignored."""
    parts = _split(line, MEAL_HEADER_FIELDS)
    meal = Meal(
        username=parts[0],
        meal_type=MealType.from_name(parts[1]),
        timestamp=datetime.fromisoformat(parts[2]),
    )
    for start in range(MEAL_HEADER_FIELDS, len(parts), FOOD_ITEM_FIELDS):
        group = parts[start : start + FOOD_ITEM_FIELDS]
        if len(group) < FOOD_ITEM_FIELDS:
            break
        meal.add_food_item(_decode_food_item(group))
    return meal


def _decode_food_item(group: list[str]) -> FoodItem:
    calories_per_unit = int(group[1])
    quantity = float(group[2])
    if calories_per_unit < 0:
        raise ValueError(f"Negative calories per unit: {group[1]!r}")
    if not math.isfinite(quantity) or quantity <= 0:
        raise ValueError(f"Quantity must be a positive number: {group[2]!r}")
    return FoodItem(
        name=group[0],
        calories_per_unit=calories_per_unit,
        quantity=quantity,
        unit=group[3],
    )


def encode_daily_summary(summary: DailySummary) -> str:
    return _join(
        summary.username,
        summary.date.strftime(DATE_FORMAT),
        str(summary.total_calories),
        str(summary.daily_calorie_goal),
    )


def decode_daily_summary(line: str) -> DailySummary:
    parts = _split(line, DAILY_SUMMARY_FIELDS)
    return DailySummary(
        username=parts[0],
        date=datetime.strptime(parts[1], DATE_FORMAT).date(),
        total_calories=int(parts[2]),
        daily_calorie_goal=int(parts[3]),
    )


def _join(*fields: str) -> str:
    for value in fields:
        if not is_storable_text(value):
            raise ValueError(f"Field cannot contain delimiters: {value!r}")
    return DELIMITER.join(fields)


def _split(line: str, min_fields: int) -> list[str]:
    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) < min_fields:
        raise ValueError(
            f"Expected at least {min_fields} fields, got {len(parts)}: {line!r}"
        )
    return parts
