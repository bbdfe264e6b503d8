"""Flat-file repositories backed by a TextFileStore."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from diet_tracker.adapters.line_format import (
    decode_daily_summary,
    decode_meal,
    decode_user,
    encode_daily_summary,
    encode_meal,
    encode_user,
)
from diet_tracker.adapters.text_file_store import TextFileStore
from diet_tracker.domain.models import DailySummary, Meal, User
from diet_tracker.services.daily_logs import DailySummaryRepository
from diet_tracker.services.meals import MealRepository
from diet_tracker.services.users import UserRepository

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


@dataclass
class FileUserRepository(UserRepository):
    """Stores users as ``username,password,goal`` lines."""

    store: TextFileStore
    filename: str = "users.txt"

    def load_users(self) -> list[User]:
        return _load(self.store, self.filename, decode_user)

    def save_users(self, users: list[User]) -> None:
        _save(self.store, self.filename, users, encode_user)


@dataclass
class FileMealRepository(MealRepository):
    """Stores meals with their food items flattened onto one line."""

    store: TextFileStore
    filename: str = "meals.txt"

    def load_meals(self) -> list[Meal]:
        return _load(self.store, self.filename, decode_meal)

    def save_meals(self, meals: list[Meal]) -> None:
        _save(self.store, self.filename, meals, encode_meal)


@dataclass
class FileDailySummaryRepository(DailySummaryRepository):
    """Stores daily totals as ``username,date,total,goal`` lines."""

    store: TextFileStore
    filename: str = "daily_logs.txt"

    def load_summaries(self) -> list[DailySummary]:
        return _load(self.store, self.filename, decode_daily_summary)

    def save_summaries(self, summaries: list[DailySummary]) -> None:
        _save(self.store, self.filename, summaries, encode_daily_summary)


def _load(
    store: TextFileStore, filename: str, decode: Callable[[str], RecordT]
) -> list[RecordT]:
    records: list[RecordT] = []
    for number, line in enumerate(store.read_lines(filename), start=1):
        try:
            records.append(decode(line))
        except (KeyError, ValueError):
            _logger.warning("Skipping malformed line %s in %s", number, filename)
    return records


def _save(
    store: TextFileStore,
    filename: str,
    records: list[RecordT],
    encode: Callable[[RecordT], str],
) -> None:
    try:
        lines = [encode(record) for record in records]
    except ValueError:
        _logger.exception("Failed to encode records for %s", filename)
        return
    store.write_lines(filename, lines)
