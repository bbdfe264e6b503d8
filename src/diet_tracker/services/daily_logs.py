"""Archive of daily calorie summaries."""

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from diet_tracker.domain.models import DailyLog, DailySummary


class DailySummaryRepository(Protocol):
    """Persistence interface for daily summaries."""

    def load_summaries(self) -> list[DailySummary]:
        """Return all stored daily summaries."""

    def save_summaries(self, summaries: list[DailySummary]) -> None:
        """Replace the stored summaries with the given list."""


@dataclass
class DailyLogService:
    """Keeps one aggregate summary per user and date.

    Summaries hold totals only. Meal detail is always rebuilt from the meal
    ledger through ``MealLogService.build_daily_log``.
    """

    repository: DailySummaryRepository
    _summaries: list[DailySummary] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._summaries = self.repository.load_summaries()

    def record(self, log: DailyLog) -> DailySummary:
        """Snapshot a daily log, replacing any summary for the same day."""
        summary = DailySummary(
            username=log.username,
            date=log.date,
            total_calories=log.total_calories_consumed,
            daily_calorie_goal=log.daily_calorie_goal,
        )
        self._summaries = [
            existing
            for existing in self._summaries
            if (existing.username, existing.date) != (log.username, log.date)
        ]
        self._summaries.append(summary)
        self.persist()
        return summary

    def summaries_for_user(self, username: str) -> list[DailySummary]:
        """Return a user's summaries, newest date first."""
        return sorted(
            (entry for entry in self._summaries if entry.username == username),
            key=lambda entry: entry.date,
            reverse=True,
        )

    def summary_for(self, username: str, day: date) -> DailySummary | None:
        for entry in self._summaries:
            if entry.username == username and entry.date == day:
                return entry
        return None

    def persist(self) -> None:
        self.repository.save_summaries(self._summaries)
