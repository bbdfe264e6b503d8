"""Shared test fixtures."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

import pytest

from diet_tracker.cli.prompts import Prompter
from diet_tracker.config import Settings
from diet_tracker.domain.models import DailySummary, Meal, User
from diet_tracker.services.daily_logs import DailyLogService, DailySummaryRepository
from diet_tracker.services.meals import MealLogService, MealRepository
from diet_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: list[User] = field(default_factory=list)
    saves: int = 0

    def load_users(self) -> list[User]:
        return list(self.users)

    def save_users(self, users: list[User]) -> None:
        self.users = list(users)
        self.saves += 1


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: list[Meal] = field(default_factory=list)
    saves: int = 0

    def load_meals(self) -> list[Meal]:
        return list(self.meals)

    def save_meals(self, meals: list[Meal]) -> None:
        self.meals = list(meals)
        self.saves += 1


@dataclass
class InMemoryDailySummaryRepository(DailySummaryRepository):
    """In-memory daily summary repository for tests."""

    summaries: list[DailySummary] = field(default_factory=list)
    saves: int = 0

    def load_summaries(self) -> list[DailySummary]:
        return list(self.summaries)

    def save_summaries(self, summaries: list[DailySummary]) -> None:
        self.summaries = list(summaries)
        self.saves += 1


@dataclass
class ScriptedConsole:
    """Feeds canned answers to a Prompter and records everything written."""

    answers: list[str]
    output: list[str] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    def prompter(self) -> Prompter:
        return Prompter(read=self.read, write=self.write)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def make_console(answers: Iterable[str]) -> ScriptedConsole:
    return ScriptedConsole(answers=list(answers))


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[None]:
    logger = logging.getLogger("diet_tracker")
    yield
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture
def meal_log_service(
    user_service: UserService, meal_repository: InMemoryMealRepository
) -> MealLogService:
    return MealLogService(user_service=user_service, repository=meal_repository)


@pytest.fixture
def daily_log_service() -> DailyLogService:
    return DailyLogService(InMemoryDailySummaryRepository())
