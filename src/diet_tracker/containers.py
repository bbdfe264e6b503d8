"""Dependency container wiring for the application."""

from dataclasses import dataclass

from diet_tracker.adapters.file_repositories import (
    FileDailySummaryRepository,
    FileMealRepository,
    FileUserRepository,
)
from diet_tracker.adapters.text_file_store import TextFileStore
from diet_tracker.config import Settings
from diet_tracker.services.daily_logs import DailyLogService
from diet_tracker.services.meals import MealLogService
from diet_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: TextFileStore
    user_service: UserService
    meal_log_service: MealLogService
    daily_log_service: DailyLogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = TextFileStore(resolved_settings.data_dir)
    user_service = UserService(
        FileUserRepository(store, filename=resolved_settings.users_file)
    )
    meal_log_service = MealLogService(
        user_service=user_service,
        repository=FileMealRepository(store, filename=resolved_settings.meals_file),
    )
    daily_log_service = DailyLogService(
        FileDailySummaryRepository(store, filename=resolved_settings.daily_logs_file)
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        user_service=user_service,
        meal_log_service=meal_log_service,
        daily_log_service=daily_log_service,
    )
