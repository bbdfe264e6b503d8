"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    users_file: str = "users.txt"
    meals_file: str = "meals.txt"
    daily_logs_file: str = "daily_logs.txt"
    log_level: str = "WARNING"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="DIET_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
