from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized runtime configuration loaded from environment variables.
    """

    API_URL: str | None = None
    PLATFORM: Literal["web", "ios", "android"] = "web"
    SESSION_PATH: Path = Path.home() / ".evmart" / "session.db"
    REQUEST_TIMEOUT: float = 15.0
    BOOTSTRAP_TIMEOUT: float | None = None
    LOG_LEVEL: str = "INFO"
    APP_NAME: str = "EV Market"

    model_config = SettingsConfigDict(
        env_prefix="EVMART_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
