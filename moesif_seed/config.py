"""
Configuration settings for moesif-seed.

Uses Pydantic Settings to load the Moesif credential, API location, logging and
generation defaults from environment variables or a local `.env` file. Only the
CLI layer reads these; the generator and client receive plain arguments.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.moesif.net/v1"


class Settings(BaseSettings):
    # Moesif
    moesif_app_id: str = Field("", alias="MOESIF_APP_ID")
    moesif_api_url: str = Field(DEFAULT_API_URL, alias="MOESIF_API_URL")
    request_timeout_seconds: float = Field(30.0, alias="REQUEST_TIMEOUT_SECONDS")

    # Application
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Generation defaults
    default_count: int = Field(100, alias="DEFAULT_EVENT_COUNT")
    default_output: str = Field("moesif-events.json", alias="DEFAULT_EVENTS_FILE")
    lookback_days: int = Field(30, alias="EVENT_LOOKBACK_DAYS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def has_app_id(self) -> bool:
        return bool(self.moesif_app_id.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_API_URL", "Settings", "get_settings"]
