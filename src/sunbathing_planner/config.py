"""
Application settings.

Values come from the environment (or a local ``.env`` file) and are read once
per process through :func:`get_settings`. The API key is handed to
:class:`~sunbathing_planner.datasources.openweather.OpenWeatherClient` at
construction; datasource code never reads the environment itself.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    app_name: str = "sunbathing-planner"
    app_env: str = "development"
    debug: bool = False

    # Not validated: an empty key makes every call fail downstream.
    openweathermap_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "OPENWEATHERMAP_API_KEY", "NEXT_PUBLIC_OPENWEATHERMAP_API_KEY"
        ),
    )
    units: str = "metric"
    timezone: str | None = Field(default=None, description="IANA zone; host local time if unset")
    tick_interval_seconds: float = Field(default=1.0, gt=0)
    http_timeout_seconds: float = Field(default=30.0, gt=0)

    @property
    def has_api_key(self) -> bool:
        return bool(self.openweathermap_api_key)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
