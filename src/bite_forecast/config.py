"""
Application settings loaded from environment variables.

Every field can be overridden with a ``BITE_FORECAST_`` prefixed variable
(e.g. ``BITE_FORECAST_LAT=46.5``) or from a local ``.env`` file.
The engine itself never reads settings; only the CLI and flows do.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI and Prefect flows."""

    model_config = SettingsConfigDict(
        env_prefix="BITE_FORECAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "bite-forecast"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Default lake location (Mille Lacs, MN)
    lat: float = Field(default=46.25, ge=-90, le=90)
    lon: float = Field(default=-93.65, ge=-180, le=180)

    # OpenWeather 5-day / 3-hour forecast
    openweather_api_key: str | None = None
    openweather_url: str = "https://api.openweathermap.org/data/2.5/forecast"

    # Weather-history REST layer (optional)
    history_api_url: str | None = None
    region_id: int | None = None
    history_days: int = Field(default=7, ge=1, le=30)

    # Display timezone for the lake (IANA name)
    timezone: str = "America/Chicago"

    # Local output
    data_dir: Path = Path("data")
    api_port: int = 8000

    # Species x hour parallelism (1 = serial)
    max_workers: int = Field(default=1, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
