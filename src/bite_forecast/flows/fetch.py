"""
Prefect flow for fetching forecast inputs from external sources.

Needs an OpenWeather API key (``BITE_FORECAST_OPENWEATHER_API_KEY``).
Weather history is optional and only fetched when
``BITE_FORECAST_HISTORY_API_URL`` is set.

Run locally:
    python -m bite_forecast.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m bite_forecast.flows.fetch
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from bite_forecast.config import get_settings
from bite_forecast.datasources import openweather
from bite_forecast.datasources.weather_history import HttpWeatherHistory, load_recent_history
from bite_forecast.schemas import Location
from bite_forecast.store import (
    FORECAST_PATH,
    FORECAST_TTL,
    HISTORY_PATH,
    HISTORY_TTL,
    DataStore,
    expires_in,
)

# Data store with tiered directories
store = DataStore(get_settings().data_dir)


def _fresh_for(path: Path, lat: float, lon: float) -> bool:
    """True if the cached file is still valid and was fetched for this lake."""
    if not store.is_fresh(path):
        return False
    meta = (store.read_raw(path) or {}).get("meta", {})
    return bool(meta.get("lat") == lat and meta.get("lon") == lon)


@task(name="fetch-forecast", retries=2, retry_delay_seconds=5)
def fetch_forecast(lat: float, lon: float, api_key: str) -> dict[str, Any]:
    """Fetch the raw 5-day / 3-hour forecast from OpenWeather."""
    return openweather.fetch_forecast_raw(
        lat, lon, api_key, url=get_settings().openweather_url
    )


@task(name="save-forecast")
def save_forecast(payload: dict[str, Any], lat: float, lon: float) -> Path:
    """Save the raw forecast payload via store."""
    return store.write(
        FORECAST_PATH,
        payload,
        source="openweathermap.org",
        valid_until=expires_in(FORECAST_TTL),
        lat=lat,
        lon=lon,
    )


@task(name="fetch-weather-history")
def fetch_weather_history(
    lat: float, lon: float, base_url: str, days: int, region_id: int | None = None
) -> list[dict[str, Any]] | None:
    """Fetch recent daily weather rows for the lake's region.

    Never retried or raised: the lookup degrades to None on failure.
    """
    rows = load_recent_history(
        HttpWeatherHistory(base_url), Location(lat=lat, lon=lon), days, region_id=region_id
    )
    if rows is None:
        return None
    return [row.model_dump(mode="json") for row in rows]


@task(name="save-weather-history")
def save_weather_history(
    rows: list[dict[str, Any]], days: int, lat: float, lon: float
) -> Path:
    """Save weather-history rows via store."""
    return store.write(
        HISTORY_PATH,
        rows,
        source="weather-history",
        valid_until=expires_in(HISTORY_TTL),
        days=days,
        lat=lat,
        lon=lon,
    )


@flow(name="fetch-data", log_prints=True)
def fetch_all(lat: float | None = None, lon: float | None = None) -> dict[str, Any]:
    """
    Fetch all data sources.

    This is the main Prefect flow that orchestrates data fetching.
    Checks freshness before fetching and skips sources that are still valid
    for the same lat/lon. A cache written for another lake is refetched.
    """
    settings = get_settings()
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon
    results: dict[str, Any] = {}

    # --- OpenWeather forecast ---
    if _fresh_for(FORECAST_PATH, lat, lon):
        print("Forecast is fresh, skipping fetch.")
        payload = store.read(FORECAST_PATH) or {}
    elif not settings.openweather_api_key:
        print("No OpenWeather API key configured; using cached forecast if any.")
        payload = store.read(FORECAST_PATH) or {}
    else:
        print(f"Fetching forecast for ({lat}, {lon})...")
        payload = fetch_forecast(lat, lon, settings.openweather_api_key)
        output_path = save_forecast(payload, lat, lon)
        print(f"Saved {len(payload.get('list', []))} forecast samples to {output_path}")

    results["forecast_samples"] = len(payload.get("list", []))

    # --- Weather history (optional) ---
    if not settings.history_api_url:
        print("No weather-history URL configured, skipping.")
        history: list[dict[str, Any]] = []
    elif _fresh_for(HISTORY_PATH, lat, lon):
        print("Weather history is fresh, skipping fetch.")
        history = store.read(HISTORY_PATH) or []
    else:
        print("Fetching recent weather history...")
        fetched = fetch_weather_history(
            lat, lon, settings.history_api_url, settings.history_days, settings.region_id
        )
        if fetched is None:
            print("Warning: weather history unavailable; forecasts will skip it.")
            history = []
        else:
            history = fetched
            history_path = save_weather_history(history, settings.history_days, lat, lon)
            print(f"Saved {len(history)} weather-history rows to {history_path}")

    results["history_rows"] = len(history)

    return results


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
