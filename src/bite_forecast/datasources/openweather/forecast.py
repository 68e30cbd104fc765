"""5-day / 3-hour forecast from OpenWeather."""

from __future__ import annotations

import logging
from typing import Any

from bite_forecast.datasources.openweather.client import (
    DEFAULT_UNITS,
    MAX_SAMPLES,
    OPENWEATHER_FORECAST_URL,
)
from bite_forecast.schemas import RawForecastSample
from bite_forecast.services.http import get_json

logger = logging.getLogger(__name__)


def fetch_forecast_raw(
    lat: float,
    lon: float,
    api_key: str,
    *,
    units: str = DEFAULT_UNITS,
    url: str = OPENWEATHER_FORECAST_URL,
) -> dict[str, Any]:
    """
    Fetch the raw forecast payload.

    Args:
        lat: Latitude.
        lon: Longitude.
        api_key: OpenWeather API key.
        units: ``imperial`` (°F, mph) is what the engine expects.
        url: Endpoint override (for proxies and tests).

    Returns:
        Raw API response dict with a ``list`` of 3-hour items.
    """
    params = {"lat": lat, "lon": lon, "units": units, "appid": api_key, "cnt": MAX_SAMPLES}
    result: dict[str, Any] = get_json(url, params=params)
    return result


def parse_forecast(payload: dict[str, Any]) -> list[RawForecastSample]:
    """Convert an OpenWeather response (or its cached copy) to samples."""
    items = payload.get("list") or []
    samples = [RawForecastSample.from_openweather(item) for item in items]
    logger.debug("Parsed %d forecast samples", len(samples))
    return samples


def fetch_forecast(
    lat: float,
    lon: float,
    api_key: str,
    *,
    units: str = DEFAULT_UNITS,
    url: str = OPENWEATHER_FORECAST_URL,
) -> list[RawForecastSample]:
    """Fetch and parse the 3-hour forecast for a location."""
    return parse_forecast(fetch_forecast_raw(lat, lon, api_key, units=units, url=url))
