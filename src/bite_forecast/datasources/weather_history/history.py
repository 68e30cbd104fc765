"""
Weather-history lookups for the recent-weather scoring context.

The history layer is optional: ``load_recent_history`` turns any lookup
failure into ``None`` so the forecast is built without it.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests
from pydantic import ValidationError

from bite_forecast.datasources.weather_history.client import (
    DEFAULT_DAYS,
    MAX_DAYS,
    MAX_REGION_ID,
    MIN_DAYS,
    MIN_REGION_ID,
    REGIONS_FIND_PATH,
    WEATHER_HISTORY_PATH,
)
from bite_forecast.datasources.weather_history.models import WeatherRegion
from bite_forecast.schemas import HistoricalWeatherDay, Location
from bite_forecast.services.http import get_json

logger = logging.getLogger(__name__)


class WeatherHistorySource(Protocol):
    """Anything that can return recent daily weather for a region."""

    def find_region(self, lat: float, lon: float) -> WeatherRegion | None: ...

    def lookup(self, region_id: int, days: int = DEFAULT_DAYS) -> list[HistoricalWeatherDay]: ...


def validate_query(region_id: int, days: int) -> None:
    """Reject parameters the history endpoint would refuse with a 400."""
    if not MIN_REGION_ID <= region_id <= MAX_REGION_ID:
        msg = f"Invalid region_id {region_id}: must be between {MIN_REGION_ID} and {MAX_REGION_ID}"
        raise ValueError(msg)
    if not MIN_DAYS <= days <= MAX_DAYS:
        msg = f"Invalid days {days}: must be between {MIN_DAYS} and {MAX_DAYS}"
        raise ValueError(msg)


def parse_history(rows: list[dict[str, Any]]) -> list[HistoricalWeatherDay]:
    """Validate raw history rows (unknown columns are ignored)."""
    return [HistoricalWeatherDay.model_validate(row) for row in rows]


class HttpWeatherHistory:
    """Weather-history source backed by the app's REST endpoints."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def find_region(self, lat: float, lon: float) -> WeatherRegion | None:
        """Region containing the point, or the nearest one."""
        payload = get_json(f"{self.base_url}{REGIONS_FIND_PATH}", params={"lat": lat, "lon": lon})
        if not payload:
            return None
        return WeatherRegion.model_validate(payload)

    def lookup(self, region_id: int, days: int = DEFAULT_DAYS) -> list[HistoricalWeatherDay]:
        """
        Recent daily rows for a region.

        Raises:
            ValueError: region_id or days out of range.
            requests.HTTPError: Non-2xx response.
        """
        validate_query(region_id, days)
        rows = get_json(
            f"{self.base_url}{WEATHER_HISTORY_PATH}",
            params={"region_id": region_id, "days": days},
        )
        return parse_history(rows or [])


def load_recent_history(
    source: WeatherHistorySource | None,
    location: Location,
    days: int = DEFAULT_DAYS,
    *,
    region_id: int | None = None,
) -> list[HistoricalWeatherDay] | None:
    """
    Recent history for the lake, or None when it can't be had.

    Resolves the region from the location unless ``region_id`` is given.
    Missing source, unknown region and any request or validation failure
    all degrade to None with a warning.
    """
    if source is None:
        return None
    try:
        if region_id is None:
            region = source.find_region(location.lat, location.lon)
            if region is None:
                logger.warning("No weather region for (%s, %s)", location.lat, location.lon)
                return None
            region_id = region.region_id
        rows = source.lookup(region_id, days)
    except (requests.RequestException, ValidationError, ValueError) as exc:
        logger.warning("Weather history unavailable: %s", exc)
        return None

    logger.info("Loaded %d weather-history rows for region %d", len(rows), region_id)
    return rows
