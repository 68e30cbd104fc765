"""
Input records for the bite forecast engine.

Pydantic models for data supplied by the calling layer: the lake location,
raw 3-hour forecast samples and optional historical weather rows.
Datasources normalize API responses to these before the engine sees them.
"""

from __future__ import annotations

import datetime as dt
import logging
import math
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

logger = logging.getLogger(__name__)

# Epoch values above this are milliseconds (10^11 s is year 5138)
MILLISECONDS_THRESHOLD = 10**11

# Fallbacks for missing or malformed numeric fields in a raw sample
DEFAULT_TEMPERATURE_F = 50.0
DEFAULT_PRESSURE_HPA = 1013.0
DEFAULT_HUMIDITY_PCT = 50.0
DEFAULT_CLOUD_PCT = 50.0
DEFAULT_WIND_SPEED_MPH = 0.0
DEFAULT_WIND_DEG = 0.0
DEFAULT_PRECIP_PROBABILITY = 0.0
DEFAULT_VOLUME = 0.0

# =============================================================================
# Location
# =============================================================================


class Location(BaseModel):
    """A lake location in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    name: str | None = None


# =============================================================================
# Forecast samples
# =============================================================================


class WeatherCondition(BaseModel):
    """Discrete weather condition category and icon code."""

    model_config = ConfigDict(frozen=True)

    main: str = "Clear"
    description: str = "Clear sky"
    icon: str = "01d"


def normalize_timestamp(value: Any) -> datetime:
    """Coerce a datetime, epoch seconds or epoch milliseconds to aware UTC.

    Naive datetimes are assumed to be UTC.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value.astimezone(UTC)
    if isinstance(value, str):
        return normalize_timestamp(datetime.fromisoformat(value.replace("Z", "+00:00")))
    if isinstance(value, int | float) and not isinstance(value, bool):
        seconds = value / 1000 if value > MILLISECONDS_THRESHOLD else value
        return datetime.fromtimestamp(seconds, tz=UTC)
    msg = f"Unsupported timestamp: {value!r}"
    raise ValueError(msg)


class RawForecastSample(BaseModel):
    """One 3-hour forecast point.

    Missing or unreadable numeric fields (``None``, non-numeric strings,
    NaN, infinity) fall back to the module defaults instead of failing
    validation, so one bad reading never sinks a whole response.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature: float = DEFAULT_TEMPERATURE_F
    pressure: float = DEFAULT_PRESSURE_HPA
    humidity: float = DEFAULT_HUMIDITY_PCT
    cloud_percent: float = DEFAULT_CLOUD_PCT
    wind_speed: float = DEFAULT_WIND_SPEED_MPH
    wind_deg: float = DEFAULT_WIND_DEG
    pop: float = DEFAULT_PRECIP_PROBABILITY
    rain_3h: float = DEFAULT_VOLUME
    snow_3h: float = DEFAULT_VOLUME
    condition: WeatherCondition = Field(default_factory=WeatherCondition)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> datetime:
        return normalize_timestamp(value)

    @field_validator(
        "temperature",
        "pressure",
        "humidity",
        "cloud_percent",
        "wind_speed",
        "wind_deg",
        "pop",
        "rain_3h",
        "snow_3h",
        mode="before",
    )
    @classmethod
    def _default_missing(cls, value: Any, info: ValidationInfo) -> Any:
        default = cls.model_fields[info.field_name].default
        if value is None:
            return default
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = math.nan
        if not math.isfinite(number):
            logger.warning(
                "Malformed %s %r in forecast sample; using %s", info.field_name, value, default
            )
            return default
        return number

    @field_validator("condition", mode="before")
    @classmethod
    def _default_condition(cls, value: Any) -> Any:
        return WeatherCondition() if value is None else value

    @classmethod
    def from_openweather(cls, item: dict[str, Any]) -> RawForecastSample:
        """Build a sample from one OpenWeather ``/data/2.5/forecast`` list item.

        Example item::

            {"dt": 1700000000, "main": {"temp": 28.4, "pressure": 1012,
             "humidity": 81}, "clouds": {"all": 90},
             "wind": {"speed": 9.2, "deg": 310}, "pop": 0.4,
             "snow": {"3h": 0.6}, "weather": [{"main": "Snow", ...}]}
        """
        main = item.get("main") or {}
        wind = item.get("wind") or {}
        weather = item.get("weather") or []
        condition = weather[0] if weather else None
        return cls(
            timestamp=item["dt"],
            temperature=main.get("temp"),
            pressure=main.get("pressure"),
            humidity=main.get("humidity"),
            cloud_percent=(item.get("clouds") or {}).get("all"),
            wind_speed=wind.get("speed"),
            wind_deg=wind.get("deg"),
            pop=item.get("pop"),
            rain_3h=(item.get("rain") or {}).get("3h"),
            snow_3h=(item.get("snow") or {}).get("3h"),
            condition=(
                WeatherCondition(
                    main=condition.get("main", "Clear"),
                    description=condition.get("description", "Clear sky"),
                    icon=condition.get("icon", "01d"),
                )
                if condition
                else None
            ),
        )


# =============================================================================
# Weather history
# =============================================================================


class HistoricalWeatherDay(BaseModel):
    """One past daily weather summary row from the weather-history layer."""

    model_config = ConfigDict(extra="ignore")

    date: dt.date
    time_period: str | None = None
    temperature: float | None = None
    temperature_high: float | None = None
    temperature_low: float | None = None
    pressure: float | None = None
    precipitation: float | None = None

    @property
    def mean_temperature(self) -> float | None:
        """Best available temperature for the day."""
        if self.temperature is not None:
            return self.temperature
        if self.temperature_high is not None and self.temperature_low is not None:
            return (self.temperature_high + self.temperature_low) / 2
        return None
