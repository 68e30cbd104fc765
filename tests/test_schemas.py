"""Tests for validated input records."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import logging
import math

import pytest
from pydantic import ValidationError

from bite_forecast.schemas import (
    HistoricalWeatherDay,
    Location,
    RawForecastSample,
    WeatherCondition,
    normalize_timestamp,
)

EPOCH = 1_767_225_600  # 2026-01-01T00:00:00Z


class TestNormalizeTimestamp:
    """Timestamps in any accepted form become aware UTC datetimes."""

    def test_epoch_seconds(self) -> None:
        assert normalize_timestamp(EPOCH) == datetime(2026, 1, 1, tzinfo=UTC)

    def test_epoch_milliseconds(self) -> None:
        assert normalize_timestamp(EPOCH * 1000) == datetime(2026, 1, 1, tzinfo=UTC)

    def test_naive_datetime_assumed_utc(self) -> None:
        result = normalize_timestamp(datetime(2026, 1, 1, 6))
        assert result == datetime(2026, 1, 1, 6, tzinfo=UTC)
        assert result.tzinfo is UTC

    def test_aware_datetime_converted(self) -> None:
        central = timezone(timedelta(hours=-6))
        assert normalize_timestamp(datetime(2026, 1, 1, 0, tzinfo=central)) == datetime(
            2026, 1, 1, 6, tzinfo=UTC
        )

    def test_iso_string(self) -> None:
        assert normalize_timestamp("2026-01-01T00:00:00Z") == datetime(2026, 1, 1, tzinfo=UTC)

    def test_rejects_other_types(self) -> None:
        with pytest.raises(ValueError, match="Unsupported timestamp"):
            normalize_timestamp(True)


class TestLocation:
    """Location range validation."""

    def test_valid(self) -> None:
        loc = Location(lat=46.25, lon=-93.65, name="Mille Lacs")
        assert loc.name == "Mille Lacs"

    @pytest.mark.parametrize(("lat", "lon"), [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_out_of_range(self, lat: float, lon: float) -> None:
        with pytest.raises(ValidationError):
            Location(lat=lat, lon=lon)


class TestRawForecastSample:
    """Defaults and coercion for raw 3-hour samples."""

    def test_missing_fields_use_defaults(self) -> None:
        sample = RawForecastSample(timestamp=EPOCH)
        assert sample.temperature == 50
        assert sample.pressure == 1013
        assert sample.humidity == 50
        assert sample.cloud_percent == 50
        assert sample.wind_speed == 0
        assert sample.wind_deg == 0
        assert sample.pop == 0
        assert sample.rain_3h == 0
        assert sample.snow_3h == 0
        assert sample.condition == WeatherCondition()

    def test_none_fields_use_defaults(self) -> None:
        sample = RawForecastSample(
            timestamp=EPOCH, temperature=None, pressure=None, condition=None
        )
        assert sample.temperature == 50
        assert sample.pressure == 1013
        assert sample.condition.icon == "01d"

    def test_non_numeric_strings_use_defaults(self) -> None:
        sample = RawForecastSample(timestamp=EPOCH, pressure="", humidity="n/a", temperature="18.5")
        assert sample.pressure == 1013
        assert sample.humidity == 50
        assert sample.temperature == 18.5

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "nan"])
    def test_non_finite_values_use_defaults(self, value: object) -> None:
        sample = RawForecastSample(timestamp=EPOCH, wind_speed=value, temperature=value)
        assert sample.wind_speed == 0
        assert sample.temperature == 50

    def test_malformed_value_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="bite_forecast.schemas"):
            RawForecastSample(timestamp=EPOCH, cloud_percent="overcast")
        assert "cloud_percent" in caplog.text

    def test_timestamp_from_milliseconds(self) -> None:
        sample = RawForecastSample(timestamp=EPOCH * 1000)
        assert sample.timestamp == datetime(2026, 1, 1, tzinfo=UTC)

    def test_frozen(self) -> None:
        sample = RawForecastSample(timestamp=EPOCH)
        with pytest.raises(ValidationError):
            sample.temperature = 10  # type: ignore[misc]


class TestFromOpenWeather:
    """Mapping of OpenWeather list items."""

    def test_full_item(self) -> None:
        item = {
            "dt": EPOCH,
            "main": {"temp": 18.5, "pressure": 1021, "humidity": 84},
            "clouds": {"all": 90},
            "wind": {"speed": 12.3, "deg": 315},
            "pop": 0.65,
            "snow": {"3h": 1.8},
            "weather": [{"main": "Snow", "description": "light snow", "icon": "13n"}],
        }
        sample = RawForecastSample.from_openweather(item)
        assert sample.timestamp == datetime(2026, 1, 1, tzinfo=UTC)
        assert sample.temperature == 18.5
        assert sample.pressure == 1021
        assert sample.humidity == 84
        assert sample.cloud_percent == 90
        assert sample.wind_speed == 12.3
        assert sample.wind_deg == 315
        assert sample.pop == 0.65
        assert sample.snow_3h == 1.8
        assert sample.rain_3h == 0
        assert sample.condition.main == "Snow"
        assert sample.condition.icon == "13n"

    def test_sparse_item(self) -> None:
        sample = RawForecastSample.from_openweather({"dt": EPOCH, "main": {"temp": 20}})
        assert sample.temperature == 20
        assert sample.pressure == 1013
        assert sample.cloud_percent == 50
        assert sample.condition.main == "Clear"


class TestHistoricalWeatherDay:
    """History rows from the weather-history layer."""

    def test_ignores_unknown_columns(self) -> None:
        row = HistoricalWeatherDay.model_validate(
            {"date": "2026-01-10", "temperature": 12.0, "region_id": 4, "wind_speed": 8}
        )
        assert row.date == date(2026, 1, 10)
        assert row.temperature == 12.0

    def test_mean_temperature_prefers_temperature(self) -> None:
        row = HistoricalWeatherDay(
            date=date(2026, 1, 10), temperature=12, temperature_high=20, temperature_low=0
        )
        assert row.mean_temperature == 12

    def test_mean_temperature_from_high_low(self) -> None:
        row = HistoricalWeatherDay(date=date(2026, 1, 10), temperature_high=20, temperature_low=0)
        assert row.mean_temperature == 10

    def test_mean_temperature_missing(self) -> None:
        assert HistoricalWeatherDay(date=date(2026, 1, 10)).mean_temperature is None
