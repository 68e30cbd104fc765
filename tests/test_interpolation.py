"""Tests for 3-hour to hourly forecast expansion."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from bite_forecast.analysis.interpolation import (
    distribute_volume,
    expand_to_hourly,
    interpolate_circular,
    interpolate_linear,
    interpolate_nearest,
)
from bite_forecast.errors import InsufficientForecastDataError
from bite_forecast.schemas import RawForecastSample, WeatherCondition

T0 = datetime(2026, 1, 15, 12, tzinfo=UTC)


def _sample(offset_hours: int, **fields: object) -> RawForecastSample:
    return RawForecastSample(timestamp=T0 + timedelta(hours=offset_hours), **fields)


class TestInterpolateLinear:
    """Straight-line interpolation."""

    def test_endpoints_and_steps(self) -> None:
        assert interpolate_linear(30, 33, 3) == [30, 31, 32, 33]

    def test_end_is_exact(self) -> None:
        values = interpolate_linear(0.1, 0.7, 3)
        assert values[-1] == 0.7
        assert len(values) == 4


class TestInterpolateCircular:
    """Wind direction interpolation along the shorter arc."""

    def test_wraps_through_north(self) -> None:
        values = interpolate_circular(350, 10, 3)
        assert values[0] == pytest.approx(350)
        assert values[1] == pytest.approx(356.6667, abs=1e-3)
        assert values[2] == pytest.approx(3.3333, abs=1e-3)
        assert values[3] == pytest.approx(10)

    def test_wraps_backwards(self) -> None:
        values = interpolate_circular(10, 350, 2)
        assert values == pytest.approx([10, 0, 350])

    def test_values_in_range(self) -> None:
        for value in interpolate_circular(270, 90, 3):
            assert 0 <= value < 360


class TestInterpolateNearest:
    """Discrete condition interpolation."""

    def test_switches_halfway(self) -> None:
        assert interpolate_nearest("a", "b", 3) == ["a", "a", "b", "b"]


class TestDistributeVolume:
    """Accumulated rain/snow split."""

    def test_even_split(self) -> None:
        assert distribute_volume(3.0, 3) == [1.0, 1.0, 1.0]

    def test_zero(self) -> None:
        assert distribute_volume(0, 3) == [0.0, 0.0, 0.0]


class TestExpandToHourly:
    """Full series expansion."""

    def test_hourly_values_between_samples(self) -> None:
        samples = [
            _sample(0, temperature=30, pressure=1010),
            _sample(3, temperature=33, pressure=1013),
        ]
        hourly = expand_to_hourly(samples, T0, hours=4)
        assert [h.temperature for h in hourly] == [30, 31, 32, 33]
        assert [h.pressure for h in hourly] == [1010, 1011, 1012, 1013]
        assert [h.timestamp for h in hourly] == [T0 + timedelta(hours=i) for i in range(4)]

    def test_exact_length_and_spacing(self) -> None:
        samples = [_sample(3 * i) for i in range(9)]
        hourly = expand_to_hourly(samples, T0)
        assert len(hourly) == 24
        for earlier, later in zip(hourly, hourly[1:], strict=False):
            assert later.timestamp - earlier.timestamp == timedelta(hours=1)

    def test_holds_last_sample_when_short(self) -> None:
        samples = [_sample(0, temperature=20), _sample(3, temperature=26)]
        hourly = expand_to_hourly(samples, T0, hours=6)
        assert len(hourly) == 6
        assert [h.temperature for h in hourly[3:]] == [26, 26, 26]
        assert hourly[5].timestamp == T0 + timedelta(hours=5)

    def test_starts_at_hour_containing_start(self) -> None:
        samples = [_sample(0, temperature=30), _sample(3, temperature=33)]
        hourly = expand_to_hourly(samples, T0 + timedelta(minutes=90), hours=3)
        assert hourly[0].timestamp == T0 + timedelta(hours=1)
        assert hourly[0].temperature == 31

    def test_start_before_samples(self) -> None:
        samples = [_sample(0), _sample(3)]
        hourly = expand_to_hourly(samples, T0 - timedelta(days=1), hours=4)
        assert hourly[0].timestamp == T0

    def test_start_as_epoch_milliseconds(self) -> None:
        samples = [_sample(0), _sample(3)]
        hourly = expand_to_hourly(samples, T0.timestamp() * 1000, hours=2)
        assert hourly[0].timestamp == T0

    def test_unsorted_input(self) -> None:
        samples = [_sample(3, temperature=33), _sample(0, temperature=30)]
        hourly = expand_to_hourly(samples, T0, hours=4)
        assert [h.temperature for h in hourly] == [30, 31, 32, 33]

    def test_volumes_split_per_hour(self) -> None:
        samples = [_sample(0, snow_3h=3.0), _sample(3, snow_3h=1.5)]
        hourly = expand_to_hourly(samples, T0, hours=4)
        assert [h.snow for h in hourly[:3]] == [1.0, 1.0, 1.0]
        assert hourly[3].snow == pytest.approx(0.5)

    def test_wind_direction_short_arc(self) -> None:
        samples = [_sample(0, wind_deg=350), _sample(3, wind_deg=20)]
        hourly = expand_to_hourly(samples, T0, hours=4)
        assert [round(h.wind_deg) for h in hourly] == [350, 0, 10, 20]

    def test_condition_switches_at_midpoint(self) -> None:
        snow = WeatherCondition(main="Snow", description="snow", icon="13d")
        samples = [_sample(0), _sample(3, condition=snow)]
        hourly = expand_to_hourly(samples, T0, hours=4)
        assert [h.condition.main for h in hourly] == ["Clear", "Clear", "Snow", "Snow"]

    def test_values_not_rounded(self) -> None:
        samples = [_sample(0, temperature=20.0), _sample(3, temperature=21.0)]
        hourly = expand_to_hourly(samples, T0, hours=2)
        assert hourly[1].temperature == pytest.approx(20.3333, abs=1e-3)

    @pytest.mark.parametrize("count", [0, 1])
    def test_insufficient_samples(self, count: int) -> None:
        samples = [_sample(3 * i) for i in range(count)]
        with pytest.raises(InsufficientForecastDataError) as exc_info:
            expand_to_hourly(samples, T0)
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.available == count
