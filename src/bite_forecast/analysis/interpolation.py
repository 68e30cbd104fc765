"""
Expand 3-hour forecast samples into an hourly series.

Each consecutive pair of samples is split into hourly steps, one rule per
field type:

- linear: temperature, pressure, humidity, clouds, wind speed, pop
- circular: wind direction, along the shorter arc
- nearest: the discrete weather condition
- volume: rain/snow accumulated over the span, split evenly

Values are left unrounded; rounding belongs to presentation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta
from itertools import pairwise
from typing import TypeVar

from bite_forecast.analysis.models import HourlySample
from bite_forecast.errors import InsufficientForecastDataError
from bite_forecast.schemas import RawForecastSample, normalize_timestamp

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_SAMPLES = 2
SAMPLE_SPACING_HOURS = 3
ONE_HOUR = timedelta(hours=1)


def interpolate_linear(start: float, end: float, steps: int) -> list[float]:
    """Evenly spaced values from start to end, both included (steps + 1 values)."""
    delta = (end - start) / steps
    return [start + delta * i for i in range(steps)] + [end]


def interpolate_circular(start: float, end: float, steps: int) -> list[float]:
    """
    Interpolate an angle in degrees along the shorter arc.

    Returns steps + 1 values, each normalized to [0, 360).

    Example: 350 -> 10 over 3 steps gives 350, 356.67, 3.33, 10.
    """
    diff = end - start
    if diff > 180:
        diff -= 360
    elif diff < -180:
        diff += 360
    return [(start + diff * i / steps) % 360 for i in range(steps + 1)]


def interpolate_nearest(start: T, end: T, steps: int) -> list[T]:
    """First half of the span keeps ``start``, the rest takes ``end``."""
    return [start if i < steps / 2 else end for i in range(steps + 1)]


def distribute_volume(total: float, steps: int) -> list[float]:
    """Split an accumulated volume into ``steps`` equal hourly shares."""
    if not total:
        return [0.0] * steps
    return [total / steps] * steps


def _span_hours(earlier: RawForecastSample, later: RawForecastSample) -> int:
    hours = round((later.timestamp - earlier.timestamp).total_seconds() / 3600)
    return max(1, hours)


def _expand_pair(earlier: RawForecastSample, later: RawForecastSample) -> list[HourlySample]:
    """Hourly samples for one pair, excluding the later endpoint."""
    steps = _span_hours(earlier, later)

    temps = interpolate_linear(earlier.temperature, later.temperature, steps)
    pressures = interpolate_linear(earlier.pressure, later.pressure, steps)
    humidity = interpolate_linear(earlier.humidity, later.humidity, steps)
    clouds = interpolate_linear(earlier.cloud_percent, later.cloud_percent, steps)
    wind_speed = interpolate_linear(earlier.wind_speed, later.wind_speed, steps)
    wind_deg = interpolate_circular(earlier.wind_deg, later.wind_deg, steps)
    pops = interpolate_linear(earlier.pop, later.pop, steps)
    conditions = interpolate_nearest(earlier.condition, later.condition, steps)
    rain = distribute_volume(earlier.rain_3h, steps)
    snow = distribute_volume(earlier.snow_3h, steps)

    return [
        HourlySample(
            timestamp=earlier.timestamp + ONE_HOUR * i,
            temperature=temps[i],
            pressure=pressures[i],
            humidity=humidity[i],
            cloud_percent=clouds[i],
            wind_speed=wind_speed[i],
            wind_deg=wind_deg[i],
            pop=pops[i],
            rain=rain[i],
            snow=snow[i],
            condition=conditions[i],
        )
        for i in range(steps)
    ]


def _final_hour(sample: RawForecastSample) -> HourlySample:
    return HourlySample(
        timestamp=sample.timestamp,
        temperature=sample.temperature,
        pressure=sample.pressure,
        humidity=sample.humidity,
        cloud_percent=sample.cloud_percent,
        wind_speed=sample.wind_speed,
        wind_deg=sample.wind_deg % 360,
        pop=sample.pop,
        rain=sample.rain_3h / SAMPLE_SPACING_HOURS,
        snow=sample.snow_3h / SAMPLE_SPACING_HOURS,
        condition=sample.condition,
    )


def expand_to_hourly(
    samples: Sequence[RawForecastSample],
    start: datetime | float,
    hours: int = 24,
) -> list[HourlySample]:
    """
    Convert 3-hour forecast samples into exactly ``hours`` hourly samples.

    The series begins at the hour containing ``start`` (or at the first
    sample if ``start`` precedes them all). When the samples run out, the
    last sample is held forward one hour at a time.

    Args:
        samples: Raw forecast samples, any order (sorted by timestamp here).
        start: Start instant as a datetime or epoch seconds/milliseconds.
        hours: Length of the returned series.

    Returns:
        List of HourlySample in strictly increasing time order.

    Raises:
        InsufficientForecastDataError: Fewer than 2 samples supplied.
    """
    if len(samples) < MIN_SAMPLES:
        logger.error("Cannot interpolate forecast: %d sample(s) supplied", len(samples))
        raise InsufficientForecastDataError(len(samples), MIN_SAMPLES)

    ordered = sorted(samples, key=lambda s: s.timestamp)
    series: list[HourlySample] = []
    for earlier, later in pairwise(ordered):
        series.extend(_expand_pair(earlier, later))
    series.append(_final_hour(ordered[-1]))

    start_at = normalize_timestamp(start)
    first = next(
        (i for i, h in enumerate(series) if h.timestamp > start_at - ONE_HOUR),
        len(series) - 1,
    )
    result = series[first : first + hours]

    while len(result) < hours:
        last = result[-1]
        result.append(replace(last, timestamp=last.timestamp + ONE_HOUR))

    return result
