"""
Weather trend and event detection over an hourly series.

Trends look backwards from the hour under evaluation (3h for pressure,
6h for temperature). Storm detection is a single forward scan that tags
individual hours with pre-storm, active or post-storm events.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timedelta

from bite_forecast.analysis.astronomy import calculate_sun_times, solar_date
from bite_forecast.analysis.models import (
    HourlySample,
    PressureTrend,
    StormEvent,
    StormPhase,
    SunTimes,
    TemperatureTrend,
    TimeOfDay,
    TrendResult,
)
from bite_forecast.errors import InvalidHourIndexError
from bite_forecast.schemas import Location

logger = logging.getLogger(__name__)

PRESSURE_WINDOW_HOURS = 3
TEMPERATURE_WINDOW_HOURS = 6

# Pressure change over the window, hPa
FAST_FALL_HPA = -1.5
FALL_HPA = -0.5
RISE_HPA = 0.5
FAST_RISE_HPA = 1.5
LOW_PRESSURE_HPA = 1010
HIGH_PRESSURE_HPA = 1033

# Temperature, °F
EXTREME_COLD_F = 10
WARMING_CHANGE_F = 5
COLD_FRONT_CHANGE_F = -15
MILD_RANGE_F = (15, 32)

# Storms
PRE_STORM_POP = 0.5
POST_STORM_POP = 0.2
ACTIVE_VOLUME = 1.0
HEAVY_VOLUME = 5.0
DRY_VOLUME = 0.5

# Twilight windows around sunrise/sunset
DAWN_BEFORE = timedelta(minutes=90)
DAWN_AFTER = timedelta(minutes=45)
DUSK_BEFORE = timedelta(minutes=45)
DUSK_AFTER = timedelta(minutes=90)

_PRESSURE_RESULTS: dict[PressureTrend, tuple[int, str]] = {
    PressureTrend.FALLING_FAST: (
        12,
        "Pressure dropping rapidly before storm - excellent feeding trigger",
    ),
    PressureTrend.FALLING: (8, "Pressure falling steadily - fish becoming more active"),
    PressureTrend.RISING_FAST: (-10, "Sharp pressure spike - post-storm lockjaw"),
    PressureTrend.RISING: (-5, "Pressure rising after front - fish slowing down"),
    PressureTrend.LOW_STEADY: (5, "Low, stable pressure - favorable conditions"),
    PressureTrend.HIGH: (-10, "Extreme high pressure - fish uncomfortable and inactive"),
    PressureTrend.STABLE: (0, "Stable pressure - normal activity"),
}


def _check_hour(hourly: Sequence[HourlySample], hour: int) -> None:
    if not 0 <= hour < len(hourly):
        raise InvalidHourIndexError(hour, len(hourly))


# =============================================================================
# Trends
# =============================================================================


def pressure_trend(hourly: Sequence[HourlySample], hour: int) -> TrendResult:
    """
    Classify the 3-hour pressure change ending at ``hour``.

    Hours before 3 compare against hour 0. A near-zero change falls back
    to the absolute pressure (low is favourable, very high is not).

    Raises:
        InvalidHourIndexError: ``hour`` is outside the series.
    """
    _check_hour(hourly, hour)
    current = hourly[hour].pressure
    change = current - hourly[max(0, hour - PRESSURE_WINDOW_HOURS)].pressure

    if change < FAST_FALL_HPA:
        trend = PressureTrend.FALLING_FAST
    elif change < FALL_HPA:
        trend = PressureTrend.FALLING
    elif change > FAST_RISE_HPA:
        trend = PressureTrend.RISING_FAST
    elif change > RISE_HPA:
        trend = PressureTrend.RISING
    elif current < LOW_PRESSURE_HPA:
        trend = PressureTrend.LOW_STEADY
    elif current > HIGH_PRESSURE_HPA:
        trend = PressureTrend.HIGH
    else:
        trend = PressureTrend.STABLE

    score, description = _PRESSURE_RESULTS[trend]
    return TrendResult(trend=trend, score=score, description=description, change=change)


def temperature_trend(hourly: Sequence[HourlySample], hour: int) -> TrendResult:
    """
    Classify temperature at ``hour``.

    Extreme cold wins outright. Otherwise, from hour 6 on, compare with six
    hours earlier for warming or a cold front before falling back to the
    mild-range bonus.

    Raises:
        InvalidHourIndexError: ``hour`` is outside the series.
    """
    _check_hour(hourly, hour)
    current = hourly[hour].temperature

    if current < EXTREME_COLD_F:
        return TrendResult(
            trend=TemperatureTrend.EXTREME_COLD,
            score=-10,
            description="Extreme cold - fish metabolism greatly reduced",
        )

    if hour >= TEMPERATURE_WINDOW_HOURS:
        change = current - hourly[hour - TEMPERATURE_WINDOW_HOURS].temperature
        if change >= WARMING_CHANGE_F:
            return TrendResult(
                trend=TemperatureTrend.WARMING,
                score=5,
                description=f"Warming trend (+{round(change)}°F) - fish becoming more active",
                change=change,
            )
        if change <= COLD_FRONT_CHANGE_F:
            return TrendResult(
                trend=TemperatureTrend.COLD_FRONT,
                score=-10,
                description=f"Cold front passing ({round(change)}°F drop) - bite deteriorating",
                change=change,
            )

    low, high = MILD_RANGE_F
    if low <= current <= high:
        return TrendResult(
            trend=TemperatureTrend.MILD,
            score=3,
            description="Mild winter temperatures - fish comfortable",
        )

    return TrendResult(
        trend=TemperatureTrend.STABLE, score=0, description="Normal winter temperatures"
    )


# =============================================================================
# Storms
# =============================================================================


def detect_storm_events(hourly: Sequence[HourlySample]) -> list[StormEvent]:
    """
    Scan the series once and tag storm phases.

    - pre-storm: pop > 0.5, pressure falling, no volume yet
    - active: rain or snow > 1 (heavy above 5)
    - post-storm: pop drops below 0.2 from above 0.5 while pressure rises

    Only the transition hour of a post-storm is tagged.
    """
    events: list[StormEvent] = []
    falling = (PressureTrend.FALLING, PressureTrend.FALLING_FAST)
    rising = (PressureTrend.RISING, PressureTrend.RISING_FAST)

    for i, sample in enumerate(hourly):
        trend = pressure_trend(hourly, i).trend
        dry = sample.rain < DRY_VOLUME and sample.snow < DRY_VOLUME

        if sample.pop > PRE_STORM_POP and trend in falling and dry:
            events.append(
                StormEvent(
                    hour=i,
                    phase=StormPhase.PRE_STORM,
                    score=15,
                    description="Storm approaching - fish feeding actively before arrival",
                )
            )

        if sample.rain > ACTIVE_VOLUME or sample.snow > ACTIVE_VOLUME:
            heavy = sample.rain > HEAVY_VOLUME or sample.snow > HEAVY_VOLUME
            events.append(
                StormEvent(
                    hour=i,
                    phase=StormPhase.STORM_ACTIVE,
                    score=-5 if heavy else 2,
                    description=(
                        "Heavy precipitation - possible mid-storm slowdown"
                        if heavy
                        else "Light precipitation occurring - good low-light conditions"
                    ),
                )
            )

        if (
            i > 0
            and sample.pop < POST_STORM_POP
            and hourly[i - 1].pop > PRE_STORM_POP
            and dry
            and trend in rising
        ):
            events.append(
                StormEvent(
                    hour=i,
                    phase=StormPhase.POST_STORM,
                    score=-15,
                    description="Post-storm high pressure - poor bite for next 12-24 hours",
                )
            )

    if events:
        logger.debug("Detected %d storm event(s) over %d hours", len(events), len(hourly))
    return events


# =============================================================================
# Sun
# =============================================================================


def sun_times(location: Location, day: date) -> SunTimes:
    """Sunrise/sunset for a solar date at the lake."""
    return calculate_sun_times(location.lat, location.lon, day)


def sun_times_for_hours(location: Location, hourly: Sequence[HourlySample]) -> list[SunTimes]:
    """One SunTimes per hour, computed once per solar date."""
    by_date: dict[date, SunTimes] = {}
    result = []
    for sample in hourly:
        day = solar_date(sample.timestamp, location.lon)
        if day not in by_date:
            by_date[day] = sun_times(location, day)
        result.append(by_date[day])
    return result


def classify_period(when: datetime, sun: SunTimes) -> TimeOfDay:
    """Dawn, day, dusk or night relative to the given sunrise/sunset."""
    if sun.polar:
        return TimeOfDay.DAY if sun.day_length_minutes > 0 else TimeOfDay.NIGHT
    if sun.sunrise - DAWN_BEFORE <= when <= sun.sunrise + DAWN_AFTER:
        return TimeOfDay.DAWN
    if sun.sunset - DUSK_BEFORE <= when <= sun.sunset + DUSK_AFTER:
        return TimeOfDay.DUSK
    if sun.sunrise + DAWN_AFTER < when < sun.sunset - DUSK_BEFORE:
        return TimeOfDay.DAY
    return TimeOfDay.NIGHT
