"""
Sun and moon calculations via ``astral``.

Sunrise, sunset and solar noon are computed for a local *solar* date: the
observer's clock is pinned to a fixed offset of ``lon / 15`` hours so the
rise and set of one date never straddle a UTC midnight. All returned
instants are aware UTC.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

from astral import Observer, moon
from astral.sun import elevation, noon, sunrise, sunset

from bite_forecast.analysis.models import SunTimes

# astral.moon.phase() runs 0 (new) .. 27.99
LUNAR_CYCLE_DAYS = 28.0


def solar_date(when: datetime, lon: float) -> date:
    """Local mean solar date of an instant at a longitude (east positive)."""
    return (when.astimezone(UTC) + timedelta(hours=lon / 15)).date()


def _solar_zone(lon: float) -> timezone:
    return timezone(timedelta(minutes=round(lon * 4)))


def calculate_sun_times(lat: float, lon: float, day: date) -> SunTimes:
    """
    Sunrise, sunset and solar noon for a solar date.

    Args:
        lat: Latitude in decimal degrees.
        lon: Longitude in decimal degrees, east positive.
        day: Local solar date.

    Returns:
        SunTimes in UTC. On a polar night sunrise and sunset collapse onto
        solar noon; on a polar day they sit 12 hours either side of it.
        Both set ``polar=True``.
    """
    observer = Observer(latitude=lat, longitude=lon)
    zone = _solar_zone(lon)
    solar_noon = noon(observer, day, tzinfo=zone).astimezone(UTC)

    try:
        rise = sunrise(observer, day, tzinfo=zone).astimezone(UTC)
        fall = sunset(observer, day, tzinfo=zone).astimezone(UTC)
    except ValueError:
        # Sun never crosses the horizon; noon elevation tells which way
        if elevation(observer, solar_noon) > 0:
            half_day = timedelta(hours=12)
            return SunTimes(
                date=day,
                sunrise=solar_noon - half_day,
                sunset=solar_noon + half_day,
                solar_noon=solar_noon,
                polar=True,
            )
        return SunTimes(
            date=day, sunrise=solar_noon, sunset=solar_noon, solar_noon=solar_noon, polar=True
        )

    return SunTimes(date=day, sunrise=rise, sunset=fall, solar_noon=solar_noon)


def day_length_minutes(lat: float, lon: float, day: date) -> float:
    """Sunrise-to-sunset duration in minutes."""
    return calculate_sun_times(lat, lon, day).day_length_minutes


def moon_phase_fraction(day: date) -> float:
    """Position in the lunar cycle: 0 = new, 0.25 first quarter, 0.5 full."""
    return (moon.phase(day) / LUNAR_CYCLE_DAYS) % 1.0
