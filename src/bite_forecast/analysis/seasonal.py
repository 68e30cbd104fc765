"""
Date- and location-derived annotations: ice season, moon, day length.

None of these look at the hourly weather. Each returns an info record with
a species-scaled modifier; the scoring engine ignores zero modifiers.
"""

from __future__ import annotations

import math
from datetime import date, timedelta

from bite_forecast.analysis.astronomy import day_length_minutes, moon_phase_fraction
from bite_forecast.analysis.models import (
    DayLengthInfo,
    DayLengthTrend,
    MoonInfo,
    MoonPhase,
    SeasonInfo,
    SeasonStage,
    TimeOfDay,
)
from bite_forecast.reference.species import SpeciesProfile
from bite_forecast.schemas import Location

# Day-over-day change that counts as a trend, minutes
DAY_LENGTH_TREND_MINUTES = 1.0
SHORT_DAY_MINUTES = 540

_MOON_NAMES: dict[MoonPhase, str] = {
    MoonPhase.NEW: "New Moon",
    MoonPhase.WAXING_GIBBOUS: "Waxing Gibbous",
    MoonPhase.FIRST_QUARTER: "First Quarter",
    MoonPhase.FULL: "Full Moon",
    MoonPhase.WANING_GIBBOUS: "Waning Gibbous",
    MoonPhase.LAST_QUARTER: "Last Quarter",
    MoonPhase.NEUTRAL: "Between Phases",
}

# Base modifier and description suffix per phase
_MOON_EFFECTS: dict[MoonPhase, tuple[int, str]] = {
    MoonPhase.FULL: (8, "enhanced night visibility for {name}"),
    MoonPhase.WAXING_GIBBOUS: (5, "good light for night feeding"),
    MoonPhase.WANING_GIBBOUS: (5, "good light for night feeding"),
    MoonPhase.FIRST_QUARTER: (3, "moderate lunar influence"),
    MoonPhase.LAST_QUARTER: (3, "moderate lunar influence"),
    MoonPhase.NEW: (3, "solunar peak despite darkness"),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


# =============================================================================
# Season
# =============================================================================


def season_stage(day: date) -> SeasonStage:
    """Ice-season stage for a calendar date."""
    month, dom = day.month, day.day
    if (month == 11 and dom >= 20) or month == 12:
        return SeasonStage.EARLY_ICE
    if month == 1 or (month == 2 and dom <= 10):
        return SeasonStage.MID_WINTER
    if month == 2 or month == 3:
        return SeasonStage.LATE_ICE
    return SeasonStage.OFF_SEASON


def _season_description(stage: SeasonStage, modifier: int, name: str) -> str:
    if stage == SeasonStage.EARLY_ICE:
        if modifier > 0:
            return f"Early ice bonus - {name} aggressive on fresh ice"
        return "Early ice season"
    if stage == SeasonStage.MID_WINTER:
        if modifier > 0:
            return f"Mid-winter spawn season for {name}"
        if modifier < 0:
            return f"Mid-winter doldrums - {name} less active in coldest period"
        return "Mid-winter core season"
    if modifier > 0:
        return f"Late ice magic - {name} pre-spawn feeding surge"
    if modifier < 0:
        return f"Post-spawn decline for {name}"
    return "Late ice period"


def seasonal_modifier(profile: SpeciesProfile, day: date) -> SeasonInfo:
    """The species' modifier for the date's ice-season stage."""
    stage = season_stage(day)
    if stage == SeasonStage.OFF_SEASON:
        return SeasonInfo(stage=stage, modifier=0, description="Off-season")
    modifier = profile.season_modifier(stage.value)
    return SeasonInfo(
        stage=stage,
        modifier=modifier,
        description=_season_description(stage, modifier, profile.name),
    )


# =============================================================================
# Moon
# =============================================================================


def classify_moon(fraction: float) -> MoonPhase:
    """Bucket a lunar-cycle fraction (0 new, 0.5 full) into a phase."""
    if fraction < 0.05 or fraction > 0.95:
        return MoonPhase.NEW
    if abs(fraction - 0.25) < 0.05:
        return MoonPhase.FIRST_QUARTER
    if abs(fraction - 0.75) < 0.05:
        return MoonPhase.LAST_QUARTER
    if 0.45 <= fraction <= 0.55:
        return MoonPhase.FULL
    if 0.30 <= fraction < 0.45:
        return MoonPhase.WAXING_GIBBOUS
    if 0.55 < fraction <= 0.70:
        return MoonPhase.WANING_GIBBOUS
    return MoonPhase.NEUTRAL


def moon_phase(day: date) -> MoonInfo:
    """Lunar phase for a date, without any species modifier."""
    fraction = moon_phase_fraction(day)
    phase = classify_moon(fraction)
    return MoonInfo(phase=phase, fraction=fraction, name=_MOON_NAMES[phase])


def moon_modifier(profile: SpeciesProfile, day: date, period: TimeOfDay) -> MoonInfo:
    """
    Moon bonus for night-feeding species after dark.

    Zero unless ``period`` is a night period and the species feeds at
    night. The base value per phase is scaled by moon sensitivity.
    """
    info = moon_phase(day)
    effect = _MOON_EFFECTS.get(info.phase)
    if effect is None or not period.is_night or not profile.night_feeder:
        return info

    base, suffix = effect
    modifier = round_half_up(base * profile.moon_sensitivity)
    if modifier == 0:
        return info
    return MoonInfo(
        phase=info.phase,
        fraction=info.fraction,
        name=info.name,
        modifier=modifier,
        description=f"{info.name} - {suffix.format(name=profile.name)}",
    )


# =============================================================================
# Day length
# =============================================================================


def day_length_trend(location: Location, day: date) -> DayLengthInfo:
    """Compare today's daylight with yesterday's at the same place."""
    today = day_length_minutes(location.lat, location.lon, day)
    yesterday = day_length_minutes(location.lat, location.lon, day - timedelta(days=1))
    change = today - yesterday

    if change > DAY_LENGTH_TREND_MINUTES:
        return DayLengthInfo(
            trend=DayLengthTrend.LENGTHENING,
            change_minutes=change,
            day_length_minutes=today,
            description=(
                f"Days lengthening (+{round_half_up(change)} min/day) - fish becoming more active"
            ),
        )
    if change < -DAY_LENGTH_TREND_MINUTES:
        return DayLengthInfo(
            trend=DayLengthTrend.SHORTENING,
            change_minutes=change,
            day_length_minutes=today,
            description=(
                f"Days shortening ({round_half_up(change)} min/day) - fish slowing for winter"
            ),
        )
    return DayLengthInfo(
        trend=DayLengthTrend.STABLE,
        change_minutes=change,
        day_length_minutes=today,
        description=(
            "Short winter days - fish conserving energy" if today < SHORT_DAY_MINUTES else None
        ),
    )


def day_length_modifier(profile: SpeciesProfile, location: Location, day: date) -> DayLengthInfo:
    """Day-length trend scaled by the species' day-length sensitivity."""
    info = day_length_trend(location, day)
    if info.trend == DayLengthTrend.LENGTHENING:
        base = 5
    elif info.trend == DayLengthTrend.SHORTENING:
        base = -3
    elif info.day_length_minutes < SHORT_DAY_MINUTES:
        base = -2
    else:
        base = 0

    modifier = round_half_up(base * profile.day_length_sensitivity)
    return DayLengthInfo(
        trend=info.trend,
        change_minutes=info.change_minutes,
        day_length_minutes=info.day_length_minutes,
        modifier=modifier,
        description=info.description if modifier else None,
    )
