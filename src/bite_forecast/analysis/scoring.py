"""
Bite score calculation.

Combines the weather annotations, the date/location annotations and a
species profile into an explainable 0-100 score per hour:

    50 baseline
    + time-of-day pattern
    + pressure trend x pressure weight
    + temperature trend x temperature weight
    + cloud preference x cloud weight      (overcast, or clear by day)
    + strongest storm event x precip weight
    + strong wind x wind weight
    + season + moon (night feeders) + day length
    + recent-history anomaly x temperature weight

Every hour is scored independently from shared, read-only inputs.
Bad species ids and hour indices produce a zero score with a single
``error`` factor instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timedelta

from bite_forecast.analysis.astronomy import solar_date
from bite_forecast.analysis.history import summarize_history, temperature_anomaly
from bite_forecast.analysis.models import (
    BiteScore,
    BiteWindow,
    FactorCategory,
    HourlySample,
    ScoreFactor,
    StormEvent,
    SunTimes,
    TimeOfDay,
)
from bite_forecast.analysis.seasonal import (
    day_length_modifier,
    moon_modifier,
    round_half_up,
    seasonal_modifier,
)
from bite_forecast.analysis.weather_events import (
    classify_period,
    pressure_trend,
    temperature_trend,
)
from bite_forecast.reference.quality import (
    BASELINE_SCORE,
    GOOD_SCORE_THRESHOLD,
    MAX_SCORE,
    MIN_SCORE,
    QUALITY_BANDS,
    QualityLabel,
)
from bite_forecast.reference.species import DEFAULT_CATALOG, SpeciesCatalog, SpeciesProfile
from bite_forecast.schemas import HistoricalWeatherDay, Location

logger = logging.getLogger(__name__)

TOP_FACTORS = 5
MAX_WINDOWS = 3

OVERCAST_PCT = 70
CLEAR_PCT = 30
STRONG_WIND_MPH = 30
STRONG_WIND_IMPACT = -5


def quality_for(score: int) -> QualityLabel:
    """Quality band for a score."""
    for minimum, label in QUALITY_BANDS:
        if score >= minimum:
            return label
    return QualityLabel.VERY_POOR


def error_score(species_id: str, hour: int, timestamp: datetime | None, reason: str) -> BiteScore:
    """Zero score carrying a single error factor."""
    factor = ScoreFactor(category=FactorCategory.ERROR, description=reason, impact=0)
    return BiteScore(
        species_id=species_id,
        hour=hour,
        timestamp=timestamp,
        score=0,
        quality=quality_for(0),
        factors=(factor,),
        all_factors=(factor,),
    )


# =============================================================================
# Time of day
# =============================================================================


def resolve_time_of_day(
    profile: SpeciesProfile, when: datetime, sun: SunTimes
) -> tuple[TimeOfDay, int, str]:
    """
    Species time-of-day period, modifier and description for an instant.

    Night splits into early night (within the pattern's window after
    sunset) and late night. Day tries morning, late afternoon, afternoon
    and then midday. Periods the species doesn't list are neutral.
    """
    base = classify_period(when, sun)
    name = profile.name

    if base == TimeOfDay.DAWN and (p := profile.pattern("dawn")):
        return (
            TimeOfDay.DAWN,
            p.modifier,
            f"Dawn feeding peak - {name} have hunting advantage in low light",
        )

    if base == TimeOfDay.DUSK and (p := profile.pattern("dusk")):
        return TimeOfDay.DUSK, p.modifier, f"Dusk feeding peak - prime time for {name}"

    if base == TimeOfDay.NIGHT:
        since_sunset = when - sun.sunset
        early = profile.pattern("early_night")
        if early and timedelta(0) <= since_sunset <= timedelta(hours=early.reach_hours):
            return (
                TimeOfDay.EARLY_NIGHT,
                early.modifier,
                f"Early night feeding - {name} active after dark",
            )
        if late := profile.pattern("late_night"):
            description = (
                f"Late night - {name} not active"
                if late.modifier < 0
                else "Late night feeding period"
            )
            return TimeOfDay.LATE_NIGHT, late.modifier, description

    if base == TimeOfDay.DAY:
        since_sunrise = when - sun.sunrise
        until_sunset = sun.sunset - when

        morning = profile.pattern("morning")
        if morning and since_sunrise <= timedelta(hours=morning.reach_hours):
            return (
                TimeOfDay.MORNING,
                morning.modifier,
                f"Morning feeding period - {name} actively foraging",
            )
        late_afternoon = profile.pattern("late_afternoon")
        if late_afternoon and until_sunset <= timedelta(hours=late_afternoon.reach_hours):
            return (
                TimeOfDay.LATE_AFTERNOON,
                late_afternoon.modifier,
                f"Late afternoon - good time for {name}",
            )
        afternoon = profile.pattern("afternoon")
        if afternoon and until_sunset <= timedelta(hours=afternoon.reach_hours):
            return (
                TimeOfDay.AFTERNOON,
                afternoon.modifier,
                f"Afternoon feeding - {name} feeding before evening",
            )
        if midday := profile.pattern("midday"):
            description = (
                f"Bright midday - {name} less active"
                if midday.modifier < 0
                else f"Midday feeding - {name} active during daylight"
            )
            return TimeOfDay.MIDDAY, midday.modifier, description

    return base, 0, "Normal activity period"


# =============================================================================
# Individual factors
# =============================================================================


def _cloud_factor(
    profile: SpeciesProfile, sample: HourlySample, base: TimeOfDay
) -> ScoreFactor | None:
    weight = profile.weights.cloud_cover
    if sample.cloud_percent >= OVERCAST_PCT:
        impact = profile.cloud_preference.overcast * weight
        description = (
            "Overcast skies extending feeding window - low light conditions favored"
            if impact > 0
            else "Heavy cloud cover"
        )
    elif sample.cloud_percent <= CLEAR_PCT and base == TimeOfDay.DAY:
        impact = profile.cloud_preference.clear * weight
        description = (
            "Clear bright skies - fish may be light-shy at midday"
            if impact < 0
            else "Clear skies - good visibility for hunting"
        )
    else:
        return None
    return ScoreFactor(FactorCategory.CLOUD_COVER, description, impact)


def _storm_factor(
    profile: SpeciesProfile, hour: int, storm_events: Sequence[StormEvent]
) -> ScoreFactor | None:
    tagged = [e for e in storm_events if e.hour == hour]
    if not tagged:
        return None
    strongest = max(tagged, key=lambda e: abs(e.score))
    return ScoreFactor(
        FactorCategory.STORM,
        strongest.description,
        strongest.score * profile.weights.precipitation,
    )


def _wind_factor(profile: SpeciesProfile, sample: HourlySample) -> ScoreFactor | None:
    if sample.wind_speed <= STRONG_WIND_MPH:
        return None
    return ScoreFactor(
        FactorCategory.WIND,
        "Strong winds creating noise and vibration through ice",
        STRONG_WIND_IMPACT * profile.weights.wind,
    )


def _sun_for_hour(sun_times: SunTimes | Sequence[SunTimes], hour: int) -> SunTimes:
    if isinstance(sun_times, SunTimes):
        return sun_times
    return sun_times[min(hour, len(sun_times) - 1)]


def _local_date(when: datetime, location: Location | None) -> date:
    return solar_date(when, location.lon) if location else when.date()


# =============================================================================
# Scores
# =============================================================================


def calculate_bite_score(
    species_id: str,
    hour: int,
    hourly: Sequence[HourlySample],
    sun_times: SunTimes | Sequence[SunTimes],
    storm_events: Sequence[StormEvent],
    *,
    location: Location | None = None,
    history: Sequence[HistoricalWeatherDay] | None = None,
    catalog: SpeciesCatalog = DEFAULT_CATALOG,
) -> BiteScore:
    """
    Score one species at one hour.

    Args:
        species_id: Catalogue id, e.g. ``"walleye"``.
        hour: Index into ``hourly``.
        hourly: Interpolated hourly series.
        sun_times: One SunTimes for the whole series, or one per hour.
        storm_events: Events from ``detect_storm_events`` over ``hourly``.
        location: Lake location; enables the day-length modifier and
            solar-date handling. Without it, dates are taken in UTC.
        history: Recent daily weather rows, optional.
        catalog: Species catalogue to look up ``species_id`` in.

    Returns:
        BiteScore with an integer score in [0, 100].
    """
    profile = catalog.get(species_id)
    if not 0 <= hour < len(hourly):
        logger.warning("Invalid hour %d for %d hourly samples", hour, len(hourly))
        return error_score(species_id, hour, None, "Invalid hour data")
    sample = hourly[hour]
    if profile is None:
        logger.warning("Unknown species: %s", species_id)
        return error_score(species_id, hour, sample.timestamp, "Unknown species")

    sun = _sun_for_hour(sun_times, hour)
    when = sample.timestamp
    day = _local_date(when, location)
    base = classify_period(when, sun)
    weights = profile.weights

    factors: list[ScoreFactor] = []

    def add(category: FactorCategory, description: str | None, impact: float) -> None:
        if impact and description:
            factors.append(ScoreFactor(category, description, impact))

    period, time_modifier, time_description = resolve_time_of_day(profile, when, sun)
    add(FactorCategory.TIME_OF_DAY, time_description, time_modifier)

    pressure = pressure_trend(hourly, hour)
    add(FactorCategory.PRESSURE, pressure.description, pressure.score * weights.pressure)

    temperature = temperature_trend(hourly, hour)
    add(
        FactorCategory.TEMPERATURE,
        temperature.description,
        temperature.score * weights.temperature,
    )

    for optional in (
        _cloud_factor(profile, sample, base),
        _storm_factor(profile, hour, storm_events),
        _wind_factor(profile, sample),
    ):
        if optional is not None:
            add(optional.category, optional.description, optional.impact)

    season = seasonal_modifier(profile, day)
    add(FactorCategory.SEASONAL, season.description, season.modifier)

    moon = moon_modifier(profile, day, base)
    add(FactorCategory.MOON, moon.description, moon.modifier)

    if location is not None:
        day_length = day_length_modifier(profile, location, day)
        add(FactorCategory.DAY_LENGTH, day_length.description, day_length.modifier)

    anomaly = temperature_anomaly(sample.temperature, summarize_history(history))
    if anomaly is not None:
        impact, description = anomaly
        add(FactorCategory.HISTORY, description, impact * weights.temperature)

    total = BASELINE_SCORE + sum(f.impact for f in factors)
    score = max(MIN_SCORE, min(MAX_SCORE, round_half_up(total)))
    ranked = tuple(sorted(factors, key=lambda f: abs(f.impact), reverse=True))

    return BiteScore(
        species_id=species_id,
        hour=hour,
        timestamp=when,
        score=score,
        quality=quality_for(score),
        factors=ranked[:TOP_FACTORS],
        all_factors=ranked,
        period=period,
    )


def calculate_daily_scores(
    species_id: str,
    hourly: Sequence[HourlySample],
    sun_times: SunTimes | Sequence[SunTimes],
    storm_events: Sequence[StormEvent],
    *,
    location: Location | None = None,
    history: Sequence[HistoricalWeatherDay] | None = None,
    catalog: SpeciesCatalog = DEFAULT_CATALOG,
) -> list[BiteScore]:
    """Score every hour of the series for one species, in order."""
    return [
        calculate_bite_score(
            species_id,
            hour,
            hourly,
            sun_times,
            storm_events,
            location=location,
            history=history,
            catalog=catalog,
        )
        for hour in range(len(hourly))
    ]


# =============================================================================
# Best windows
# =============================================================================


def _is_peak(values: list[int], i: int) -> bool:
    if values[i] < GOOD_SCORE_THRESHOLD:
        return False
    neighbours = [values[j] for j in (i - 1, i + 1) if 0 <= j < len(values)]
    return all(values[i] >= n for n in neighbours)


def find_best_bite_times(scores: Sequence[BiteScore]) -> list[BiteWindow]:
    """
    Up to three windows of good scores around the highest local peaks.

    Peaks are hours scoring at least 60 and no lower than their
    neighbours (the first and last hours have one neighbour). Each peak
    grows left and right while neighbours stay at 60 or above. Two peaks
    in the same run yield two overlapping windows.
    """
    if not scores:
        return []
    values = [s.score for s in scores]
    peaks = [i for i in range(len(values)) if _is_peak(values, i)]
    peaks.sort(key=lambda i: (-values[i], i))

    windows = []
    for peak in peaks[:MAX_WINDOWS]:
        start = end = peak
        while start > 0 and values[start - 1] >= GOOD_SCORE_THRESHOLD:
            start -= 1
        while end < len(values) - 1 and values[end + 1] >= GOOD_SCORE_THRESHOLD:
            end += 1
        windows.append(
            BiteWindow(
                start=scores[start].timestamp,
                end=scores[end].timestamp,
                peak_score=values[peak],
                peak_time=scores[peak].timestamp,
                duration_hours=end - start + 1,
                start_hour=start,
                end_hour=end,
                peak_hour=peak,
            )
        )
    return windows
