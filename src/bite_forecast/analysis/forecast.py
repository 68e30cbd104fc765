"""
Bite forecast pipeline entry point.

Takes already-resolved inputs (raw 3-hour samples, location, optional
weather history) and runs the whole engine:

    samples -> expand_to_hourly -> storm events + sun times
            -> per-species daily scores -> best windows

No fetching happens here. Species are scored independently, optionally
in a thread pool; a failure while scoring one species is logged and
replaced by zero scores without affecting the others.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from bite_forecast.analysis.interpolation import expand_to_hourly
from bite_forecast.analysis.models import (
    BiteForecast,
    BiteScore,
    BiteWindow,
    HourlySample,
    StormEvent,
    SunTimes,
)
from bite_forecast.analysis.scoring import (
    calculate_daily_scores,
    error_score,
    find_best_bite_times,
)
from bite_forecast.analysis.weather_events import detect_storm_events, sun_times_for_hours
from bite_forecast.reference.species import DEFAULT_CATALOG, SpeciesCatalog
from bite_forecast.schemas import HistoricalWeatherDay, Location, RawForecastSample

logger = logging.getLogger(__name__)

FORECAST_HOURS = 24
EXTENDED_HOURS = 120


def _score_species(
    species_id: str,
    hourly: Sequence[HourlySample],
    sun_times: Sequence[SunTimes],
    storm_events: Sequence[StormEvent],
    location: Location,
    history: Sequence[HistoricalWeatherDay] | None,
    catalog: SpeciesCatalog,
) -> tuple[list[BiteScore], list[BiteWindow]]:
    try:
        scores = calculate_daily_scores(
            species_id,
            hourly,
            sun_times,
            storm_events,
            location=location,
            history=history,
            catalog=catalog,
        )
    except Exception:
        logger.exception("Scoring failed for %s; reporting zero scores", species_id)
        scores = [
            error_score(species_id, hour, sample.timestamp, "Scoring failed")
            for hour, sample in enumerate(hourly)
        ]
    return scores, find_best_bite_times(scores)


def build_bite_forecast(
    samples: Sequence[RawForecastSample],
    location: Location,
    start: datetime | float,
    *,
    history: Sequence[HistoricalWeatherDay] | None = None,
    species_ids: Sequence[str] | None = None,
    catalog: SpeciesCatalog = DEFAULT_CATALOG,
    max_workers: int = 1,
) -> BiteForecast:
    """
    Build the 24-hour forecast for every requested species.

    Args:
        samples: Raw 3-hour forecast samples (at least 2).
        location: Lake location.
        start: First hour of the forecast (datetime or epoch s/ms).
        history: Recent daily weather rows, optional.
        species_ids: Subset of species to score; defaults to the whole catalogue.
        catalog: Species catalogue.
        max_workers: Threads used to score species; 1 scores serially.

    Returns:
        BiteForecast with scores and best windows keyed by species id.

    Raises:
        InsufficientForecastDataError: Fewer than 2 samples.
    """
    hourly = expand_to_hourly(samples, start, FORECAST_HOURS)
    storm_events = detect_storm_events(hourly)
    sun_times = sun_times_for_hours(location, hourly)
    ids = list(species_ids) if species_ids is not None else catalog.ids()

    def run(species_id: str) -> tuple[list[BiteScore], list[BiteWindow]]:
        return _score_species(
            species_id, hourly, sun_times, storm_events, location, history, catalog
        )

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(run, ids))
    else:
        results = [run(species_id) for species_id in ids]

    scores = {species_id: result[0] for species_id, result in zip(ids, results, strict=True)}
    windows = {species_id: result[1] for species_id, result in zip(ids, results, strict=True)}

    logger.info(
        "Scored %d species x %d hours (%d storm events)",
        len(ids),
        len(hourly),
        len(storm_events),
    )
    return BiteForecast(
        location=location,
        start=hourly[0].timestamp,
        hourly=tuple(hourly),
        sun_times=tuple(sun_times),
        storm_events=tuple(storm_events),
        scores=scores,
        best_windows=windows,
    )


def build_extended_scores(
    samples: Sequence[RawForecastSample],
    location: Location,
    start: datetime | float,
    species_id: str,
    *,
    hours: int = EXTENDED_HOURS,
    history: Sequence[HistoricalWeatherDay] | None = None,
    catalog: SpeciesCatalog = DEFAULT_CATALOG,
) -> list[BiteScore]:
    """
    Multi-day hourly scores for one species (5 days by default).

    The series is scored in 24-hour chunks; storm events are detected
    within each chunk and hour indices restart at 0 per chunk, while
    timestamps stay absolute.
    """
    hourly = expand_to_hourly(samples, start, hours)
    scores: list[BiteScore] = []
    for offset in range(0, len(hourly), FORECAST_HOURS):
        chunk = hourly[offset : offset + FORECAST_HOURS]
        scores.extend(
            calculate_daily_scores(
                species_id,
                chunk,
                sun_times_for_hours(location, chunk),
                detect_storm_events(chunk),
                location=location,
                history=history,
                catalog=catalog,
            )
        )
    return scores
