"""Recent-weather context from the weather-history collaborator.

Compares an hour's temperature with the mean of recent daily rows. A
missing, empty or short history contributes nothing.
"""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from dataclasses import dataclass

from bite_forecast.schemas import HistoricalWeatherDay

MIN_HISTORY_ROWS = 3
ANOMALY_THRESHOLD_F = 10.0
ANOMALY_IMPACT = 3


@dataclass(frozen=True)
class HistoricalContext:
    """Summary of the recent daily rows."""

    mean_temperature: float
    days: int


def summarize_history(history: Sequence[HistoricalWeatherDay] | None) -> HistoricalContext | None:
    """Mean temperature over rows that have one, or None if fewer than 3 do."""
    if not history:
        return None
    temps = [t for t in (row.mean_temperature for row in history) if t is not None]
    if len(temps) < MIN_HISTORY_ROWS:
        return None
    return HistoricalContext(mean_temperature=statistics.fmean(temps), days=len(temps))


def temperature_anomaly(
    temperature: float, context: HistoricalContext | None
) -> tuple[int, str] | None:
    """
    Signed base impact when the hour departs from recent days.

    Returns:
        (impact, description) before species weighting, or None when the
        departure is under 10°F or there is no context.
    """
    if context is None:
        return None
    delta = temperature - context.mean_temperature
    if delta >= ANOMALY_THRESHOLD_F:
        return (
            ANOMALY_IMPACT,
            f"Warm spell vs. recent days (+{round(delta)}°F) - fish perking up",
        )
    if delta <= -ANOMALY_THRESHOLD_F:
        return (
            -ANOMALY_IMPACT,
            f"Colder than recent days ({round(delta)}°F) - fish sluggish",
        )
    return None
