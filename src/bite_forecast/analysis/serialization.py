"""JSON serialization of engine output.

Produces the public output contract (camelCase keys). Quality colors are
looked up here from ``reference.quality``; the scoring core never sees them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bite_forecast.reference.quality import quality_color
from bite_forecast.reference.species import DEFAULT_CATALOG, SpeciesCatalog

if TYPE_CHECKING:
    from datetime import datetime

    from bite_forecast.analysis.models import (
        BiteForecast,
        BiteScore,
        BiteWindow,
        HourlySample,
        StormEvent,
        SunTimes,
    )


def _iso(when: datetime | None) -> str | None:
    return when.isoformat() if when is not None else None


def bite_score_to_dict(score: BiteScore) -> dict[str, Any]:
    """Serialize one hourly score.

    Args:
        score: The BiteScore to serialize.

    Returns:
        Dict with speciesId, hour, timestamp, score, qualityLabel,
        qualityColor and the top factors.
    """
    return {
        "speciesId": score.species_id,
        "hour": score.hour,
        "timestamp": _iso(score.timestamp),
        "score": score.score,
        "qualityLabel": str(score.quality),
        "qualityColor": quality_color(score.quality),
        "period": str(score.period) if score.period else None,
        "factors": [
            {
                "category": str(f.category),
                "description": f.description,
                "impact": round(f.impact, 1),
            }
            for f in score.factors
        ],
    }


def bite_window_to_dict(window: BiteWindow) -> dict[str, Any]:
    """Serialize a best-bite window."""
    return {
        "start": _iso(window.start),
        "end": _iso(window.end),
        "peakScore": window.peak_score,
        "peakTime": _iso(window.peak_time),
        "durationHours": window.duration_hours,
    }


def _hourly_to_dict(sample: HourlySample) -> dict[str, Any]:
    return {
        "timestamp": _iso(sample.timestamp),
        "temperature": round(sample.temperature, 1),
        "pressure": round(sample.pressure, 1),
        "humidity": round(sample.humidity),
        "clouds": round(sample.cloud_percent),
        "windSpeed": round(sample.wind_speed, 1),
        "windDir": round(sample.wind_deg) % 360,
        "pop": round(sample.pop, 2),
        "rain": round(sample.rain, 2),
        "snow": round(sample.snow, 2),
        "weather": sample.condition.model_dump(),
    }


def _sun_to_dict(sun: SunTimes) -> dict[str, Any]:
    return {
        "date": sun.date.isoformat(),
        "sunrise": _iso(sun.sunrise),
        "sunset": _iso(sun.sunset),
        "polar": sun.polar,
    }


def _storm_to_dict(event: StormEvent) -> dict[str, Any]:
    return {
        "hour": event.hour,
        "type": str(event.phase),
        "score": event.score,
        "description": event.description,
    }


def forecast_to_dict(
    forecast: BiteForecast, catalog: SpeciesCatalog = DEFAULT_CATALOG
) -> dict[str, Any]:
    """Serialize a full forecast, species in scoring order.

    Args:
        forecast: Output of ``build_bite_forecast``.
        catalog: Catalogue used for species display metadata.

    Returns:
        Dict with location, start, hourly weather, unique sun times,
        storm events and a per-species block of scores and best windows.
    """
    unique_sun: dict[str, dict[str, Any]] = {}
    for sun in forecast.sun_times:
        unique_sun.setdefault(sun.date.isoformat(), _sun_to_dict(sun))

    species: dict[str, Any] = {}
    for species_id, scores in forecast.scores.items():
        profile = catalog.get(species_id)
        species[species_id] = {
            "id": species_id,
            "name": profile.name if profile else species_id,
            "icon": profile.icon if profile else "",
            "color": profile.color if profile else "",
            "scores": [bite_score_to_dict(s) for s in scores],
            "bestWindows": [bite_window_to_dict(w) for w in forecast.best_windows[species_id]],
        }

    return {
        "location": forecast.location.model_dump(),
        "start": _iso(forecast.start),
        "hourly": [_hourly_to_dict(h) for h in forecast.hourly],
        "sunTimes": list(unique_sun.values()),
        "stormEvents": [_storm_to_dict(e) for e in forecast.storm_events],
        "species": species,
    }
