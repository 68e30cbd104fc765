"""
Prefect flow for building bite forecasts from fetched data.

Loads the cached forecast (and weather history when present), runs the
engine, stores the scores as JSON and renders the static site.

Run locally:
    python -m bite_forecast.flows.build
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from prefect import flow, task

from bite_forecast.analysis import build_bite_forecast, forecast_to_dict
from bite_forecast.config import get_settings
from bite_forecast.datasources.openweather import parse_forecast
from bite_forecast.datasources.weather_history import parse_history
from bite_forecast.renderers import render_template
from bite_forecast.renderers.bite_forecast import build_bite_forecast_html
from bite_forecast.schemas import HistoricalWeatherDay, Location
from bite_forecast.store import FORECAST_PATH, HISTORY_PATH, SCORES_PATH, DataStore

# Store and output paths
store = DataStore(get_settings().data_dir)
SITE_DIR = store.derived / "site"


# =============================================================================
# Data loading tasks
# =============================================================================


@task(name="load-forecast")
def load_forecast() -> dict[str, Any] | None:
    """Load the raw OpenWeather payload from store."""
    return store.read(FORECAST_PATH)


@task(name="load-weather-history")
def load_weather_history() -> list[HistoricalWeatherDay] | None:
    """Load cached weather-history rows, or None if there are none."""
    rows = store.read(HISTORY_PATH)
    if not rows:
        return None
    return parse_history(rows)


# =============================================================================
# Engine and output tasks
# =============================================================================


@task(name="compute-forecast")
def compute_forecast(
    payload: dict[str, Any],
    location: Location,
    history: list[HistoricalWeatherDay] | None = None,
    start: datetime | None = None,
    max_workers: int = 1,
) -> dict[str, Any]:
    """Run the engine over a raw payload and return the output contract."""
    samples = parse_forecast(payload)
    forecast = build_bite_forecast(
        samples,
        location,
        start or datetime.now(UTC),
        history=history,
        max_workers=max_workers,
    )
    return forecast_to_dict(forecast)


@task(name="build-html")
def build_html(forecast: dict[str, Any], fetched_at: datetime, tz_name: str) -> str:
    """Build the HTML page for a serialized forecast."""
    tz = ZoneInfo(tz_name)
    updated = fetched_at.astimezone(tz).strftime("%Y-%m-%d %H:%M")
    location = forecast.get("location", {})

    return render_template(
        "base.html.j2",
        updated=updated,
        location_name=location.get("name"),
        lat=location.get("lat"),
        lon=location.get("lon"),
        bite_forecast=build_bite_forecast_html(forecast, datetime.now(UTC), tz),
    )


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@task(name="write-scores")
def write_scores(forecast: dict[str, Any]) -> Path:
    """Store the serialized forecast for other consumers."""
    return store.write(SCORES_PATH, forecast, source="bite-forecast")


@flow(name="build-site", log_prints=True)
def build_all(lat: float | None = None, lon: float | None = None) -> dict[str, Any]:
    """
    Build bite scores and the static site from fetched data.

    This is the main Prefect flow that generates the site.
    """
    settings = get_settings()
    location = Location(
        lat=settings.lat if lat is None else lat,
        lon=settings.lon if lon is None else lon,
    )

    print("Loading forecast...")
    payload = load_forecast()
    if not payload or len(payload.get("list", [])) < 2:
        print("No usable forecast found. Run fetch flow first.")
        return {"error": "no data"}

    print("Loading weather history...")
    history = load_weather_history()
    if not history:
        print("Warning: No weather history found. Scoring without it.")

    print("Scoring species...")
    forecast = compute_forecast(payload, location, history, max_workers=settings.max_workers)
    scores_path = write_scores(forecast)
    print(f"Scores written: {scores_path}")

    print("Building HTML...")
    fetched_at = store.fetched_at(FORECAST_PATH) or datetime.now(UTC)
    html = build_html(forecast, fetched_at, settings.timezone)

    print("Writing site...")
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {
        "species": len(forecast["species"]),
        "scores": str(scores_path),
        "output": str(output_path),
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
