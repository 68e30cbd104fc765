"""Bite Forecast - hourly fish activity scores for ice-fishing lakes.

Architecture::

    datasources/   External APIs (OpenWeather 3-hour forecast, weather history)
    store.py       Tiered cache with TTL (historical → live → derived)
    reference/     Static tables (species profiles, quality bands and colors)
    analysis/      The engine (interpolation, weather events, seasons, scoring)
    renderers/     Pure data → HTML (species cards)
    flows/         Prefect orchestration (fetch checks freshness, build renders site)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → store (cache) → analysis → renderers → derived/site/

Extension points, see each package's docstring:
  - New analysis step:  analysis/__init__.py
  - New UI module:      renderers/__init__.py
"""

__version__ = "0.1.0"

from bite_forecast.config import Settings
from bite_forecast.schemas import Location, RawForecastSample

__all__ = ["Location", "RawForecastSample", "Settings", "__version__"]
