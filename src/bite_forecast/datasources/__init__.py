"""External data sources feeding the bite forecast.

Each subdirectory is one source with the same structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # URLs, constants
    └── {feature}.py      # Fetch functions

Sources:
  - openweather: 5-day / 3-hour forecast (needs an API key)
  - weather_history: past daily summaries from the fishing app's REST layer

Fetch functions return the validated records from ``bite_forecast.schemas``;
the engine never calls them directly. Flows (``flows/fetch.py``) fetch
and cache, then hand the resolved records to ``analysis.build_bite_forecast``.
"""
