"""
Prefect flows for the bite forecast pipeline.

Flows:
- fetch: Download the OpenWeather forecast and recent weather history
- build: Run the engine over cached data, write scores and the static site

Usage (local):
    python -m bite_forecast.flows.fetch
    python -m bite_forecast.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'fetch-data/default'
"""
