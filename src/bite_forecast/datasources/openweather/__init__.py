"""OpenWeather 5-day / 3-hour forecast source.

Public API:
  - forecast: fetch_forecast, fetch_forecast_raw, parse_forecast
  - client: API URL and constants
"""

from bite_forecast.datasources.openweather.client import OPENWEATHER_FORECAST_URL
from bite_forecast.datasources.openweather.forecast import (
    fetch_forecast,
    fetch_forecast_raw,
    parse_forecast,
)

__all__ = [
    "OPENWEATHER_FORECAST_URL",
    "fetch_forecast",
    "fetch_forecast_raw",
    "parse_forecast",
]
