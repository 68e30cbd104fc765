"""Weather-history source (the fishing app's REST layer).

Public API:
  - history: HttpWeatherHistory, WeatherHistorySource, load_recent_history
  - models: WeatherRegion
"""

from bite_forecast.datasources.weather_history.history import (
    HttpWeatherHistory,
    WeatherHistorySource,
    load_recent_history,
    parse_history,
)
from bite_forecast.datasources.weather_history.models import WeatherRegion

__all__ = [
    "HttpWeatherHistory",
    "WeatherHistorySource",
    "WeatherRegion",
    "load_recent_history",
    "parse_history",
]
