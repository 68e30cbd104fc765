"""The bite forecast engine.

Pure computation over already-fetched inputs: no I/O, no HTTP, no Prefect
decorators. Renderers consume the serialized output.

Modules:
  - interpolation: 3-hour samples -> hourly series
  - weather_events: pressure/temperature trends, storm events, sun periods
  - astronomy: sunrise equation and lunar phase
  - seasonal: ice-season stage, moon and day-length modifiers
  - history: recent-weather anomaly from the weather-history layer
  - scoring: per-species, per-hour bite scores and best windows
  - forecast: pipeline entry point (``build_bite_forecast``)
  - serialization: output contracts as JSON-ready dicts

Dependency rule: analysis/ imports schemas, reference tables and errors
only. It never fetches data or produces HTML.
"""

from bite_forecast.analysis.forecast import build_bite_forecast as build_bite_forecast
from bite_forecast.analysis.forecast import build_extended_scores as build_extended_scores
from bite_forecast.analysis.interpolation import expand_to_hourly as expand_to_hourly
from bite_forecast.analysis.models import BiteForecast as BiteForecast
from bite_forecast.analysis.models import BiteScore as BiteScore
from bite_forecast.analysis.models import BiteWindow as BiteWindow
from bite_forecast.analysis.scoring import calculate_bite_score as calculate_bite_score
from bite_forecast.analysis.scoring import calculate_daily_scores as calculate_daily_scores
from bite_forecast.analysis.scoring import find_best_bite_times as find_best_bite_times
from bite_forecast.analysis.serialization import forecast_to_dict as forecast_to_dict
