"""Weather-history REST layer constants.

Endpoints served by the fishing app:
  - GET /api/regions/find?lat=&lon=       -> region containing (or nearest to) a point
  - GET /api/weather-history?region_id=&days= -> recent daily rows, newest first
"""

REGIONS_FIND_PATH = "/api/regions/find"
WEATHER_HISTORY_PATH = "/api/weather-history"

MIN_REGION_ID = 1
MAX_REGION_ID = 20
MIN_DAYS = 1
MAX_DAYS = 30
DEFAULT_DAYS = 7
