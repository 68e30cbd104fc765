"""OpenWeather API constants.

API docs: https://openweathermap.org/forecast5
"""

OPENWEATHER_FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"

# Fahrenheit, mph
DEFAULT_UNITS = "imperial"

# 5 days x 8 samples/day
MAX_SAMPLES = 40
