from .models import CurrentWeather, ForecastHour, WeatherNote, WeatherSnapshot, Wind
from .notes import has_good_conditions, to_conditions, weather_notes

__all__ = [
    "CurrentWeather",
    "ForecastHour",
    "WeatherNote",
    "WeatherSnapshot",
    "Wind",
    "has_good_conditions",
    "to_conditions",
    "weather_notes",
]
