"""
Services package initialization.
"""

from cwa_weather.services.cwa_client import CWAClient
from cwa_weather.services.forecast_normalizer import normalize
from cwa_weather.services.weather_service import WeatherService

__all__ = [
    "CWAClient",
    "normalize",
    "WeatherService",
]
