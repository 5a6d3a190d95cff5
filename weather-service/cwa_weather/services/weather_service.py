"""
This module provides weather-related services.
"""

from cwa_weather.schemas.forecast import LocationForecast
from cwa_weather.services.cwa_client import CWAClient
from cwa_weather.services.forecast_normalizer import normalize
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherService:
    """
    Fetches a location's raw forecast and normalizes it.
    """

    def __init__(self, cwa_client: CWAClient):
        self.cwa_client = cwa_client

    async def get_forecast(self, location: str) -> LocationForecast:
        """
        Get the normalized forecast for a location.
        """
        logger.info(
            "Fetching weather from CWA API",
            extra={"location": location, "event": "api_call", "api": "cwa"},
        )
        payload = await self.cwa_client.fetch_raw_forecast(location)

        forecast = normalize(payload)
        logger.info(
            "Forecast normalized",
            extra={
                "location": location,
                "event": "forecast_ready",
                "city": forecast.city_name,
                "intervals": len(forecast.forecasts),
            },
        )
        return forecast
