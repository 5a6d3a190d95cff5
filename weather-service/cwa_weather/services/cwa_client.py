"""
This module provides the client for the CWA open data forecast API.
"""

import httpx
from pydantic import ValidationError

from cwa_weather.config import Settings
from cwa_weather.exceptions import (
    ConfigurationError,
    NotFoundError,
    TransportError,
    UpstreamError,
)
from cwa_weather.schemas.upstream import RawForecastResponse, SingleLocationPayload
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)

GENERIC_UPSTREAM_MESSAGE = "CWA API error"
MALFORMED_RESPONSE_MESSAGE = "Malformed response from CWA API"
TRANSPORT_MESSAGE = "Unable to retrieve weather data, please try again later"


class CWAClient:
    """
    Fetches raw forecasts for one location from the CWA datastore.

    Makes exactly one GET per call. Every failure is mapped to a
    ``WeatherServiceException`` subclass carrying its HTTP status code.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self.settings = settings
        self.http_client = http_client

    async def fetch_raw_forecast(self, location: str) -> SingleLocationPayload:
        """
        Fetch the raw forecast for ``location``.

        Raises:
            ConfigurationError: no API key is configured
            NotFoundError: the location is not known upstream
            UpstreamError: upstream answered with an error or a bad payload
            TransportError: no response was received
        """
        if not self.settings.cwa_api_key:
            logger.error(
                "CWA API key is not configured",
                extra={"event": "config_error", "location": location},
            )
            raise ConfigurationError("CWA_API_KEY is not set in the environment")

        try:
            response = await self.http_client.get(
                self.settings.forecast_url,
                params={
                    "Authorization": self.settings.cwa_api_key,
                    "locationName": location,
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._upstream_error(e.response, location) from e
        except httpx.TimeoutException as e:
            logger.error(
                "Timed out waiting for CWA API",
                extra={"event": "upstream_timeout", "location": location},
            )
            raise TransportError(TRANSPORT_MESSAGE, status_code=504) from e
        except httpx.TransportError as e:
            logger.error(
                "Failed to reach CWA API",
                extra={
                    "event": "upstream_unreachable",
                    "location": location,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise TransportError(TRANSPORT_MESSAGE, status_code=502) from e

        try:
            raw = RawForecastResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                "Malformed payload from CWA API",
                extra={
                    "event": "upstream_malformed",
                    "location": location,
                    "error": str(e),
                },
            )
            raise UpstreamError(
                MALFORMED_RESPONSE_MESSAGE, upstream_status=response.status_code
            ) from e

        if not raw.records.location:
            logger.warning(
                "Location not found upstream",
                extra={"event": "location_not_found", "location": location},
            )
            raise NotFoundError(location)

        return SingleLocationPayload(
            dataset_description=raw.records.dataset_description,
            location=raw.records.location[0],
        )

    @staticmethod
    def _upstream_error(response: httpx.Response, location: str) -> UpstreamError:
        message = GENERIC_UPSTREAM_MESSAGE
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])

        logger.error(
            "CWA API returned an error status",
            extra={
                "event": "upstream_error",
                "location": location,
                "status_code": response.status_code,
                "error": message,
            },
        )
        return UpstreamError(message, upstream_status=response.status_code)
