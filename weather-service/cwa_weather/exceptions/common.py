from typing import Optional


class WeatherServiceException(Exception):
    """Base exception for weather service."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ConfigurationError(WeatherServiceException):
    """Raised when a required setting such as the API key is missing."""


class NotFoundError(WeatherServiceException):
    """Raised when the upstream API does not recognize the location."""

    status_code = 404

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Unable to retrieve weather data for {location}")


class UpstreamError(WeatherServiceException):
    """Raised when the CWA API answers with an error status or bad payload."""

    status_code = 502

    def __init__(
        self,
        message: str = "CWA API error",
        upstream_status: Optional[int] = None,
        status_code: Optional[int] = None,
    ):
        self.upstream_status = upstream_status
        super().__init__(message, status_code)


class MalformedForecastError(UpstreamError):
    """Raised when weather element time series are not aligned."""


class TransportError(WeatherServiceException):
    """Raised when no response was received from the CWA API."""

    status_code = 504
