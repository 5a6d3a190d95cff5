"""Weather service exceptions."""

from .common import (
    WeatherServiceException,
    ConfigurationError,
    NotFoundError,
    UpstreamError,
    MalformedForecastError,
    TransportError,
)

__all__ = [
    "WeatherServiceException",
    "ConfigurationError",
    "NotFoundError",
    "UpstreamError",
    "MalformedForecastError",
    "TransportError",
]
