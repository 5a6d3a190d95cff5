"""
FastAPI dependency injection providers.

Routes never build clients themselves. They receive them through these
providers, which tests replace via ``app.dependency_overrides``.
"""

import httpx
from fastapi import Depends, Request

from cwa_weather.config import Settings, get_settings
from cwa_weather.services.cwa_client import CWAClient
from cwa_weather.services.weather_service import WeatherService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Provide the shared HTTP client opened by the application lifespan.

    Args:
        request: Incoming request, used to reach ``app.state``

    Returns:
        httpx.AsyncClient: Pooled client for outbound calls
    """
    return request.app.state.http_client


def get_cwa_client(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> CWAClient:
    """
    Provide a CWA API client bound to the application settings.
    """
    return CWAClient(settings=settings, http_client=http_client)


def get_weather_service(
    cwa_client: CWAClient = Depends(get_cwa_client),
) -> WeatherService:
    """
    Provide the weather service for the request.
    """
    return WeatherService(cwa_client)
