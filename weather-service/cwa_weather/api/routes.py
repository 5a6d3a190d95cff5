"""
This module defines the public routes of the weather proxy.
"""

from datetime import datetime, UTC

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from cwa_weather.config import Settings, get_settings
from cwa_weather.exceptions import WeatherServiceException
from cwa_weather.schemas.responses import (
    HealthResponse,
    IndexResponse,
    WeatherErrorResponse,
    WeatherResponse,
)
from cwa_weather.services.weather_service import WeatherService
from cwa_weather.utils.dependencies import get_weather_service
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(tags=["weather"])

WEATHER_ROUTE = "/api/weather/:location"
HEALTH_ROUTE = "/api/health"


def _error_response(
    status_code: int, message: str, settings: Settings
) -> JSONResponse:
    if settings.collapse_error_status:
        status_code = 500
    return JSONResponse(
        status_code=status_code,
        content=WeatherErrorResponse(error=message).model_dump(),
    )


def _utc_timestamp() -> str:
    """
    ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix.
    """
    now = datetime.now(UTC).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


@router.get("/", response_model=IndexResponse)
async def index() -> IndexResponse:
    """
    List the available endpoints.
    """
    return IndexResponse(
        message="Welcome to the CWA weather forecast API",
        endpoints={"weatherByCity": WEATHER_ROUTE, "health": HEALTH_ROUTE},
    )


@router.get(HEALTH_ROUTE, response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="OK", timestamp=_utc_timestamp())


@router.get(
    "/api/weather/{location}",
    response_model=WeatherResponse,
    responses={
        404: {"model": WeatherErrorResponse},
        500: {"model": WeatherErrorResponse},
        502: {"model": WeatherErrorResponse},
        504: {"model": WeatherErrorResponse},
    },
)
async def get_weather(
    request: Request,
    location: str = Path(..., description="City name", min_length=1),
    weather_service: WeatherService = Depends(get_weather_service),
    settings: Settings = Depends(get_settings),
):
    """
    Get the 36-hour forecast for a location.

    Failures keep their own status code (404, 500, 502 or 504) unless
    ``collapse_error_status`` is enabled, in which case all of them are 500.
    """
    try:
        forecast = await weather_service.get_forecast(location)
        return WeatherResponse(success=True, data=forecast)

    except WeatherServiceException as e:
        logger.error(
            "Error getting weather",
            extra={
                "event": "api_error",
                "location": location,
                "status_code": e.status_code,
                "error": e.message,
                "error_type": type(e).__name__,
                "request_id": request.state.request_id,
            },
        )
        return _error_response(e.status_code, e.message, settings)

    except Exception as e:
        logger.exception(
            "Unexpected error getting weather",
            extra={
                "event": "api_error",
                "location": location,
                "error_type": type(e).__name__,
                "request_id": request.state.request_id,
            },
        )
        return _error_response(500, "Failed to retrieve weather data", settings)
