from typing import Dict, Optional

from pydantic import BaseModel, Field

from cwa_weather.schemas.forecast import LocationForecast


class IndexResponse(BaseModel):
    message: str = Field(..., description="Welcome message")
    endpoints: Dict[str, str] = Field(..., description="Available endpoints")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service health status")
    timestamp: str = Field(..., description="Current timestamp")


class WeatherResponse(BaseModel):
    success: bool = Field(True, description="Whether the lookup succeeded")
    data: LocationForecast = Field(..., description="Normalized forecast")


class WeatherErrorResponse(BaseModel):
    success: bool = Field(False, description="Whether the lookup succeeded")
    error: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")
    message: Optional[str] = Field(None, description="Detailed error information")
