"""
This module defines the normalized forecast schemas served to clients.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ForecastInterval(BaseModel):
    """
    One forecast time window with presentation-ready values.

    Values are the provider's strings with units appended where relevant
    (``"20%"``, ``"24°C"``). Element kinds missing upstream stay empty.
    """

    model_config = ConfigDict(populate_by_name=True)

    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")
    weather_summary: str = Field("", alias="weather", description="Wx")
    precipitation_chance: str = Field("", alias="rain", description="PoP")
    min_temperature: str = Field("", alias="minTemp", description="MinT")
    max_temperature: str = Field("", alias="maxTemp", description="MaxT")
    comfort_index: str = Field("", alias="comfort", description="CI")
    wind_speed: str = Field("", alias="windSpeed", description="WS")


class LocationForecast(BaseModel):
    """
    Normalized forecast for a single location.
    """

    model_config = ConfigDict(populate_by_name=True)

    city_name: str = Field(..., alias="city", description="Location name")
    dataset_description: str = Field(
        ..., alias="updateTime", description="Dataset description"
    )
    forecasts: List[ForecastInterval] = Field(
        default_factory=list, description="Intervals in upstream order"
    )
