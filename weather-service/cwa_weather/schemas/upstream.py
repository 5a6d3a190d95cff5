"""
This module defines schemas for the raw CWA forecast payload.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UpstreamModel(BaseModel):
    """
    Base model for upstream payloads.

    Unknown keys are ignored so the provider can add fields freely.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ElementParameter(UpstreamModel):
    parameter_name: str = Field(..., alias="parameterName")
    parameter_value: Optional[str] = Field(None, alias="parameterValue")
    parameter_unit: Optional[str] = Field(None, alias="parameterUnit")


class TimeEntry(UpstreamModel):
    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")
    parameter: ElementParameter


class WeatherElement(UpstreamModel):
    """
    One named time series, e.g. ``PoP`` for precipitation probability.
    """

    element_name: str = Field(..., alias="elementName")
    time: List[TimeEntry] = Field(default_factory=list)


class LocationRecord(UpstreamModel):
    location_name: str = Field(..., alias="locationName")
    weather_element: List[WeatherElement] = Field(
        default_factory=list, alias="weatherElement"
    )


class ForecastRecords(UpstreamModel):
    dataset_description: str = Field("", alias="datasetDescription")
    location: List[LocationRecord] = Field(default_factory=list)


class RawForecastResponse(UpstreamModel):
    """
    Top-level response of the ``/v1/rest/datastore/{dataset}`` endpoint.
    """

    records: ForecastRecords


class SingleLocationPayload(BaseModel):
    """
    Raw forecast for the one location a request asked about.
    """

    dataset_description: str
    location: LocationRecord
