"""
This module pivots raw CWA weather elements into per-interval forecasts.
"""

from typing import Dict, List, Tuple

from cwa_weather.definitions.data_sources import (
    CELSIUS_SUFFIX,
    PERCENT_SUFFIX,
    WeatherElementName,
)
from cwa_weather.exceptions import MalformedForecastError
from cwa_weather.schemas.forecast import ForecastInterval, LocationForecast
from cwa_weather.schemas.upstream import SingleLocationPayload, WeatherElement

# element name -> (ForecastInterval field, unit suffix)
ELEMENT_FIELDS: Dict[str, Tuple[str, str]] = {
    WeatherElementName.WEATHER.value: ("weather_summary", ""),
    WeatherElementName.PRECIPITATION.value: ("precipitation_chance", PERCENT_SUFFIX),
    WeatherElementName.MIN_TEMPERATURE.value: ("min_temperature", CELSIUS_SUFFIX),
    WeatherElementName.MAX_TEMPERATURE.value: ("max_temperature", CELSIUS_SUFFIX),
    WeatherElementName.COMFORT.value: ("comfort_index", ""),
    WeatherElementName.WIND_SPEED.value: ("wind_speed", ""),
}


def _check_alignment(elements: List[WeatherElement]) -> None:
    """
    Ensure every recognized element shares the time axis of the first one.
    """
    reference = elements[0]
    for element in elements[1:]:
        if element.element_name not in ELEMENT_FIELDS:
            continue
        if len(element.time) != len(reference.time):
            raise MalformedForecastError(
                f"Weather element {element.element_name} has {len(element.time)} "
                f"intervals, expected {len(reference.time)}"
            )
        for index, (entry, ref_entry) in enumerate(zip(element.time, reference.time)):
            if (entry.start_time, entry.end_time) != (
                ref_entry.start_time,
                ref_entry.end_time,
            ):
                raise MalformedForecastError(
                    f"Weather element {element.element_name} is misaligned "
                    f"at interval {index}"
                )


def normalize(payload: SingleLocationPayload) -> LocationForecast:
    """
    Build a ``LocationForecast`` from one location's raw payload.

    Produces one interval per entry of the first element's time series,
    in upstream order. Unknown element names are ignored.

    Raises:
        MalformedForecastError: element time series are not aligned
    """
    elements = payload.location.weather_element
    forecasts: List[ForecastInterval] = []

    if elements:
        _check_alignment(elements)

        for index, reference in enumerate(elements[0].time):
            fields = {
                "start_time": reference.start_time,
                "end_time": reference.end_time,
            }
            for element in elements:
                target = ELEMENT_FIELDS.get(element.element_name)
                if target is None:
                    continue
                field_name, suffix = target
                fields[field_name] = element.time[index].parameter.parameter_name + suffix

            forecasts.append(ForecastInterval(**fields))

    return LocationForecast(
        city_name=payload.location.location_name,
        dataset_description=payload.dataset_description,
        forecasts=forecasts,
    )
