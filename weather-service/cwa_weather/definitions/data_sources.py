"""
This module defines the CWA data source vocabulary.
"""

from enum import Enum

DEFAULT_DATASET_ID = "F-C0032-001"

PERCENT_SUFFIX = "%"
CELSIUS_SUFFIX = "°C"


class WeatherElementName(str, Enum):
    """Element names used by the 36-hour general forecast dataset."""

    WEATHER = "Wx"
    PRECIPITATION = "PoP"
    MIN_TEMPERATURE = "MinT"
    MAX_TEMPERATURE = "MaxT"
    COMFORT = "CI"
    WIND_SPEED = "WS"
