"""
This module defines the upstream provider endpoints and fixed limits.
"""

from enum import Enum
from typing import Literal, Union


class UpstreamEndpoint(str, Enum):
    """OpenWeatherMap operations used by the proxy, relative to the base URL."""

    CURRENT_WEATHER = "/data/2.5/weather"
    FORECAST = "/data/2.5/forecast"
    REVERSE_GEOCODE = "/geo/1.0/reverse"
    DIRECT_GEOCODE = "/geo/1.0/direct"


HealthStatus = Literal["OK", "WARNING"]

# Keeps ints as ints so pass-through fields serialize exactly as received.
Number = Union[int, float]

# The forecast is the raw first slots of the 3-hour list, not one per day.
FORECAST_ENTRY_LIMIT: int = 5
MIN_SUGGESTION_QUERY_LENGTH: int = 2
REVERSE_GEOCODE_LIMIT: int = 1

ICON_URL_TEMPLATE: str = "{base}/{icon}@2x.png"
