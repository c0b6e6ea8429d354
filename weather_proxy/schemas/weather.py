"""
This module defines schemas for the weather and forecast endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from weather_proxy.definitions.data_sources import Number
from weather_proxy.schemas.common import BaseCondition, Coordinates


class Wind(BaseModel):
    speed: Optional[Number] = Field(None, description="Wind speed in m/s")
    deg: Optional[Number] = Field(None, description="Wind direction in degrees")


class WeatherLocation(BaseModel):
    city: str = Field(..., description="City name")
    country: Optional[str] = Field(None, description="ISO country code")
    coordinates: Coordinates = Field(..., description="Location coordinates")


class CurrentConditions(BaseCondition):
    """
    Current conditions, extending BaseCondition with the pass-through fields
    reported by the provider.
    """

    feels_like: Optional[int] = Field(None, description="Feels like temperature")
    humidity: Optional[Number] = Field(None, description="Humidity percentage")
    pressure: Optional[Number] = Field(None, description="Pressure in hPa")
    wind: Wind = Field(default_factory=Wind, description="Wind speed and direction")
    visibility: Optional[Number] = Field(None, description="Visibility in kilometers")
    sunrise: Optional[int] = Field(None, description="Sunrise, epoch seconds UTC")
    sunset: Optional[int] = Field(None, description="Sunset, epoch seconds UTC")
    timezone: Optional[int] = Field(None, description="Offset from UTC in seconds")


class WeatherResponse(BaseModel):
    location: WeatherLocation
    current: CurrentConditions


class ForecastEntry(BaseCondition):
    """One 3-hour slot of the provider forecast."""

    date: str = Field(..., description="Slot timestamp as reported by the provider")
    humidity: Optional[Number] = Field(None, description="Humidity percentage")
    windSpeed: Optional[Number] = Field(None, description="Wind speed in m/s")


class ForecastLocation(BaseModel):
    city: str = Field(..., description="City name")
    country: Optional[str] = Field(None, description="ISO country code")


class ForecastResponse(BaseModel):
    location: ForecastLocation
    daily: List[ForecastEntry] = Field(
        ..., description="First forecast slots, in provider order"
    )
