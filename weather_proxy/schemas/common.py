from typing import Optional

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    lat: float = Field(..., description="Latitude in decimal degrees")
    lon: float = Field(..., description="Longitude in decimal degrees")


class BaseCondition(BaseModel):
    """
    Base model for a normalized weather reading.

    Common fields shared by current conditions and forecast entries.

    Attributes:
        temperature: Temperature in whole degrees Celsius
        description: Provider description (e.g. 'clear sky')
        icon: Provider icon code (e.g. '01d')
        iconUrl: Absolute URL of the icon image
    """

    temperature: int = Field(..., description="Temperature in Celsius, rounded")
    description: str = Field(..., description="Weather condition description")
    icon: str = Field(..., description="Provider icon code")
    iconUrl: str = Field(..., description="Icon image URL")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(None, description="Detailed error information")
    solution: Optional[str] = Field(None, description="Hint for operator-fixable errors")
