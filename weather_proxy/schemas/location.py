from typing import Optional

from pydantic import BaseModel, Field


class ReverseGeocodeResponse(BaseModel):
    city: str = Field(..., description="Place name")
    country: str = Field(..., description="ISO country code")
    state: Optional[str] = Field(None, description="State or region, if known")
    displayName: str = Field(..., description="Human readable place name")


class Suggestion(BaseModel):
    name: str = Field(..., description="Place name")
    country: str = Field(..., description="ISO country code")
    state: Optional[str] = Field(None, description="State or region, if known")
    lat: float
    lon: float
    displayName: str = Field(..., description="Human readable place name")
