"""
This module defines the public weather routes.
"""

from datetime import datetime, UTC
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from weather_proxy.config import Settings
from weather_proxy.models.responses import HealthResponse
from weather_proxy.models.weather import LocationQuery
from weather_proxy.schemas.location import ReverseGeocodeResponse, Suggestion
from weather_proxy.schemas.weather import ForecastResponse, WeatherResponse
from weather_proxy.services.weather_service import WeatherService
from weather_proxy.utils.dependencies import get_app_settings, get_weather_service

router = APIRouter(tags=["weather"])


@router.get("/weather", response_model=WeatherResponse)
async def get_weather(
    city: Optional[str] = Query(None, description="City name", max_length=100),
    lat: Optional[float] = Query(None, description="Latitude (use with lon)"),
    lon: Optional[float] = Query(None, description="Longitude (use with lat)"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> WeatherResponse:
    """
    Get current weather for a city or for coordinates.

    The city takes precedence when both forms are given.
    """
    query = LocationQuery.from_params(city=city, lat=lat, lon=lon)
    return await weather_service.get_current_weather(query)


@router.get("/forecast", response_model=ForecastResponse)
async def get_forecast(
    city: Optional[str] = Query(None, description="City name", max_length=100),
    lat: Optional[float] = Query(None, description="Latitude (use with lon)"),
    lon: Optional[float] = Query(None, description="Longitude (use with lat)"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> ForecastResponse:
    """
    Get the next forecast slots (3-hour steps) for a city or for coordinates.
    """
    query = LocationQuery.from_params(city=city, lat=lat, lon=lon)
    return await weather_service.get_forecast(query)


@router.get("/location", response_model=ReverseGeocodeResponse)
async def get_location(
    lat: Optional[float] = Query(None, description="Latitude"),
    lon: Optional[float] = Query(None, description="Longitude"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> ReverseGeocodeResponse:
    """
    Resolve coordinates to a place name.
    """
    return await weather_service.reverse_geocode(lat, lon)


@router.get("/suggestions", response_model=List[Suggestion])
async def get_suggestions(
    query: Optional[str] = Query(None, description="Partial place name"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> List[Suggestion]:
    """
    Autocomplete place names. Always answers 200, with an empty list when
    the input is too short or the lookup fails.
    """
    return await weather_service.suggest(query)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Health check endpoint that reports whether the provider key is configured.
    """
    configured = settings.api_key_configured
    return HealthResponse(
        status="OK" if configured else "WARNING",
        apiKeyConfigured=configured,
        message=(
            "Weather API is running"
            if configured
            else "API is running but OpenWeatherMap API key is missing"
        ),
        timestamp=datetime.now(UTC).isoformat(),
        environment=settings.environment,
        version=settings.app_version,
    )
