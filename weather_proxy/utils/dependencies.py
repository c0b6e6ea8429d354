"""
FastAPI dependency injection providers.

The settings object and the shared upstream client live on ``app.state`` and
are created by the application factory, so tests can build an app around their
own settings or swap the facade through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from weather_proxy.config import Settings
from weather_proxy.services.upstream_client import OpenWeatherClient
from weather_proxy.services.weather_service import WeatherService


def get_app_settings(request: Request) -> Settings:
    """
    Provide the settings the running application was created with.

    Returns:
        Settings: Application configuration
    """
    return request.app.state.settings


def get_upstream_client(request: Request) -> OpenWeatherClient:
    """
    Provide the application-wide OpenWeatherMap client.

    Returns:
        OpenWeatherClient: Shared client holding the connection pool
    """
    return request.app.state.upstream_client


def get_weather_service(
    settings: Settings = Depends(get_app_settings),
    client: OpenWeatherClient = Depends(get_upstream_client),
) -> WeatherService:
    """
    Provide a request-scoped weather facade.

    Args:
        settings: Settings from dependency
        client: Upstream client from dependency

    Returns:
        WeatherService: Facade bound to the configured key and client
    """
    return WeatherService(settings=settings, client=client)
