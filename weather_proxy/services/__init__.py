"""
Services package initialization.
"""

from weather_proxy.services.upstream_client import OpenWeatherClient
from weather_proxy.services.weather_service import WeatherService

__all__ = [
    "OpenWeatherClient",
    "WeatherService",
]
