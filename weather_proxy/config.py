"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Application settings
    app_name: str = "Weather Proxy API"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"
    api_prefix: str = "/api"
    enable_metrics: bool = True

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000

    # OpenWeatherMap settings
    openweather_api_key: Optional[str] = None
    openweather_base_url: str = "https://api.openweathermap.org"
    openweather_icon_url: str = "https://openweathermap.org/img/wn"
    openweather_units: str = "metric"
    upstream_timeout: float = 10.0
    suggestion_limit: int = 5

    # CORS settings
    cors_origins: List[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    @property
    def api_key_configured(self) -> bool:
        return bool(self.openweather_api_key)


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
