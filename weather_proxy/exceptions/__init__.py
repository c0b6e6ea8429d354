"""Weather proxy exceptions."""

from .common import (
    WeatherServiceException,
    MissingLocation,
    MissingCoordinates,
    ConfigurationError,
    InvalidCredential,
    LocationNotFound,
    RateLimited,
    UpstreamError,
    InvalidResponseShape,
    UpstreamUnreachable,
    UpstreamStatusError,
    UpstreamConnectionError,
)

__all__ = [
    "WeatherServiceException",
    "MissingLocation",
    "MissingCoordinates",
    "ConfigurationError",
    "InvalidCredential",
    "LocationNotFound",
    "RateLimited",
    "UpstreamError",
    "InvalidResponseShape",
    "UpstreamUnreachable",
    "UpstreamStatusError",
    "UpstreamConnectionError",
]
