from typing import Optional


class WeatherServiceException(Exception):
    """
    Base exception for the weather facade.

    Every subclass knows the HTTP status and the short ``error`` string it is
    rendered with, so handlers never have to inspect the concrete type.
    """

    status_code: int = 500
    error: str = "Server error"
    default_details: Optional[str] = None
    solution: Optional[str] = None

    def __init__(
        self,
        details: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        solution: Optional[str] = None,
    ):
        self.details = details or self.default_details
        if status_code is not None:
            self.status_code = status_code
        if solution is not None:
            self.solution = solution
        super().__init__(self.details or self.error)

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details:
            body["details"] = self.details
        if self.solution:
            body["solution"] = self.solution
        return body


class MissingLocation(WeatherServiceException):
    """Raised when neither a city nor a full coordinate pair is given."""

    status_code = 400
    error = "Location is required"
    default_details = "Provide either city name or coordinates (lat, lon)"


class MissingCoordinates(WeatherServiceException):
    """Raised when reverse geocoding is requested without lat and lon."""

    status_code = 400
    error = "Latitude and longitude are required"
    default_details = "Provide both lat and lon query parameters"


class ConfigurationError(WeatherServiceException):
    """Raised when the provider API key is not configured."""

    status_code = 500
    error = "Server configuration error"
    default_details = "OpenWeatherMap API key is not configured"
    solution = "Set OPENWEATHER_API_KEY in the environment and restart the server"


class InvalidCredential(WeatherServiceException):
    """Raised when the provider rejects the configured API key."""

    status_code = 500
    error = "Invalid API Key"
    default_details = "Your OpenWeatherMap API key is invalid or not activated"
    solution = "Check your API key in environment variables"


class LocationNotFound(WeatherServiceException):
    status_code = 404
    error = "Location not found"


class RateLimited(WeatherServiceException):
    status_code = 429
    error = "API rate limit exceeded"
    default_details = "Too many requests to OpenWeatherMap API"


class UpstreamError(WeatherServiceException):
    """Raised for provider failures without a dedicated mapping."""

    status_code = 502
    error = "Weather API error"
    default_details = "Unknown error from OpenWeatherMap"


class InvalidResponseShape(UpstreamError):
    """Raised when the provider answered 200 with a payload we cannot map."""

    default_details = "Unexpected response format from OpenWeatherMap"


class UpstreamUnreachable(WeatherServiceException):
    status_code = 503
    error = "Network error"
    default_details = "Cannot connect to OpenWeatherMap API"


class UpstreamStatusError(Exception):
    """Raised by the upstream client when the provider answers with a non-2xx status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Upstream returned {status_code}: {message or 'no message'}")


class UpstreamConnectionError(Exception):
    """Raised by the upstream client when no response was received."""
