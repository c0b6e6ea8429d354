"""
This module provides the weather facade over the OpenWeatherMap client.
"""

from typing import List, Optional

from pydantic import ValidationError

from weather_proxy.api.crud import ForecastCRUD, GeocodingCRUD, WeatherCRUD
from weather_proxy.config import Settings
from weather_proxy.definitions.data_sources import MIN_SUGGESTION_QUERY_LENGTH
from weather_proxy.exceptions import (
    ConfigurationError,
    InvalidCredential,
    InvalidResponseShape,
    LocationNotFound,
    MissingCoordinates,
    MissingLocation,
    RateLimited,
    UpstreamConnectionError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamUnreachable,
    WeatherServiceException,
)
from weather_proxy.models.weather import LocationQuery
from weather_proxy.schemas.location import ReverseGeocodeResponse, Suggestion
from weather_proxy.schemas.weather import ForecastResponse, WeatherResponse
from weather_proxy.services.upstream_client import OpenWeatherClient
from weather_proxy.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherService:
    """
    Facade that validates inputs, calls the provider once and normalizes the result.

    Configuration is passed in explicitly; the service never reads the
    environment itself.
    """

    def __init__(self, settings: Settings, client: OpenWeatherClient):
        self.settings = settings
        self.client = client

    def _require_api_key(self) -> str:
        if not self.settings.openweather_api_key:
            logger.error(
                "OpenWeatherMap API key is not configured",
                extra={"event": "config_error"},
            )
            raise ConfigurationError()
        return self.settings.openweather_api_key

    @staticmethod
    def _require_location(query: Optional[LocationQuery]) -> LocationQuery:
        if query is None or not query.is_complete:
            raise MissingLocation()
        return query

    @staticmethod
    def _map_upstream_error(
        error: Exception, not_found_details: Optional[str] = None
    ) -> WeatherServiceException:
        """
        Translate an upstream client failure into the facade's error taxonomy.
        """
        if isinstance(error, UpstreamConnectionError):
            return UpstreamUnreachable()

        if isinstance(error, UpstreamStatusError):
            if error.status_code == 401:
                return InvalidCredential()
            if error.status_code == 404:
                return LocationNotFound(not_found_details)
            if error.status_code == 429:
                return RateLimited()
            if error.status_code < 400:
                return UpstreamError(error.message)
            return UpstreamError(error.message, status_code=error.status_code)

        return UpstreamError()

    async def get_current_weather(self, query: LocationQuery) -> WeatherResponse:
        """
        Get current conditions for a city or a coordinate pair.
        """
        query = self._require_location(query)
        api_key = self._require_api_key()
        logger.info(
            "Fetching current weather",
            extra={"event": "weather_request", "location": query.describe()},
        )

        try:
            raw = await self.client.fetch_current_weather(query, api_key)
        except (UpstreamConnectionError, UpstreamStatusError) as e:
            raise self._map_upstream_error(
                e, f"We couldn't find weather data for \"{query.describe()}\""
            ) from e

        try:
            weather = WeatherCRUD.transform_current(raw, self.settings.openweather_icon_url)
        except ValidationError as e:
            logger.error(
                "Unexpected current weather payload",
                extra={"event": "invalid_response_shape", "error_count": e.error_count()},
            )
            raise InvalidResponseShape() from e

        logger.info(
            "Weather data fetched",
            extra={"event": "weather_ok", "city": weather.location.city},
        )
        return weather

    async def get_forecast(self, query: LocationQuery) -> ForecastResponse:
        """
        Get the first forecast slots for a city or a coordinate pair.
        """
        query = self._require_location(query)
        api_key = self._require_api_key()
        logger.info(
            "Fetching forecast",
            extra={"event": "forecast_request", "location": query.describe()},
        )

        try:
            raw = await self.client.fetch_forecast(query, api_key)
        except (UpstreamConnectionError, UpstreamStatusError) as e:
            raise self._map_upstream_error(
                e, f"We couldn't find forecast data for \"{query.describe()}\""
            ) from e

        try:
            return ForecastCRUD.transform_forecast(raw, self.settings.openweather_icon_url)
        except ValidationError as e:
            logger.error(
                "Unexpected forecast payload",
                extra={"event": "invalid_response_shape", "error_count": e.error_count()},
            )
            raise InvalidResponseShape() from e

    async def reverse_geocode(
        self, lat: Optional[float], lon: Optional[float]
    ) -> ReverseGeocodeResponse:
        """
        Resolve coordinates to the nearest named place.
        """
        if lat is None or lon is None:
            raise MissingCoordinates()
        api_key = self._require_api_key()

        try:
            raw = await self.client.reverse_geocode(lat, lon, api_key)
        except (UpstreamConnectionError, UpstreamStatusError) as e:
            raise self._map_upstream_error(e) from e

        try:
            results = GeocodingCRUD.parse_results(raw)
        except ValidationError as e:
            raise InvalidResponseShape() from e

        if not results:
            logger.info(
                "No place found for coordinates",
                extra={"event": "location_not_found", "lat": lat, "lon": lon},
            )
            raise LocationNotFound(f"No place found near {lat}, {lon}")

        return GeocodingCRUD.transform_reverse(results[0])

    async def suggest(self, partial_query: Optional[str]) -> List[Suggestion]:
        """
        Autocomplete place names for a type-ahead UI.

        Best effort by contract: short input and every failure yield an empty
        list instead of an error, so a failed lookup never blocks the UI.
        """
        if not partial_query or len(partial_query) < MIN_SUGGESTION_QUERY_LENGTH:
            return []

        try:
            api_key = self._require_api_key()
            raw = await self.client.direct_geocode(
                partial_query, api_key, limit=self.settings.suggestion_limit
            )
            results = GeocodingCRUD.parse_results(raw)
        except (
            WeatherServiceException,
            UpstreamConnectionError,
            UpstreamStatusError,
            ValidationError,
        ) as e:
            logger.warning(
                "Suggestions lookup failed, returning no suggestions",
                extra={
                    "event": "suggestions_degraded",
                    "query": partial_query,
                    "error_type": type(e).__name__,
                },
            )
            return []

        return GeocodingCRUD.transform_suggestions(results)
