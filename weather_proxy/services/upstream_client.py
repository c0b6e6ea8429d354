"""
Async HTTP client for the OpenWeatherMap API.
"""

from typing import Any, Dict, Optional

import httpx

from weather_proxy.config import Settings
from weather_proxy.definitions.data_sources import (
    REVERSE_GEOCODE_LIMIT,
    UpstreamEndpoint,
)
from weather_proxy.exceptions import (
    InvalidResponseShape,
    UpstreamConnectionError,
    UpstreamStatusError,
)
from weather_proxy.models.weather import LocationQuery
from weather_proxy.utils.logger import setup_logger

logger = setup_logger(__name__)


class OpenWeatherClient:
    """
    Thin wrapper over ``httpx.AsyncClient``: one GET per call, no retries.

    Non-2xx answers raise ``UpstreamStatusError``; transport failures, timeouts
    included, raise ``UpstreamConnectionError`` so callers can tell the two apart.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        units: str = "metric",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.units = units
        self.client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "OpenWeatherClient":
        return cls(
            base_url=settings.openweather_base_url,
            timeout=settings.upstream_timeout,
            units=settings.openweather_units,
            transport=transport,
        )

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def fetch_current_weather(self, query: LocationQuery, api_key: str) -> Dict[str, Any]:
        params = {**query.to_params(), "appid": api_key, "units": self.units}
        return await self._get(UpstreamEndpoint.CURRENT_WEATHER, params)

    async def fetch_forecast(self, query: LocationQuery, api_key: str) -> Dict[str, Any]:
        params = {**query.to_params(), "appid": api_key, "units": self.units}
        return await self._get(UpstreamEndpoint.FORECAST, params)

    async def reverse_geocode(self, lat: float, lon: float, api_key: str) -> Any:
        params = {"lat": lat, "lon": lon, "limit": REVERSE_GEOCODE_LIMIT, "appid": api_key}
        return await self._get(UpstreamEndpoint.REVERSE_GEOCODE, params)

    async def direct_geocode(self, text: str, api_key: str, limit: int = 5) -> Any:
        params = {"q": text, "limit": limit, "appid": api_key}
        return await self._get(UpstreamEndpoint.DIRECT_GEOCODE, params)

    async def _get(self, endpoint: UpstreamEndpoint, params: Dict[str, Any]) -> Any:
        # Never log params: they carry the appid.
        try:
            response = await self.client.get(endpoint.value, params=params)
        except httpx.RequestError as e:
            logger.error(
                "No response from weather API",
                extra={
                    "event": "upstream_unreachable",
                    "endpoint": endpoint.name,
                    "error_type": type(e).__name__,
                },
            )
            raise UpstreamConnectionError(
                f"No response from weather API ({type(e).__name__})"
            ) from e

        if not response.is_success:
            message = self._extract_message(response)
            logger.warning(
                "Weather API returned an error status",
                extra={
                    "event": "upstream_error",
                    "endpoint": endpoint.name,
                    "status_code": response.status_code,
                    "upstream_message": message,
                },
            )
            raise UpstreamStatusError(response.status_code, message)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                "Weather API returned a non-JSON body",
                extra={"event": "upstream_bad_body", "endpoint": endpoint.name},
            )
            raise InvalidResponseShape() from e

        logger.debug(
            "Weather API call succeeded",
            extra={"event": "upstream_ok", "endpoint": endpoint.name},
        )
        return data

    @staticmethod
    def _extract_message(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("message") is not None:
            return str(body["message"])
        return None
