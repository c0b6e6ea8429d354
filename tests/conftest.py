"""
Common test fixtures and configuration.
"""

from typing import Callable, List

import httpx
import pytest

from weather_proxy.config import Settings
from weather_proxy.services.upstream_client import OpenWeatherClient

TEST_API_KEY = "test-secret-key"
TEST_BASE_URL = "https://owm.test"
TEST_ICON_URL = "https://icons.test/img/wn"


@pytest.fixture
def settings() -> Settings:
    """
    Settings with a configured key, isolated from any local .env file.
    """
    return Settings(
        _env_file=None,
        openweather_api_key=TEST_API_KEY,
        openweather_base_url=TEST_BASE_URL,
        openweather_icon_url=TEST_ICON_URL,
        enable_metrics=False,
    )


@pytest.fixture
def settings_without_key(settings) -> Settings:
    return settings.model_copy(update={"openweather_api_key": None})


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests seen by the stub transport, in order."""
    return []


@pytest.fixture
def make_client(sent_requests) -> Callable[..., OpenWeatherClient]:
    """
    Build an OpenWeatherClient whose transport is answered by ``handler``.

    ``handler`` receives the ``httpx.Request`` and returns an ``httpx.Response``
    (or raises an httpx transport error to simulate no response).
    """

    def _make(handler) -> OpenWeatherClient:
        def _record(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        return OpenWeatherClient(
            base_url=TEST_BASE_URL, transport=httpx.MockTransport(_record)
        )

    return _make


@pytest.fixture
def london_payload() -> dict:
    """Current weather payload as returned by /data/2.5/weather."""
    return {
        "coord": {"lon": -0.1, "lat": 51.5},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {
            "temp": 15.2,
            "feels_like": 14.0,
            "temp_min": 13.9,
            "temp_max": 16.1,
            "pressure": 1012,
            "humidity": 72,
        },
        "visibility": 10000,
        "wind": {"speed": 3.1, "deg": 200},
        "dt": 1700000000,
        "sys": {"country": "GB", "sunrise": 1699945200, "sunset": 1699977600},
        "timezone": 0,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def forecast_payload() -> dict:
    """Forecast payload with eight 3-hour slots."""
    slots = []
    for i in range(8):
        slots.append(
            {
                "dt": 1700000000 + i * 10800,
                "dt_txt": f"2023-11-15 {(i * 3) % 24:02d}:00:00",
                "main": {"temp": 10.5 + i, "humidity": 80 - i},
                "weather": [{"description": f"slot {i}", "icon": "04n"}],
                "wind": {"speed": 2.0 + i / 10},
            }
        )
    return {
        "cod": "200",
        "cnt": len(slots),
        "list": slots,
        "city": {"id": 2643743, "name": "London", "country": "GB"},
    }


@pytest.fixture
def geocode_results() -> list:
    """Direct geocoding results with a repeated (name, country) pair."""
    return [
        {"name": "Springfield", "country": "US", "state": "Illinois", "lat": 39.8, "lon": -89.6},
        {"name": "Springfield", "country": "US", "state": "Missouri", "lat": 37.2, "lon": -93.3},
        {"name": "Springfield", "country": "AU", "lat": -33.0, "lon": 151.0},
    ]


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY
