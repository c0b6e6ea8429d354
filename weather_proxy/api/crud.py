"""
Transformations from raw OpenWeatherMap payloads to the public response schemas.

Each transformer validates the raw payload against the upstream model first, so a
missing or ill-typed field surfaces as ``pydantic.ValidationError`` rather than a
``KeyError`` halfway through the mapping.
"""

from typing import Any, List

from pydantic import TypeAdapter

from weather_proxy.definitions.data_sources import FORECAST_ENTRY_LIMIT
from weather_proxy.models.weather import (
    UpstreamCurrentWeather,
    UpstreamForecast,
    UpstreamGeocodeResult,
)
from weather_proxy.schemas.common import Coordinates
from weather_proxy.schemas.location import ReverseGeocodeResponse, Suggestion
from weather_proxy.schemas.weather import (
    CurrentConditions,
    ForecastEntry,
    ForecastLocation,
    ForecastResponse,
    WeatherLocation,
    WeatherResponse,
    Wind,
)
from weather_proxy.utils.conversions import (
    build_icon_url,
    format_display_name,
    meters_to_km,
    round_temperature,
)

_geocode_results = TypeAdapter(List[UpstreamGeocodeResult])


class WeatherCRUD:

    @staticmethod
    def transform_current(raw: Any, icon_base_url: str) -> WeatherResponse:
        """
        Transform a current weather payload to the public format.
        """
        data = UpstreamCurrentWeather.model_validate(raw)
        condition = data.weather[0]

        return WeatherResponse(
            location=WeatherLocation(
                city=data.name,
                country=data.sys.country,
                coordinates=Coordinates(lat=data.coord.lat, lon=data.coord.lon),
            ),
            current=CurrentConditions(
                temperature=round_temperature(data.main.temp),
                feels_like=round_temperature(data.main.feels_like),
                humidity=data.main.humidity,
                pressure=data.main.pressure,
                description=condition.description,
                icon=condition.icon,
                iconUrl=build_icon_url(icon_base_url, condition.icon),
                wind=Wind(speed=data.wind.speed, deg=data.wind.deg),
                visibility=meters_to_km(data.visibility),
                sunrise=data.sys.sunrise,
                sunset=data.sys.sunset,
                timezone=data.timezone,
            ),
        )


class ForecastCRUD:

    @staticmethod
    def transform_forecast(
        raw: Any, icon_base_url: str, limit: int = FORECAST_ENTRY_LIMIT
    ) -> ForecastResponse:
        """
        Transform a forecast payload, keeping the first ``limit`` 3-hour slots.

        Slots are taken in provider order without grouping them by day.
        """
        data = UpstreamForecast.model_validate(raw)

        daily = []
        for item in data.list[:limit]:
            condition = item.weather[0]
            daily.append(
                ForecastEntry(
                    date=item.dt_txt,
                    temperature=round_temperature(item.main.temp),
                    description=condition.description,
                    icon=condition.icon,
                    iconUrl=build_icon_url(icon_base_url, condition.icon),
                    humidity=item.main.humidity,
                    windSpeed=item.wind.speed,
                )
            )

        return ForecastResponse(
            location=ForecastLocation(city=data.city.name, country=data.city.country),
            daily=daily,
        )


class GeocodingCRUD:

    @staticmethod
    def parse_results(raw: Any) -> List[UpstreamGeocodeResult]:
        return _geocode_results.validate_python(raw)

    @staticmethod
    def transform_reverse(result: UpstreamGeocodeResult) -> ReverseGeocodeResponse:
        return ReverseGeocodeResponse(
            city=result.name,
            country=result.country,
            state=result.state,
            displayName=format_display_name(result.name, result.country, result.state),
        )

    @staticmethod
    def transform_suggestions(results: List[UpstreamGeocodeResult]) -> List[Suggestion]:
        """
        Map direct geocoding results, dropping repeats of the same (name, country).

        The first occurrence in provider order wins, so a second "Springfield, US"
        with a different state is discarded.
        """
        seen = set()
        suggestions = []
        for result in results:
            key = (result.name, result.country)
            if key in seen:
                continue
            seen.add(key)
            suggestions.append(
                Suggestion(
                    name=result.name,
                    country=result.country,
                    state=result.state,
                    lat=result.lat,
                    lon=result.lon,
                    displayName=format_display_name(
                        result.name, result.country, result.state
                    ),
                )
            )
        return suggestions
