"""
Models for the raw OpenWeatherMap payloads and for inbound location queries.

Upstream models only declare the fields the proxy reads; everything else in the
provider's response is ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from weather_proxy.definitions.data_sources import Number
from weather_proxy.exceptions import MissingLocation


class LocationQuery(BaseModel):
    """Either a city name or a lat/lon pair. City wins when both are given."""

    city: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None

    @classmethod
    def from_params(
        cls,
        city: Optional[str] = None,
        lat: Optional[float] = None,
        lon: Optional[float] = None,
    ) -> "LocationQuery":
        city = city.strip() if city else None
        if city:
            return cls(city=city)
        if lat is not None and lon is not None:
            return cls(lat=lat, lon=lon)
        raise MissingLocation()

    @property
    def is_complete(self) -> bool:
        return bool(self.city) or (self.lat is not None and self.lon is not None)

    @property
    def is_city(self) -> bool:
        return bool(self.city)

    def to_params(self) -> dict:
        if self.is_city:
            return {"q": self.city}
        return {"lat": self.lat, "lon": self.lon}

    def describe(self) -> str:
        return self.city if self.is_city else f"{self.lat},{self.lon}"


class UpstreamModel(BaseModel):
    """Base for provider payloads. NaN and infinity are rejected as malformed."""

    model_config = ConfigDict(allow_inf_nan=False)


class UpstreamCondition(UpstreamModel):
    description: str
    icon: str


class UpstreamCoord(UpstreamModel):
    lat: float
    lon: float


class UpstreamMain(UpstreamModel):
    temp: float
    feels_like: Optional[float] = None
    humidity: Optional[Number] = None
    pressure: Optional[Number] = None


class UpstreamWind(UpstreamModel):
    speed: Optional[Number] = None
    deg: Optional[Number] = None


class UpstreamSys(UpstreamModel):
    country: Optional[str] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class UpstreamCurrentWeather(UpstreamModel):
    """Subset of the ``/data/2.5/weather`` response."""

    name: str
    coord: UpstreamCoord
    main: UpstreamMain
    weather: List[UpstreamCondition] = Field(..., min_length=1)
    wind: UpstreamWind = Field(default_factory=UpstreamWind)
    sys: UpstreamSys = Field(default_factory=UpstreamSys)
    visibility: Optional[Number] = None
    timezone: Optional[int] = None


class UpstreamForecastItem(UpstreamModel):
    dt_txt: str
    main: UpstreamMain
    weather: List[UpstreamCondition] = Field(..., min_length=1)
    wind: UpstreamWind = Field(default_factory=UpstreamWind)


class UpstreamForecastCity(UpstreamModel):
    name: str
    country: Optional[str] = None


class UpstreamForecast(UpstreamModel):
    """Subset of the ``/data/2.5/forecast`` response."""

    city: UpstreamForecastCity
    list: List[UpstreamForecastItem]


class UpstreamGeocodeResult(UpstreamModel):
    """One entry of the ``/geo/1.0`` direct or reverse responses."""

    name: str
    country: str
    state: Optional[str] = None
    lat: float
    lon: float
