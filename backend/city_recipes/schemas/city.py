"""City & Forecast Schemas - upstream payload parsing and the /infos response contract.

Invariants:
    - CityInfo.coordinates is always a (latitude, longitude) pair or None
    - DayRange.min/max are real numbers (bools and numeric strings rejected)
    - CityInfosResponse.weather_predictions holds exactly today then tomorrow
    - Wire format is camelCase (knownFor, weatherPredictions)
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from city_recipes.core.domain_types import ForecastDay
from city_recipes.schemas.recipe import RecipeResponse


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Upstream: City API ------------------------------------------------------

class CityInfo(_CamelModel):
    """City insights as returned by the City API."""
    id: str | int
    name: str | None = None
    coordinates: tuple[float, float] | None = None
    population: int | None = None
    known_for: list[str] = Field(default_factory=list)

    @field_validator("coordinates", mode="before")
    @classmethod
    def coerce_coordinates(cls, v):
        """Accept [lat, lon] or {latitude, longitude} / {lat, lon|lng}."""
        if isinstance(v, dict):
            lat = v.get("latitude", v.get("lat"))
            lon = v.get("longitude", v.get("lon", v.get("lng")))
            return (lat, lon)
        return v

    @field_validator("known_for", mode="before")
    @classmethod
    def null_known_for(cls, v):
        return [] if v is None else v


# --- Upstream: Weather API ---------------------------------------------------

def _require_number(v):
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("expected a number")
    return v


class DayRange(BaseModel):
    """Min/max temperature for one forecast day."""
    min: float
    max: float

    @field_validator("min", "max", mode="before")
    @classmethod
    def must_be_number(cls, v):
        return _require_number(v)


class UpstreamForecast(BaseModel):
    """Weather API payload: {today: {min, max}, tomorrow: {min, max}}."""
    today: DayRange
    tomorrow: DayRange


class ForecastEntry(BaseModel):
    when: ForecastDay
    min: float
    max: float


WeatherForecast = Annotated[list[ForecastEntry], Field(min_length=2, max_length=2)]


def forecast_entries(payload: UpstreamForecast) -> list[ForecastEntry]:
    """Flatten the upstream shape into the fixed today → tomorrow pair."""
    return [
        ForecastEntry(when=ForecastDay.TODAY, min=payload.today.min, max=payload.today.max),
        ForecastEntry(
            when=ForecastDay.TOMORROW, min=payload.tomorrow.min, max=payload.tomorrow.max,
        ),
    ]


# --- API response ------------------------------------------------------------

class CityInfosResponse(_CamelModel):
    """GET /cities/{cityId}/infos - flat object, city fields + forecast + recipes."""
    id: str | int
    name: str | None = None
    coordinates: tuple[float, float] | None = None
    population: int | None = None
    known_for: list[str] = Field(default_factory=list)
    weather_predictions: WeatherForecast
    recipes: list[RecipeResponse] = Field(default_factory=list)
