"""API test fixtures - FastAPI test client wired to fake upstreams and a fresh store.

Invariants:
    - Every test gets a fresh RecipeStore
    - Upstream clients replaced through app.dependency_overrides (no network)
    - FakeCityClient / FakeWeatherClient record every call for ordering assertions

Design Decisions:
    - Fakes over MockTransport here: route tests exercise HTTP mapping, not wire parsing
"""

import pytest
from httpx import ASGITransport, AsyncClient

from city_recipes.api.dependencies import (
    get_city_client, get_recipe_store, get_weather_client,
)
from city_recipes.core.domain_types import ForecastDay
from city_recipes.core.errors import CityNotFoundError, UpstreamError
from city_recipes.core.recipe_store import RecipeStore
from city_recipes.main import app
from city_recipes.schemas.city import CityInfo, ForecastEntry


class FakeCityClient:
    """In-memory City API keyed by id."""

    def __init__(self, cities: dict[str, CityInfo], calls: list):
        self.cities = cities
        self.calls = calls
        self.fail_with: Exception | None = None

    async def resolve_city(self, id_or_name):
        self.calls.append(("city", str(id_or_name)))
        if self.fail_with:
            raise self.fail_with
        city = self.cities.get(str(id_or_name))
        if city is None:
            raise CityNotFoundError(str(id_or_name))
        return city


class FakeWeatherClient:
    def __init__(self, calls: list):
        self.calls = calls
        self.fail_with: Exception | None = None

    async def get_forecast(self, city_id):
        self.calls.append(("weather", str(city_id)))
        if self.fail_with:
            raise self.fail_with
        return [
            ForecastEntry(when=ForecastDay.TODAY, min=4, max=12),
            ForecastEntry(when=ForecastDay.TOMORROW, min=6, max=15),
        ]


@pytest.fixture
def upstream_calls():
    return []


@pytest.fixture
def city_client(upstream_calls):
    return FakeCityClient(
        {
            "paris": CityInfo(
                id="paris", name="Paris", coordinates=(48.85, 2.35),
                population=2_100_000, known_for=["Eiffel Tower", "Louvre"],
            ),
            "lyon": CityInfo(
                id="lyon", name="Lyon", coordinates=(45.76, 4.83),
                population=520_000, known_for=["Bouchons"],
            ),
        },
        upstream_calls,
    )


@pytest.fixture
def weather_client(upstream_calls):
    return FakeWeatherClient(upstream_calls)


@pytest.fixture
def recipe_store():
    return RecipeStore()


@pytest.fixture
async def client(city_client, weather_client, recipe_store):
    """FastAPI test client with upstreams and store overridden."""
    app.dependency_overrides[get_city_client] = lambda: city_client
    app.dependency_overrides[get_weather_client] = lambda: weather_client
    app.dependency_overrides[get_recipe_store] = lambda: recipe_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def upstream_failure():
    return UpstreamError("unexpected status 502 Bad Gateway", "weather", status_code=502)
