"""Application Bootstrap - lifespan wiring, dependency lookup, shared HTTP client.

Tests cover:
    - Lifespan puts both upstream clients and the store on app.state
    - Both clients share one httpx client bounded by the configured timeout
    - The shared client is closed on shutdown
    - Route dependencies read the lifespan-built objects from app.state
"""

import logging

import pytest
from starlette.requests import Request

from city_recipes.api import dependencies
from city_recipes.config import Settings, get_settings
from city_recipes.core.recipe_store import RecipeStore
from city_recipes.infrastructure.city_client import CityClient
from city_recipes.infrastructure.upstream_http import build_upstream_client
from city_recipes.infrastructure.weather_client import WeatherClient
from city_recipes.main import app


@pytest.fixture(autouse=True)
def keep_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


async def test_lifespan_builds_clients_and_store():
    async with app.router.lifespan_context(app):
        city_client = app.state.city_client
        weather_client = app.state.weather_client
        assert isinstance(city_client, CityClient)
        assert isinstance(weather_client, WeatherClient)
        assert isinstance(app.state.recipe_store, RecipeStore)
        assert city_client.http is weather_client.http
        assert city_client.base_url == get_settings().city_api_base_url
        http = city_client.http
        assert http.timeout.read == get_settings().upstream_timeout_seconds
        assert not http.is_closed
    assert http.is_closed


async def test_dependencies_read_lifespan_objects():
    async with app.router.lifespan_context(app):
        request = Request({"type": "http", "app": app})
        cities = dependencies.get_city_client(request)
        weather = dependencies.get_weather_client(request)
        store = dependencies.get_recipe_store(request)
        assert cities is app.state.city_client
        assert weather is app.state.weather_client
        assert store is app.state.recipe_store

        handlers = dependencies.get_city_handlers(cities, weather, store)
        assert handlers.cities is cities
        assert handlers.weather is weather
        assert handlers.store is store


async def test_each_startup_gets_a_fresh_store():
    async with app.router.lifespan_context(app):
        app.state.recipe_store.create("paris", "Recipe kept until restart")
        first = app.state.recipe_store
        assert first.count() == 1
    async with app.router.lifespan_context(app):
        assert app.state.recipe_store is not first
        assert app.state.recipe_store.count() == 0


async def test_upstream_client_uses_configured_timeout():
    http = build_upstream_client(Settings(upstream_timeout_seconds=1.5))
    try:
        assert http.timeout.connect == 1.5
        assert http.timeout.read == 1.5
        assert http.headers["Accept"] == "application/json"
    finally:
        await http.aclose()
