"""Route Dependencies - hand out the app-scoped clients and store.

Invariants:
    - Clients and store are created once by the lifespan and live on app.state
    - Tests replace any of these via app.dependency_overrides
"""

from fastapi import Depends, Request

from city_recipes.core.recipe_store import RecipeStore
from city_recipes.infrastructure.city_client import CityClient
from city_recipes.infrastructure.weather_client import WeatherClient
from city_recipes.services.handle_cities import CityHandlers


def get_city_client(request: Request) -> CityClient:
    return request.app.state.city_client


def get_weather_client(request: Request) -> WeatherClient:
    return request.app.state.weather_client


def get_recipe_store(request: Request) -> RecipeStore:
    return request.app.state.recipe_store


def get_city_handlers(
    cities: CityClient = Depends(get_city_client),
    weather: WeatherClient = Depends(get_weather_client),
    store: RecipeStore = Depends(get_recipe_store),
) -> CityHandlers:
    return CityHandlers(cities, weather, store)
