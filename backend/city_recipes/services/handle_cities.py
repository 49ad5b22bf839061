"""City Handlers - get_infos, create_recipe, delete_recipe.

Invariants:
    - Every operation resolves the city first; CityNotFoundError short-circuits
    - get_infos calls the Weather API with the resolved city id, never partial output
    - Recipes are bucketed under the resolved city id, not the raw path value

Design Decisions:
    - Clients typed by Protocol: routes inject real clients, tests inject fakes
"""

import logging
from typing import Protocol

from city_recipes.core.domain_types import Recipe
from city_recipes.core.recipe_store import RecipeStore
from city_recipes.schemas.city import CityInfo, CityInfosResponse, ForecastEntry
from city_recipes.schemas.recipe import RecipeResponse

logger = logging.getLogger(__name__)


class CityLookup(Protocol):
    async def resolve_city(self, id_or_name: str | int) -> CityInfo: ...


class ForecastSource(Protocol):
    async def get_forecast(self, city_id: str | int) -> list[ForecastEntry]: ...


class CityHandlers:
    """Compose City API, Weather API and RecipeStore per request."""

    def __init__(
        self, cities: CityLookup, weather: ForecastSource, store: RecipeStore,
    ):
        self.cities = cities
        self.weather = weather
        self.store = store

    async def get_infos(self, city_id: str) -> CityInfosResponse:
        """City insights + two-day forecast + the city's recipes."""
        city = await self.cities.resolve_city(city_id)
        forecast = await self.weather.get_forecast(city.id)
        recipes = self.store.list_recipes(city.id)
        logger.info(
            f"Infos assembled for city {city.id} ({len(recipes)} recipes)",
            extra={"city_id": str(city.id)},
        )
        return CityInfosResponse(
            id=city.id,
            name=city.name,
            coordinates=city.coordinates,
            population=city.population,
            known_for=city.known_for,
            weather_predictions=forecast,
            recipes=[_to_response(r) for r in recipes],
        )

    async def create_recipe(self, city_id: str, content: object) -> RecipeResponse:
        city = await self.cities.resolve_city(city_id)
        recipe = self.store.create(city.id, content)
        return _to_response(recipe)

    async def delete_recipe(self, city_id: str, recipe_id: str) -> None:
        city = await self.cities.resolve_city(city_id)
        self.store.delete(city.id, recipe_id)


def _to_response(recipe: Recipe) -> RecipeResponse:
    return RecipeResponse(id=recipe.id, content=recipe.content)
