"""City Recipes - create and delete recipe notes attached to a city.

Invariants:
    - City existence checked before the store is touched (404 wins over 400)
    - Missing body or missing content is treated as empty content → 400
    - DELETE answers 204 with an empty body
"""

from fastapi import APIRouter, Depends, Response, status

from city_recipes.api.dependencies import get_city_handlers
from city_recipes.schemas.recipe import RecipeCreate, RecipeResponse
from city_recipes.services.handle_cities import CityHandlers

router = APIRouter(prefix="/cities", tags=["recipes"])


@router.post(
    "/{city_id}/recipes", response_model=RecipeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_recipe(
    city_id: str,
    body: RecipeCreate | None = None,
    handlers: CityHandlers = Depends(get_city_handlers),
):
    """Attach a recipe to the city."""
    content = body.content if body else None
    return await handlers.create_recipe(city_id, content)


@router.delete(
    "/{city_id}/recipes/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_recipe(
    city_id: str,
    recipe_id: str,
    handlers: CityHandlers = Depends(get_city_handlers),
):
    """Remove one recipe from the city."""
    await handlers.delete_recipe(city_id, recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
