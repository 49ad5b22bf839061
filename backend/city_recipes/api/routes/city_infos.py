"""City Infos - aggregated city insights and two-day forecast.

Invariants:
    - Unknown city → 404 {"error": "city not found"}
    - Any Weather API failure → 500 {"error": "server error"}, never a partial payload
    - Response is a flat camelCase object (see CityInfosResponse)
"""

from fastapi import APIRouter, Depends

from city_recipes.api.dependencies import get_city_handlers
from city_recipes.schemas.city import CityInfosResponse
from city_recipes.services.handle_cities import CityHandlers

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("/{city_id}/infos", response_model=CityInfosResponse)
async def get_city_infos(
    city_id: str, handlers: CityHandlers = Depends(get_city_handlers),
):
    """City identity, coordinates, population, knownFor, forecast and recipes."""
    return await handlers.get_infos(city_id)
