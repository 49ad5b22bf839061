"""Recipe Store - in-memory recipe buckets keyed by city, with a process-wide id counter.

Invariants:
    - Every recipe lives in exactly one city bucket
    - Ids start at 1, strictly increase, never reused (even after deletes)
    - Empty buckets are dropped: empty and absent are indistinguishable
    - All reads/mutations hold a single store-wide lock

Design Decisions:
    - Owned instance created at startup and injected into routes (no module-level dict)
    - threading.Lock: critical sections never await, so sync callers and worker
      threads share the same lock as request handlers
"""

import logging
import threading

from city_recipes.core.domain_types import (
    CityKey, Recipe, RecipeId, city_key, parse_recipe_id,
)
from city_recipes.core.enforce_recipe import normalize_recipe_content
from city_recipes.core.errors import RecipeNotFoundError

logger = logging.getLogger(__name__)


class RecipeStore:
    """City → ordered recipe list, lost on restart."""

    def __init__(self) -> None:
        self._buckets: dict[CityKey, list[Recipe]] = {}
        self._next_id: int = 1
        self._lock = threading.Lock()

    def create(self, city_id: str | int, content: object) -> Recipe:
        """Validate, trim and append a recipe to the city's bucket."""
        trimmed = normalize_recipe_content(content)
        key = city_key(city_id)
        with self._lock:
            recipe = Recipe(id=RecipeId(self._next_id), content=trimmed)
            self._next_id += 1
            self._buckets.setdefault(key, []).append(recipe)
        logger.info(
            f"Recipe {recipe.id} created for city {key}",
            extra={"city_id": key, "recipe_id": recipe.id},
        )
        return recipe

    def delete(self, city_id: str | int, recipe_id: object) -> None:
        """Remove exactly one recipe by id. Raises RecipeNotFoundError."""
        key = city_key(city_id)
        wanted = parse_recipe_id(recipe_id)
        with self._lock:
            bucket = self._buckets.get(key)
            index = _find_index(bucket, wanted) if bucket else None
            if index is None:
                raise RecipeNotFoundError(key, recipe_id)
            del bucket[index]
            if not bucket:
                del self._buckets[key]
        logger.info(
            f"Recipe {wanted} deleted from city {key}",
            extra={"city_id": key, "recipe_id": wanted},
        )

    def list_recipes(self, city_id: str | int) -> list[Recipe]:
        """Snapshot of the city's recipes in creation order."""
        with self._lock:
            return list(self._buckets.get(city_key(city_id), ()))

    def count(self) -> int:
        """Total recipes across all cities."""
        with self._lock:
            return sum(len(b) for b in self._buckets.values())


def _find_index(bucket: list[Recipe], wanted: RecipeId | None) -> int | None:
    if wanted is None:
        return None
    for i, recipe in enumerate(bucket):
        if recipe.id == wanted:
            return i
    return None
