"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - CityKey is the canonical string form of an upstream city identifier
    - RecipeId is a positive int assigned by the store, compared by value
    - Forecast days encoded as an Enum, ordered today → tomorrow

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CityKey = NewType("CityKey", str)
RecipeId = NewType("RecipeId", int)


def city_key(city_id: str | int) -> CityKey:
    """Canonical bucket key: 42, "42" and " 42 " all map to "42"."""
    return CityKey(str(city_id).strip())


def parse_recipe_id(raw: object) -> RecipeId | None:
    """Parse a boundary recipe id (int or numeric str). None when unparseable."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return RecipeId(raw)
    try:
        return RecipeId(int(str(raw).strip()))
    except ValueError:
        return None


# ─── Enums ───────────────────────────────────────────────────────

class ForecastDay(str, Enum):
    """The two forecast slots. Declaration order is response order."""
    TODAY = "today"
    TOMORROW = "tomorrow"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Recipe:
    """A recipe note owned by the store."""
    id: RecipeId
    content: str
