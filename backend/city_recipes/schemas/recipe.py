"""Recipe Schemas - POST body and recipe representation.

Invariants:
    - RecipeCreate.content is accepted as-is; type, presence and length rules live in
      core/enforce_recipe so they run after the city lookup
"""

from typing import Any

from pydantic import BaseModel


class RecipeCreate(BaseModel):
    """POST /cities/{cityId}/recipes body."""
    content: Any = None


class RecipeResponse(BaseModel):
    """Public recipe data."""
    id: int
    content: str
