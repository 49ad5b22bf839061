"""Recipe Content Enforcement - presence and length rules for recipe notes.

Invariants:
    - Content is trimmed before any length check; the trimmed value is what gets stored
    - RECIPE_MIN_LENGTH / RECIPE_MAX_LENGTH are the single source of truth for bounds
    - Raises RecipeValidationError with a message naming the violated rule
"""

from city_recipes.core.errors import RecipeValidationError


RECIPE_MIN_LENGTH: int = 10
RECIPE_MAX_LENGTH: int = 2000


def normalize_recipe_content(content: object) -> str:
    """Return trimmed content or raise RecipeValidationError."""
    if content is None:
        raise RecipeValidationError("content is required")
    if not isinstance(content, str):
        raise RecipeValidationError("content must be a string")

    trimmed = content.strip()
    if not trimmed:
        raise RecipeValidationError("content is required")
    if len(trimmed) < RECIPE_MIN_LENGTH:
        raise RecipeValidationError(
            f"content must be at least {RECIPE_MIN_LENGTH} characters "
            f"(got {len(trimmed)})",
        )
    if len(trimmed) > RECIPE_MAX_LENGTH:
        raise RecipeValidationError(
            f"content must be at most {RECIPE_MAX_LENGTH} characters "
            f"(got {len(trimmed)})",
        )
    return trimmed
