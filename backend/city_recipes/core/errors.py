"""Error Hierarchy - typed, categorized exceptions for every failure the API maps to HTTP.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404) are recoverable; upstream errors (500) are critical
    - to_response() produces the client envelope {"error": <message>}
    - No internal details leaked in user-facing messages (context.user_message wins)

Design Decisions:
    - Handlers branch on exception type, never on message text
    - ErrorContext carries ids for logs only; never serialized to clients
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    city_id: str | None = None
    recipe_id: str | None = None
    upstream: str | None = None
    status_code: int | None = None
    user_message: str | None = None


class CityRecipesError(Exception):
    """Base exception for all City Recipes errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        return self.context.user_message or self.message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.public_message}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "city_id": self.context.city_id,
            "recipe_id": self.context.recipe_id,
            "upstream": self.context.upstream,
            "status_code": self.context.status_code,
        }


# ─── Domain Errors (400/404) ─────────────────────────────────────

class CityNotFoundError(CityRecipesError):
    """City API has no city for the given identifier or name."""
    def __init__(self, city: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.city_id = ctx.city_id or city
        super().__init__(
            "city not found", "CITY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class RecipeNotFoundError(CityRecipesError):
    """No recipe with that identifier in the city's bucket."""
    def __init__(
        self, city_id: str, recipe_id: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.city_id = city_id
        ctx.recipe_id = str(recipe_id)
        super().__init__(
            "recipe not found", "RECIPE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.recipe_id = recipe_id


class RecipeValidationError(CityRecipesError):
    """Recipe content violates a length or presence constraint."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500) ─────────────────────────────────

class UpstreamError(CityRecipesError):
    """Upstream API call failed or returned an unusable payload."""
    def __init__(
        self,
        message: str,
        upstream: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream = upstream
        ctx.status_code = status_code
        ctx.user_message = ctx.user_message or "server error"
        super().__init__(
            f"{upstream} API error: {message}",
            "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
