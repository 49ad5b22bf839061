"""Error Handlers - global exception handlers for the City Recipes API.

Invariants:
    - CityRecipesError → {"error": <public message>} with the error's http_status
    - RequestValidationError → 400 {"error": "invalid request body"}
    - Framework HTTPException (unknown path, wrong method) → its status with
      {"error": <lowercase status phrase>}
    - Exception (catch-all) → 500 {"error": "server error"}, never leaks internals

Design Decisions:
    - Layered handlers: domain (CityRecipesError), validation (Pydantic), routing, catch-all
    - Status chosen from the exception type, never from message text
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from city_recipes.core.errors import CityRecipesError, ErrorSeverity

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register City Recipes domain/infrastructure error handler."""

    @app.exception_handler(CityRecipesError)
    async def city_recipes_error_handler(request: Request, exc: CityRecipesError):
        """Handle all City Recipes domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.INFO
        )
        logger.log(
            level,
            f"CityRecipesError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "invalid request body"},
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing errors raised by Starlette/FastAPI."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown paths and wrong methods keep the {"error": ...} envelope."""
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={
                "path": request.url.path, "method": request.method,
                "status_code": exc.status_code,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": _status_phrase(exc.status_code)},
            headers=exc.headers,
        )


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase.lower()
    except ValueError:
        return "request failed"


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SERVER_ERROR_MESSAGE},
        )
