"""City Recipes API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CityRecipesError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Upstream clients and RecipeStore created on startup via lifespan, stored on app.state
    - The shared httpx client is closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() binds 0.0.0.0 when RENDER_EXTERNAL_URL is set, else HOST (localhost)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from city_recipes.api.error_handlers import register_error_handlers
from city_recipes.api.routes import city_infos, city_recipes, health
from city_recipes.config import get_settings
from city_recipes.core.recipe_store import RecipeStore
from city_recipes.infrastructure.city_client import CityClient
from city_recipes.infrastructure.observability import setup_logging
from city_recipes.infrastructure.upstream_http import build_upstream_client
from city_recipes.infrastructure.weather_client import WeatherClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.api_key:
        logger.warning("API_KEY is not set; upstream calls will be unauthenticated")

    http = build_upstream_client(settings)
    app.state.city_client = CityClient(
        http, settings.city_api_base_url, settings.api_key,
    )
    app.state.weather_client = WeatherClient(
        http, settings.weather_api_base_url, settings.api_key,
    )
    app.state.recipe_store = RecipeStore()
    logger.info("City Recipes API started")
    try:
        yield
    finally:
        await http.aclose()
        logger.info(
            f"City Recipes API shutting down, "
            f"{app.state.recipe_store.count()} in-memory recipes discarded",
        )


app = FastAPI(
    title="City Recipes API", version="1.0.0", lifespan=lifespan,
    redirect_slashes=False,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(city_infos.router)
app.include_router(city_recipes.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        app, host=settings.listen_host, port=settings.port, log_config=None,
    )


if __name__ == "__main__":
    run()
