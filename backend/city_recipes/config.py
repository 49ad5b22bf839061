"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - The upstream credential comes from the environment (API_KEY), never hardcoded
    - get_settings() is cached (lru_cache) - single instance per process
    - Every upstream call is bounded by upstream_timeout_seconds

Design Decisions:
    - Env var names are the field names, case-insensitive; .env is read when present
    - Every non-secret setting has a local default
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream APIs
    api_key: str = ""
    city_api_base_url: str = "https://api-ugi2pflmha-ew.a.run.app"
    weather_api_base_url: str = "https://api-ugi2pflmha-ew.a.run.app"
    upstream_timeout_seconds: float = 5.0

    @field_validator("city_api_base_url", "weather_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Listener
    host: str = "localhost"
    port: int = 3000
    render_external_url: str | None = None

    # API
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def listen_host(self) -> str:
        """Bind all interfaces when deployed on Render."""
        return "0.0.0.0" if self.render_external_url else self.host


@lru_cache
def get_settings() -> Settings:
    return Settings()
