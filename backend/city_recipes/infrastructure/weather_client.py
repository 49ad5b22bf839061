"""Weather API Client - two-day min/max forecast for a city.

Invariants:
    - Returns exactly two entries, today then tomorrow, or raises
    - Non-success status, transport failure, timeout, or a missing/non-numeric
      range → UpstreamError (no partial results)
"""

import logging

import httpx
from pydantic import ValidationError

from city_recipes.core.errors import UpstreamError
from city_recipes.infrastructure.upstream_http import (
    auth_headers, decode_json, ensure_success, send_get,
)
from city_recipes.schemas.city import ForecastEntry, UpstreamForecast, forecast_entries

logger = logging.getLogger(__name__)

_UPSTREAM = "weather"


class WeatherClient:
    """Thin async client over GET {base}/weather-predictions."""

    def __init__(self, http: httpx.AsyncClient, base_url: str, api_key: str):
        self.http = http
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    async def get_forecast(self, city_id: str | int) -> list[ForecastEntry]:
        response = await send_get(
            self.http, f"{self.base_url}/weather-predictions", upstream=_UPSTREAM,
            params={"cityId": str(city_id), "apiKey": self.api_key},
            headers=auth_headers(self.api_key),
        )
        ensure_success(response, _UPSTREAM)
        payload = decode_json(response, _UPSTREAM)

        # single-element list envelope seen on some deployments
        if isinstance(payload, list) and len(payload) == 1:
            payload = payload[0]

        try:
            parsed = UpstreamForecast.model_validate(payload)
        except ValidationError as e:
            logger.error(
                f"Malformed forecast for city {city_id}: {e}",
                extra={"city_id": str(city_id), "upstream": _UPSTREAM},
            )
            raise UpstreamError("malformed forecast payload", _UPSTREAM)
        return forecast_entries(parsed)
