"""City API Client - resolves a city id (or name) to its insights.

Invariants:
    - 404, empty result set, or a record without an id → CityNotFoundError
    - Any other failure (status, transport, timeout, payload shape) → UpstreamError
    - No caching: every call hits the City API
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from city_recipes.core.errors import CityNotFoundError, UpstreamError
from city_recipes.infrastructure.upstream_http import (
    auth_headers, decode_json, ensure_success, send_get,
)
from city_recipes.schemas.city import CityInfo

logger = logging.getLogger(__name__)

_UPSTREAM = "city"


class CityClient:
    """Thin async client over GET {base}/cities/{id}/insights."""

    def __init__(self, http: httpx.AsyncClient, base_url: str, api_key: str):
        self.http = http
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    async def resolve_city(self, id_or_name: str | int) -> CityInfo:
        query = str(id_or_name).strip()
        if not query:
            raise CityNotFoundError(query)

        url = f"{self.base_url}/cities/{quote(query, safe='')}/insights"
        response = await send_get(
            self.http, url, upstream=_UPSTREAM,
            params={"apiKey": self.api_key},
            headers=auth_headers(self.api_key),
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info(
                f"City {query} not found upstream", extra={"city_id": query},
            )
            raise CityNotFoundError(query)
        ensure_success(response, _UPSTREAM)

        record = _pick_record(decode_json(response, _UPSTREAM), query)
        try:
            return CityInfo.model_validate(record)
        except ValidationError as e:
            logger.error(
                f"Malformed city payload for {query}: {e}",
                extra={"city_id": query, "upstream": _UPSTREAM},
            )
            raise UpstreamError("malformed city payload", _UPSTREAM)


def _pick_record(payload: object, query: str) -> dict:
    """Unwrap {"results": [...]} search payloads and check the id."""
    if isinstance(payload, dict) and "results" in payload:
        results = payload["results"]
        if not isinstance(results, list):
            raise UpstreamError("malformed results list", _UPSTREAM)
        if not results:
            raise CityNotFoundError(query)
        payload = results[0]

    if not isinstance(payload, dict):
        raise UpstreamError("city payload is not an object", _UPSTREAM)
    if payload.get("id") in (None, ""):
        raise CityNotFoundError(query)
    return payload
