"""Upstream HTTP Plumbing - shared httpx client factory and error mapping.

Invariants:
    - Timeouts are always bounded (settings.upstream_timeout_seconds)
    - Transport failures and timeouts → UpstreamError, never raw httpx exceptions
    - Non-JSON bodies → UpstreamError
    - No retries: one attempt per upstream call
"""

import logging
from typing import Any

import httpx

from city_recipes.config import Settings
from city_recipes.core.errors import UpstreamError

logger = logging.getLogger(__name__)


def build_upstream_client(settings: Settings) -> httpx.AsyncClient:
    """Create the process-wide AsyncClient used by both upstream clients."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.upstream_timeout_seconds),
        headers={
            "Accept": "application/json",
            "Content-Type": "application/json",
        },
    )


def auth_headers(api_key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {api_key}"} if api_key else {}


async def send_get(
    http: httpx.AsyncClient,
    url: str,
    *,
    upstream: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """GET with transport errors mapped to UpstreamError."""
    try:
        return await http.get(url, params=params, headers=headers)
    except httpx.TimeoutException as e:
        logger.error(
            f"{upstream} API timeout: {e!r}", extra={"upstream": upstream},
        )
        raise UpstreamError("request timed out", upstream)
    except httpx.HTTPError as e:
        logger.error(
            f"{upstream} API transport error: {e!r}", extra={"upstream": upstream},
        )
        raise UpstreamError(f"transport failure: {e}", upstream)


def ensure_success(response: httpx.Response, upstream: str) -> None:
    """Map any non-2xx status to UpstreamError."""
    if response.is_success:
        return
    logger.error(
        f"{upstream} API returned {response.status_code}: {response.text[:300]}",
        extra={"upstream": upstream, "status_code": response.status_code},
    )
    raise UpstreamError(
        f"unexpected status {response.status_code} {response.reason_phrase}",
        upstream, status_code=response.status_code,
    )


def decode_json(response: httpx.Response, upstream: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        logger.error(
            f"{upstream} API returned invalid JSON: {e}",
            extra={"upstream": upstream, "status_code": response.status_code},
        )
        raise UpstreamError("invalid JSON body", upstream, status_code=response.status_code)
