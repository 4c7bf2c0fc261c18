"""Single-shot JSON GET against a hazard-data provider.

Converts httpx transport failures and non-2xx statuses into the lookup error
taxonomy so nothing above this layer sees raw httpx exceptions. No retry:
retry policy belongs to the caller.
"""

import logging

import httpx

from floodzone.models.errors import (
    MalformedResponseError,
    NetworkError,
    UpstreamError,
    UpstreamErrorKind,
    upstream_error_kind,
)

logger = logging.getLogger(__name__)


def _error_detail(resp: httpx.Response) -> str | None:
    try:
        body = resp.json()
    except ValueError:
        return resp.text.strip() or None
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or None
    return None


async def fetch_json(
    service: str,
    url: str,
    params: dict,
    headers: dict | None = None,
    timeout: float = 15.0,
) -> dict:
    """GET url and return the decoded JSON body."""
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url, params=params, headers=headers or {})
    except httpx.TimeoutException as e:
        logger.warning("%s request timed out: %s", service, e)
        raise NetworkError(f"{service} request timed out. Please try again later.") from e
    except httpx.RequestError as e:
        logger.warning("%s request failed: %s", service, e)
        raise NetworkError("Network error. Please check your internet connection.") from e

    if not resp.is_success:
        detail = _error_detail(resp)
        logger.warning("%s returned HTTP %s: %s", service, resp.status_code, detail)
        message = None
        if upstream_error_kind(resp.status_code) is UpstreamErrorKind.OTHER and isinstance(detail, str):
            message = f"{service} API error: {detail}"
        raise UpstreamError(resp.status_code, message)

    try:
        return resp.json()
    except ValueError as e:
        logger.warning("%s returned a non-JSON body", service)
        raise MalformedResponseError(f"{service} returned a non-JSON response") from e
