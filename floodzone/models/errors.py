"""Lookup error taxonomy.

Everything the lookup path raises is a FloodLookupError subclass; raw httpx
exceptions are converted at the upstream client boundary.
"""

from enum import Enum


class FloodLookupError(Exception):
    """Base class for lookup failures."""


class ValidationError(FloodLookupError):
    """Bad or missing input. Raised before any network call."""


class ConfigurationError(FloodLookupError):
    """Service is missing required configuration (e.g. an API key)."""


class MalformedResponseError(FloodLookupError):
    """Upstream payload violates the expected structural contract."""


class NetworkError(FloodLookupError):
    """Transport-level failure: connectivity, DNS, timeout."""


class UpstreamErrorKind(Enum):
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    SERVICE_UNAVAILABLE = "service_unavailable"
    OTHER = "other"


_KIND_MESSAGES = {
    UpstreamErrorKind.AUTHENTICATION: "API authentication failed. Please check the API key.",
    UpstreamErrorKind.RATE_LIMIT: "Rate limit exceeded. Please try again later.",
    UpstreamErrorKind.SERVICE_UNAVAILABLE: "Service temporarily unavailable. Please try again later.",
}


def upstream_error_kind(status_code: int) -> UpstreamErrorKind:
    if status_code == 401:
        return UpstreamErrorKind.AUTHENTICATION
    if status_code == 429:
        return UpstreamErrorKind.RATE_LIMIT
    if status_code >= 500:
        return UpstreamErrorKind.SERVICE_UNAVAILABLE
    return UpstreamErrorKind.OTHER


class UpstreamError(FloodLookupError):
    """Non-2xx response from the hazard-data provider.

    The kind is informational only; callers handle every kind the same way.
    """

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        self.kind = upstream_error_kind(status_code)
        self.message = message or _KIND_MESSAGES.get(
            self.kind, f"API request failed with status {status_code}"
        )
        super().__init__(self.message)

    @property
    def is_rate_limited(self) -> bool:
        return self.kind is UpstreamErrorKind.RATE_LIMIT
