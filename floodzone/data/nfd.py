"""National Flood Data API client for address/parcel flood zone lookups."""

import logging

from floodzone.config import settings
from floodzone.data.upstream import fetch_json
from floodzone.models.errors import ConfigurationError

logger = logging.getLogger(__name__)

SERVICE_NAME = "National Flood Data"


def sanitize_address(address: str) -> str:
    """Strip periods and commas; the upstream geocoder is sensitive to punctuation."""
    return address.replace(".", "").replace(",", "").strip()


class NationalFloodDataClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        search_type: str | None = None,
        timeout: float | None = None,
    ):
        self.api_key = api_key or settings.nfd_api_key
        self.base_url = base_url or settings.nfd_data_url
        self.search_type = search_type or settings.nfd_search_type
        self.timeout = timeout or settings.request_timeout
        self.headers = {"X-API-KEY": self.api_key, "Accept": "application/json"}

    async def get_flood_data(self, address: str) -> dict:
        """Fetch the raw flood data payload for an already-sanitized address."""
        if not self.api_key:
            raise ConfigurationError("National Flood Data API key is not configured")

        params = {"searchtype": self.search_type, "address": address}
        logger.debug("NFD %s lookup: %s", self.search_type, address)
        return await fetch_json(
            SERVICE_NAME, self.base_url, params, headers=self.headers, timeout=self.timeout
        )
