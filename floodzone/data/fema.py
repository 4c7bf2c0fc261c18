"""FEMA National Flood Hazard Layer (NFHL) lookup.

Queries the FEMA NFHL MapServer for the flood hazard polygon at a lat/lng
coordinate. Free, no API key required.
"""

import logging

from floodzone.config import settings
from floodzone.data.upstream import fetch_json
from floodzone.models.errors import UpstreamError

logger = logging.getLogger(__name__)

SERVICE_NAME = "FEMA NFHL"

OUT_FIELDS = "FLD_ZONE,ZONE_SUBTY,SFHA_TF,DFIRM_ID"


class FEMANFHLClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.fema_nfhl_url
        self.timeout = timeout or settings.request_timeout

    async def query_point(self, lat: float, lng: float) -> dict:
        """Query NFHL layer 28 for the feature set intersecting a point."""
        params = {
            "geometry": f"{lng},{lat}",
            "geometryType": "esriGeometryPoint",
            "inSR": "4326",
            "spatialRel": "esriSpatialRelIntersects",
            "outFields": OUT_FIELDS,
            "returnGeometry": "false",
            "f": "json",
        }
        data = await fetch_json(SERVICE_NAME, self.base_url, params, timeout=self.timeout)

        # ArcGIS reports query failures as HTTP 200 with an error envelope
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict):
            code = error.get("code")
            status = code if isinstance(code, int) and 400 <= code < 600 else 502
            logger.warning("FEMA NFHL query error %s: %s", code, error.get("message"))
            raise UpstreamError(status, f"FEMA API error: {error.get('message') or 'query failed'}")

        return data
