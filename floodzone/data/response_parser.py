"""Normalize raw hazard-data payloads into a ZoneRecord.

Two upstream shapes are supported:

- National Flood Data address/parcel lookups:
  ``{"result": {"flood.s_fld_haz_ar": [{...}, ...]}, "coords": {"lat", "lng"}}``
- FEMA NFHL point queries (ArcGIS feature set):
  ``{"features": [{"attributes": {"FLD_ZONE", "SFHA_TF", ...}}]}``

A missing top-level key is malformed; a present but empty result is a valid
"no data" answer.
"""

import logging
import math

from floodzone.models.errors import MalformedResponseError
from floodzone.models.zone import Coordinates, NOT_FOUND_ZONE, UNKNOWN_ZONE, ZoneRecord

logger = logging.getLogger(__name__)

HAZARD_AREA_KEY = "flood.s_fld_haz_ar"


def _parse_coordinates(raw) -> Coordinates | None:
    if not isinstance(raw, dict):
        return None
    try:
        lat = float(raw["lat"])
        lng = float(raw["lng"])
    except (KeyError, TypeError, ValueError):
        return None
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return None
    return Coordinates(lat=lat, lng=lng)


def _zone_code(value) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return UNKNOWN_ZONE


def parse_address_response(payload) -> ZoneRecord:
    """Parse a National Flood Data address/parcel response.

    The first hazard record wins; upstream ordering is authoritative.
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("Response payload is not a JSON object")
    if "result" not in payload:
        raise MalformedResponseError("Response is missing the 'result' field")

    result = payload["result"]
    if result is None:
        result = {}
    if not isinstance(result, dict):
        raise MalformedResponseError("Response 'result' field is not an object")

    raw_coords = payload.get("coords") or payload.get("geocode")
    coordinates = _parse_coordinates(raw_coords)

    hazard_areas = result.get(HAZARD_AREA_KEY)
    if hazard_areas is None:
        hazard_areas = []
    if not isinstance(hazard_areas, list):
        raise MalformedResponseError(f"Response '{HAZARD_AREA_KEY}' field is not a list")

    if not hazard_areas:
        logger.debug("No hazard area intersects the parcel")
        return ZoneRecord(zone_code=None, sfha=False, coordinates=coordinates)

    first = hazard_areas[0]
    if not isinstance(first, dict):
        raise MalformedResponseError("Hazard area record is not an object")

    details = {}
    if first.get("zone_subty"):
        details["zone_subtype"] = first["zone_subty"]
    if first.get("fld_ar_id"):
        details["fld_ar_id"] = first["fld_ar_id"]

    return ZoneRecord(
        zone_code=_zone_code(first.get("fld_zone")),
        sfha=first.get("sfha_tf") == "T",
        coordinates=coordinates,
        details=details,
    )


def parse_point_response(payload) -> ZoneRecord:
    """Parse a FEMA NFHL point query response.

    No feature at the point is the NOT_FOUND sentinel, not an error: a point
    outside any mapped hazard area legitimately returns no polygon.
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("Response payload is not a JSON object")
    if "features" not in payload:
        raise MalformedResponseError("Response is missing the 'features' field")

    features = payload["features"]
    if features is None:
        features = []
    if not isinstance(features, list):
        raise MalformedResponseError("Response 'features' field is not a list")

    attributes = None
    if features:
        first = features[0]
        if not isinstance(first, dict):
            raise MalformedResponseError("Feature record is not an object")
        attributes = first.get("attributes")

    if not attributes:
        return ZoneRecord(zone_code=NOT_FOUND_ZONE, sfha=False)
    if not isinstance(attributes, dict):
        raise MalformedResponseError("Feature 'attributes' field is not an object")

    return ZoneRecord(
        zone_code=_zone_code(attributes.get("FLD_ZONE")),
        sfha=attributes.get("SFHA_TF") == "T",
        details={
            "zone_subtype": attributes.get("ZONE_SUBTY"),
            "dfirm_id": attributes.get("DFIRM_ID"),
        },
    )
