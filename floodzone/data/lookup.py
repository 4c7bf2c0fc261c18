"""Flood zone lookup service: orchestrates validation, upstream fetch, parsing and classification.

Flow: raw input → validate → one upstream request → parse → classify → LookupResult

Address lookups go to National Flood Data; coordinate lookups go straight to
FEMA NFHL. Each call makes exactly one upstream request and shares no mutable
state with other calls, so lookups may run concurrently.
"""

import logging
import math
import re

from floodzone.data.fema import FEMANFHLClient
from floodzone.data.nfd import NationalFloodDataClient, sanitize_address
from floodzone.data.response_parser import parse_address_response, parse_point_response
from floodzone.engine.classifier import classify
from floodzone.models.errors import ValidationError
from floodzone.models.zone import (
    NOT_FOUND_ZONE,
    UNKNOWN_ZONE,
    Coordinates,
    LookupResult,
    ZoneRecord,
)

logger = logging.getLogger(__name__)

NFD_SOURCE = "National Flood Data"
FEMA_SOURCE = "FEMA NFHL"

MIN_ADDRESS_LENGTH = 5
_DIGIT = re.compile(r"\d")

NO_HAZARD_MESSAGE = "No flood hazard zone intersects this location"
NOT_FOUND_MESSAGE = "No flood polygon found at this location"


def validate_address(address) -> str:
    """Return the trimmed address, or raise ValidationError.

    Requires at least 5 characters and one digit (a street number).
    """
    if not isinstance(address, str) or not address.strip():
        raise ValidationError("Address is required")
    trimmed = address.strip()
    if len(trimmed) < MIN_ADDRESS_LENGTH or not _DIGIT.search(trimmed):
        raise ValidationError(
            "Please enter a valid address with at least a street number and name."
        )
    return trimmed


def _validate_degrees(value, name: str, limit: float) -> float:
    if value is None:
        raise ValidationError("Latitude and longitude are required")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number")
    try:
        value = float(value)
    except OverflowError:
        raise ValidationError(f"{name} must be a finite number") from None
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number")
    if not -limit <= value <= limit:
        raise ValidationError(f"{name} must be between -{limit:g} and {limit:g}")
    return value


def validate_coordinates(lat, lng) -> Coordinates:
    return Coordinates(
        lat=_validate_degrees(lat, "Latitude", 90.0),
        lng=_validate_degrees(lng, "Longitude", 180.0),
    )


def build_result(
    record: ZoneRecord,
    source: str,
    raw: dict,
    coordinates: Coordinates | None = None,
) -> LookupResult:
    """Classify a parsed record and assemble the final LookupResult."""
    classification = classify(record.zone_code)

    message = None
    if record.zone_code is None:
        message = NO_HAZARD_MESSAGE
    elif record.zone_code == NOT_FOUND_ZONE:
        message = NOT_FOUND_MESSAGE

    return LookupResult(
        zone_code=record.zone_code or UNKNOWN_ZONE,
        sfha=record.sfha,
        risk_tier=classification.risk_tier,
        color=classification.color,
        name=classification.name,
        description=classification.description,
        coordinates=coordinates or record.coordinates,
        source=source,
        raw=raw,
        details=dict(record.details),
        message=message,
    )


class LookupService:
    def __init__(
        self,
        nfd_client: NationalFloodDataClient | None = None,
        fema_client: FEMANFHLClient | None = None,
    ):
        self.nfd = nfd_client or NationalFloodDataClient()
        self.fema = fema_client or FEMANFHLClient()

    async def lookup_by_address(self, address: str) -> LookupResult:
        """Resolve a free-text address to a flood zone classification."""
        trimmed = validate_address(address)
        sanitized = sanitize_address(trimmed)

        payload = await self.nfd.get_flood_data(sanitized)
        record = parse_address_response(payload)
        result = build_result(record, NFD_SOURCE, payload)

        logger.info("Address lookup: %s → zone %s (%s)", sanitized, result.zone_code, result.risk_tier.value)
        return result

    async def lookup_by_coordinates(self, lat: float, lng: float) -> LookupResult:
        """Resolve a lat/lng point to a flood zone classification."""
        point = validate_coordinates(lat, lng)

        payload = await self.fema.query_point(point.lat, point.lng)
        record = parse_point_response(payload)
        result = build_result(record, FEMA_SOURCE, payload, coordinates=point)

        logger.info(
            "Coordinate lookup: %.6f,%.6f → zone %s (%s)",
            point.lat, point.lng, result.zone_code, result.risk_tier.value,
        )
        return result
