"""Flood zone routes: address and coordinate lookups, legend data, health."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from floodzone.api.deps import get_lookup_service
from floodzone.api.schemas import (
    AddressLookupRequest,
    ColorsResponse,
    CoordinateLookupRequest,
    CoordinatesResponse,
    ErrorResponse,
    FloodZoneData,
    FloodZoneResponse,
    HealthResponse,
    LegendEntry,
    LegendResponse,
)
from floodzone.config import settings
from floodzone.data import zone_catalog
from floodzone.data.lookup import LookupService
from floodzone.models.zone import LookupResult

router = APIRouter(prefix="/api/flood-zone", tags=["flood-zone"])

LOOKUP_ERRORS = {
    400: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


def _result_to_response(result: LookupResult) -> FloodZoneResponse:
    coords = result.coordinates
    return FloodZoneResponse(
        data=FloodZoneData(
            zone=result.zone_code,
            sfha=result.sfha,
            coordinates=CoordinatesResponse(lat=coords.lat, lng=coords.lng) if coords else None,
            source=result.source,
            risk_tier=result.risk_tier.value,
            color=result.color,
            name=result.name,
            description=result.description,
            details=result.details,
            message=result.message,
            raw=result.raw,
        )
    )


@router.post("/address", response_model=FloodZoneResponse, responses=LOOKUP_ERRORS)
async def lookup_address(
    req: AddressLookupRequest,
    service: LookupService = Depends(get_lookup_service),
):
    """Check flood zone by address (National Flood Data)."""
    result = await service.lookup_by_address(req.address)
    return _result_to_response(result)


@router.post("/coordinates", response_model=FloodZoneResponse, responses=LOOKUP_ERRORS)
async def lookup_coordinates(
    req: CoordinateLookupRequest,
    service: LookupService = Depends(get_lookup_service),
):
    """Check flood zone by coordinates (FEMA NFHL)."""
    result = await service.lookup_by_coordinates(req.lat, req.lng)
    return _result_to_response(result)


@router.get("/colors", response_model=ColorsResponse)
async def get_colors():
    """Zone code → color mapping for the map legend."""
    return ColorsResponse(data=zone_catalog.zone_colors())


@router.get("/legend", response_model=LegendResponse)
async def get_legend():
    return LegendResponse(
        data=[
            LegendEntry(
                code=d.code,
                name=d.name,
                risk_tier=d.risk_tier.value,
                color=d.color,
                description=d.description,
            )
            for d in zone_catalog.legend_entries()
        ]
    )


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        message="Flood Zone API is healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
    )
