"""Pydantic schemas for API request/response models."""

from typing import Any

from pydantic import BaseModel, Field


# ---- Request schemas ----

class AddressLookupRequest(BaseModel):
    address: str | None = Field(None, description="Full US address string")


class CoordinateLookupRequest(BaseModel):
    # Validated by the lookup service so every bad value gets the same 400 envelope
    lat: Any = Field(None, description="Latitude in decimal degrees")
    lng: Any = Field(None, description="Longitude in decimal degrees")


# ---- Response schemas ----

class CoordinatesResponse(BaseModel):
    lat: float
    lng: float


class FloodZoneData(BaseModel):
    zone: str
    sfha: bool
    coordinates: CoordinatesResponse | None = None
    source: str
    risk_tier: str
    color: str
    name: str
    description: str
    details: dict = Field(default_factory=dict)
    message: str | None = None
    raw: dict = Field(default_factory=dict)


class FloodZoneResponse(BaseModel):
    success: bool = True
    data: FloodZoneData


class ColorsResponse(BaseModel):
    success: bool = True
    data: dict[str, str]


class LegendEntry(BaseModel):
    code: str
    name: str
    risk_tier: str
    color: str
    description: str


class LegendResponse(BaseModel):
    success: bool = True
    data: list[LegendEntry]


class HealthResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: str
    version: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
