"""Flood zone data types."""

from dataclasses import dataclass, field
from enum import Enum


class RiskTier(Enum):
    HIGH = "HIGH"  # 1% annual chance (A zones)
    HIGH_COASTAL = "HIGH_COASTAL"  # 1% annual chance with wave action (V zones)
    MODERATE = "MODERATE"  # 0.2% annual chance
    LOW = "LOW"  # Minimal hazard
    UNDETERMINED = "UNDETERMINED"  # No data / possible but undetermined hazard
    UNKNOWN = "UNKNOWN"  # Code not in the catalog


# Sentinel zone codes
UNKNOWN_ZONE = "UNKNOWN"
NOT_FOUND_ZONE = "NOT_FOUND"


@dataclass(frozen=True)
class ZoneDefinition:
    code: str
    name: str
    risk_tier: RiskTier
    color: str  # hex
    description: str


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float

    def as_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class ZoneRecord:
    """Normalized upstream response, before classification.

    zone_code is None when the upstream hazard array is empty (no hazard zone
    intersects the location).
    """
    zone_code: str | None
    sfha: bool = False
    coordinates: Coordinates | None = None
    details: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ZoneClassification:
    risk_tier: RiskTier
    color: str
    name: str
    description: str


@dataclass(frozen=True)
class LookupResult:
    zone_code: str
    sfha: bool
    risk_tier: RiskTier
    color: str
    name: str
    description: str
    coordinates: Coordinates | None
    source: str
    raw: dict = field(default_factory=dict)
    details: dict = field(default_factory=dict)
    message: str | None = None
