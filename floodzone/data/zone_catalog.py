"""FEMA flood zone catalog: display name, risk tier, color and description by zone code.

Hardcoded from FEMA FIRM zone designations. Loaded once at import time and
read-only for the life of the process.
"""

from types import MappingProxyType

from floodzone.models.zone import RiskTier, ZoneDefinition

# Color for codes that are not in the catalog
FALLBACK_COLOR = "#888888"

# Presentation for "no hazard record at this location"
NO_DATA = ZoneDefinition(
    code="NONE",
    name="No Data",
    risk_tier=RiskTier.UNDETERMINED,
    color="#e0e0e0",
    description="No flood zone data available for this location.",
)

_DEFINITIONS = [
    # 1% annual chance floodplain (SFHA)
    ZoneDefinition("A", "High Risk (A)", RiskTier.HIGH, "#fdae61",
                   "1% annual chance flood hazard"),
    ZoneDefinition("AE", "High Risk (AE)", RiskTier.HIGH, "#d7191c",
                   "1% annual chance flood hazard with base flood elevation"),
    ZoneDefinition("AH", "High Risk (AH)", RiskTier.HIGH, "#f46d43",
                   "1% annual chance flood hazard, ponding 1-3 feet deep"),
    ZoneDefinition("AO", "High Risk (AO)", RiskTier.HIGH, "#fee08b",
                   "1% annual chance flood hazard, sheet flow 1-3 feet deep"),
    ZoneDefinition("AR", "High Risk (AR)", RiskTier.HIGH, "#f1b6da",
                   "1% annual chance flood hazard, temporarily increased by levee decertification"),
    ZoneDefinition("A99", "High Risk (A99)", RiskTier.HIGH, "#fddbc7",
                   "1% annual chance flood hazard, protected by a levee under construction"),
    # Coastal high hazard (SFHA)
    ZoneDefinition("V", "Coastal High Risk (V)", RiskTier.HIGH_COASTAL, "#abd9e9",
                   "1% annual chance flood hazard with wave action"),
    ZoneDefinition("VE", "Coastal High Risk (VE)", RiskTier.HIGH_COASTAL, "#2c7bb6",
                   "1% annual chance flood hazard with wave action and base flood elevation"),
    # 500-year floodplain
    ZoneDefinition("X500", "Moderate Risk (X500)", RiskTier.MODERATE, "#66bd63",
                   "0.2% annual chance flood hazard"),
    ZoneDefinition("B", "Moderate Risk (B)", RiskTier.MODERATE, "#66bd63",
                   "0.2% annual chance flood hazard (older FIRM designation)"),
    # Minimal
    ZoneDefinition("X", "Low Risk (X)", RiskTier.LOW, "#1a9641",
                   "Minimal flood hazard, outside the 0.2% annual chance floodplain"),
    ZoneDefinition("C", "Low Risk (C)", RiskTier.LOW, "#1a9641",
                   "Minimal flood hazard (older FIRM designation)"),
    # Undetermined
    ZoneDefinition("D", "Undetermined Risk (D)", RiskTier.UNDETERMINED, "#cccccc",
                   "Possible but undetermined flood hazard"),
]

ZONE_CATALOG: MappingProxyType = MappingProxyType({d.code: d for d in _DEFINITIONS})


def normalize_code(code: str) -> str:
    return code.strip().upper()


def lookup(code: str | None) -> ZoneDefinition | None:
    """Get the catalog definition for a zone code, or None if unrecognized."""
    if not isinstance(code, str):
        return None
    return ZONE_CATALOG.get(normalize_code(code))


def zone_colors() -> dict[str, str]:
    """Zone code → hex color, in catalog order (used for the map legend)."""
    return {code: d.color for code, d in ZONE_CATALOG.items()}


def legend_entries() -> list[ZoneDefinition]:
    return list(ZONE_CATALOG.values())
