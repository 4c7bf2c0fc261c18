"""Zone classifier: zone code → risk tier, color, display name and description.

Pure and total. Unrecognized codes are never rejected; they classify as
UNKNOWN with the fallback color.
"""

from floodzone.data import zone_catalog
from floodzone.models.zone import (
    NOT_FOUND_ZONE,
    UNKNOWN_ZONE,
    RiskTier,
    ZoneClassification,
)

NO_DATA_CLASSIFICATION = ZoneClassification(
    risk_tier=zone_catalog.NO_DATA.risk_tier,
    color=zone_catalog.NO_DATA.color,
    name=zone_catalog.NO_DATA.name,
    description=zone_catalog.NO_DATA.description,
)


def classify(zone_code: str | None) -> ZoneClassification:
    """Classify a zone code.

    None (no hazard record) and the NOT_FOUND point-query sentinel both get
    the "no data" presentation with tier UNDETERMINED.
    """
    if zone_code is None or zone_catalog.normalize_code(zone_code) == NOT_FOUND_ZONE:
        return NO_DATA_CLASSIFICATION

    definition = zone_catalog.lookup(zone_code)
    if definition is None:
        return ZoneClassification(
            risk_tier=RiskTier.UNKNOWN,
            color=zone_catalog.FALLBACK_COLOR,
            name=zone_code.strip() or UNKNOWN_ZONE,
            description="Unknown flood zone type",
        )

    return ZoneClassification(
        risk_tier=definition.risk_tier,
        color=definition.color,
        name=definition.name,
        description=definition.description,
    )
