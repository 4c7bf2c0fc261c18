"""Map session state: one marker, one flood layer, and stale-result protection.

A MapSession is owned by whatever presents results (a UI, the CLI) and is
passed by reference to render calls. It draws nothing itself; it describes
what should be drawn.
"""

import logging
from dataclasses import dataclass, field
from typing import Awaitable

from floodzone.config import settings
from floodzone.data import zone_catalog
from floodzone.engine.classifier import classify
from floodzone.models.zone import Coordinates, LookupResult

logger = logging.getLogger(__name__)

SEARCH_ZOOM = 16
TILE_MAX_NATIVE_ZOOM = 14
MAX_ZOOM = 22

SFHA_NOTE = (
    "This property is in a Special Flood Hazard Area and flood insurance may be required."
)


class LookupSequencer:
    """Tags lookups with increasing sequence numbers; only the latest may land."""

    def __init__(self):
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, seq: int) -> bool:
        return seq == self._latest


@dataclass(frozen=True)
class MarkerState:
    position: Coordinates
    color: str
    zoom: int = SEARCH_ZOOM


@dataclass(frozen=True)
class FeatureStyle:
    fill_color: str
    fill_opacity: float = 0.4
    stroke_color: str = "#333333"
    weight: float = 0.5


@dataclass(frozen=True)
class FloodTileLayer:
    url_template: str
    headers: dict = field(default_factory=dict)
    feature_id_property: str = "fld_ar_id"
    zone_property: str = "fld_zone"
    max_native_zoom: int = TILE_MAX_NATIVE_ZOOM
    max_zoom: int = MAX_ZOOM


def feature_style(properties: dict) -> FeatureStyle:
    """Style a vector tile feature by its fld_zone property."""
    definition = zone_catalog.lookup((properties or {}).get("fld_zone"))
    color = definition.color if definition else zone_catalog.FALLBACK_COLOR
    return FeatureStyle(fill_color=color)


def popup_text(zone_code: str | None) -> str:
    """Popup shown when a flood zone polygon is clicked."""
    c = classify(zone_code)
    return f"Flood Zone: {c.name}\n{c.description}"


def result_summary(result: LookupResult) -> str:
    lines = [f"Flood Zone: {result.name}" + (" (SFHA)" if result.sfha else "")]
    lines.append(result.message or result.description)
    if result.sfha:
        lines.append(f"Note: {SFHA_NOTE}")
    return "\n".join(lines)


class MapSession:
    def __init__(self, api_key: str | None = None, tile_url: str | None = None):
        self.sequencer = LookupSequencer()
        self.marker: MarkerState | None = None
        self.result: LookupResult | None = None
        key = api_key if api_key is not None else settings.nfd_api_key
        self.flood_layer = FloodTileLayer(
            url_template=tile_url or settings.nfd_tile_url,
            headers={"X-API-KEY": key} if key else {},
        )

    async def track(self, lookup: Awaitable[LookupResult]) -> LookupResult | None:
        """Await a lookup and render it unless a newer one was issued meanwhile.

        Returns the rendered result, or None when the result was stale.
        Errors propagate only for the latest lookup; a stale failure is dropped.
        """
        seq = self.sequencer.issue()
        try:
            result = await lookup
        except Exception:
            if self.sequencer.is_current(seq):
                raise
            logger.debug("Discarding failed stale lookup #%s (latest #%s)", seq, self.sequencer.latest)
            return None
        if not self.sequencer.is_current(seq):
            logger.debug("Discarding stale lookup #%s (latest #%s)", seq, self.sequencer.latest)
            return None
        self.render(result)
        return result

    def render(self, result: LookupResult) -> MarkerState | None:
        """Move the single marker to the result location, colored by zone."""
        self.result = result
        if result.coordinates is None:
            return self.marker
        self.marker = MarkerState(position=result.coordinates, color=result.color)
        return self.marker

    def clear(self) -> None:
        self.result = None
        self.marker = None

    def legend(self) -> list[tuple[str, str, str]]:
        """(code, name, color) rows for the map legend."""
        return [(d.code, d.name, d.color) for d in zone_catalog.legend_entries()]
