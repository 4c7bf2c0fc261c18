"""Tests for map session state and stale-result handling."""

import asyncio

import pytest

from floodzone.data import zone_catalog
from floodzone.engine.classifier import classify
from floodzone.engine.map_session import (
    LookupSequencer,
    MapSession,
    feature_style,
    popup_text,
    result_summary,
)
from floodzone.models.errors import ValidationError
from floodzone.models.zone import Coordinates, LookupResult, RiskTier


def _result(zone: str, lat: float, lng: float, sfha: bool = False) -> LookupResult:
    c = classify(zone)
    return LookupResult(
        zone_code=zone,
        sfha=sfha,
        risk_tier=c.risk_tier,
        color=c.color,
        name=c.name,
        description=c.description,
        coordinates=Coordinates(lat=lat, lng=lng),
        source="National Flood Data",
    )


async def _delayed(result: LookupResult, event: asyncio.Event) -> LookupResult:
    await event.wait()
    return result


async def _delayed_failure(error: Exception, event: asyncio.Event) -> LookupResult:
    await event.wait()
    raise error


@pytest.fixture
def session() -> MapSession:
    return MapSession(api_key="tile-key", tile_url="https://tiles.test/{z}/{x}/{y}.mvt")


class TestLookupSequencer:
    def test_monotonic(self):
        seq = LookupSequencer()
        first = seq.issue()
        second = seq.issue()
        assert second > first
        assert seq.latest == second

    def test_only_latest_is_current(self):
        seq = LookupSequencer()
        first = seq.issue()
        assert seq.is_current(first)
        second = seq.issue()
        assert not seq.is_current(first)
        assert seq.is_current(second)


class TestMapSession:
    async def test_track_renders_marker(self, session):
        result = _result("AE", 38.9, -77.0, sfha=True)

        async def lookup():
            return result

        rendered = await session.track(lookup())
        assert rendered is result
        assert session.marker.position == Coordinates(lat=38.9, lng=-77.0)
        assert session.marker.color == "#d7191c"

    async def test_stale_result_discarded(self, session):
        old_done = asyncio.Event()
        new_done = asyncio.Event()
        old = asyncio.create_task(session.track(_delayed(_result("VE", 25.7, -80.1), old_done)))
        await asyncio.sleep(0)
        new = asyncio.create_task(session.track(_delayed(_result("X", 39.7, -104.9), new_done)))
        await asyncio.sleep(0)

        # Newer lookup resolves first, then the older one
        new_done.set()
        assert (await new).zone_code == "X"
        old_done.set()
        assert await old is None

        assert session.result.zone_code == "X"
        assert session.marker.position == Coordinates(lat=39.7, lng=-104.9)

    async def test_stale_failure_discarded(self, session):
        old_done = asyncio.Event()
        new_done = asyncio.Event()
        old = asyncio.create_task(
            session.track(_delayed_failure(ValidationError("Address is required"), old_done))
        )
        await asyncio.sleep(0)
        new = asyncio.create_task(session.track(_delayed(_result("X", 39.7, -104.9), new_done)))
        await asyncio.sleep(0)

        new_done.set()
        assert (await new).zone_code == "X"
        old_done.set()
        assert await old is None

        assert session.result.zone_code == "X"
        assert session.marker.position == Coordinates(lat=39.7, lng=-104.9)

    async def test_errors_propagate(self, session):
        async def failing():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await session.track(failing())

    def test_render_without_coordinates_keeps_marker(self, session):
        session.render(_result("AE", 38.9, -77.0))
        no_coords = LookupResult(
            zone_code="NOT_FOUND", sfha=False, risk_tier=RiskTier.UNDETERMINED,
            color="#e0e0e0", name="No Data", description="", coordinates=None, source="FEMA NFHL",
        )
        marker = session.render(no_coords)
        assert marker.position == Coordinates(lat=38.9, lng=-77.0)
        assert session.result is no_coords

    def test_clear(self, session):
        session.render(_result("AE", 38.9, -77.0))
        session.clear()
        assert session.marker is None
        assert session.result is None

    def test_flood_layer(self, session):
        layer = session.flood_layer
        assert layer.url_template == "https://tiles.test/{z}/{x}/{y}.mvt"
        assert layer.headers == {"X-API-KEY": "tile-key"}
        assert layer.feature_id_property == "fld_ar_id"

    def test_legend_matches_catalog(self, session):
        rows = session.legend()
        assert [code for code, _, _ in rows] == list(zone_catalog.zone_colors())
        assert ("AE", "High Risk (AE)", "#d7191c") in rows


class TestPresentationHelpers:
    def test_feature_style_known_zone(self):
        assert feature_style({"fld_zone": "VE", "fld_ar_id": "1"}).fill_color == "#2c7bb6"

    def test_feature_style_unknown_zone(self):
        assert feature_style({"fld_zone": "??"}).fill_color == zone_catalog.FALLBACK_COLOR
        assert feature_style({}).fill_color == zone_catalog.FALLBACK_COLOR

    def test_popup_known_and_unknown(self):
        assert popup_text("AE").startswith("Flood Zone: High Risk (AE)")
        assert popup_text("ZZ") == "Flood Zone: ZZ\nUnknown flood zone type"

    def test_summary_sfha_note(self):
        text = result_summary(_result("AE", 38.9, -77.0, sfha=True))
        assert "(SFHA)" in text
        assert "flood insurance may be required" in text

    def test_summary_no_sfha(self):
        text = result_summary(_result("X", 39.7, -104.9))
        assert "SFHA" not in text
