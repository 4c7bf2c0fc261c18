"""Canonical upstream payloads used across lookup tests.

Address fixture: AE zone parcel near Washington, DC (National Flood Data shape).
Point fixture: VE zone feature from a FEMA NFHL layer 28 query.
"""

import pytest

from floodzone.data.fema import FEMANFHLClient
from floodzone.data.lookup import LookupService
from floodzone.data.nfd import NationalFloodDataClient

NFD_URL = "https://nfd.test/v3/data"
NFHL_URL = "https://nfhl.test/MapServer/28/query"


@pytest.fixture
def ae_parcel_payload() -> dict:
    return {
        "status": "OK",
        "result": {
            "flood.s_fld_haz_ar": [
                {"fld_zone": "AE", "sfha_tf": "T", "fld_ar_id": "11001C_123"},
                {"fld_zone": "X", "sfha_tf": "F", "fld_ar_id": "11001C_124"},
            ]
        },
        "coords": {"lat": 38.9, "lng": -77.0},
    }


@pytest.fixture
def empty_parcel_payload() -> dict:
    return {
        "status": "OK",
        "result": {"flood.s_fld_haz_ar": []},
        "geocode": {"lat": 42.2808, "lng": -83.743},
    }


@pytest.fixture
def ve_point_payload() -> dict:
    return {
        "features": [
            {
                "attributes": {
                    "FLD_ZONE": "VE",
                    "SFHA_TF": "T",
                    "ZONE_SUBTY": "COASTAL FLOODPLAIN",
                    "DFIRM_ID": "12086C",
                }
            }
        ]
    }


@pytest.fixture
def nfd_client():
    return NationalFloodDataClient(api_key="test-key", base_url=NFD_URL, timeout=5.0)


@pytest.fixture
def fema_client():
    return FEMANFHLClient(base_url=NFHL_URL, timeout=5.0)


@pytest.fixture
def service(nfd_client, fema_client):
    return LookupService(nfd_client=nfd_client, fema_client=fema_client)
