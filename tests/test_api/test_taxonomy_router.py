"""
Integration tests for the /taxonomy router.

Covers:
  - Enumeration (unknown keys are empty lists, not errors)
  - HFN validation
  - Conversion in both directions, including 422 / 409 error bodies
"""

import pytest

from nna_registry.main import app
from nna_registry.routers.taxonomy import get_taxonomy_resolver
from nna_registry.settings import settings
from nna_registry.taxonomy.loader import reset_reference_table


@pytest.fixture
def ambiguous_client(client, unresolved_resolver):
    """Client whose resolver has no override for the W.BCH 003 collision."""
    app.dependency_overrides[get_taxonomy_resolver] = lambda: unresolved_resolver
    yield client
    app.dependency_overrides.clear()


class TestEnumeration:

    def test_layers(self, client):
        resp = client.get("/taxonomy/layers")
        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 10
        assert body[4] == {"code": "W", "numeric_code": "5", "name": "Worlds"}

    def test_categories(self, client):
        resp = client.get("/taxonomy/layers/w/categories")
        assert resp.status_code == 200
        codes = [c["code"] for c in resp.json()]
        assert codes == [
            "CLB", "STG", "URB", "BCH", "NTL", "FAN", "FUT", "VIR",
            "IND", "RUR", "HST", "CUL", "ABS", "RET", "NAT",
        ]
        assert "subcategories" not in resp.json()[0]

    def test_subcategories(self, client):
        resp = client.get("/taxonomy/layers/W/categories/BCH/subcategories")
        assert resp.status_code == 200
        assert {"code": "FES", "numeric_code": "003", "name": "Festival"} in resp.json()

    @pytest.mark.parametrize("path", [
        "/taxonomy/layers/X/categories",
        "/taxonomy/layers/W/categories/XXX/subcategories",
        "/taxonomy/layers/X/mappings",
    ])
    def test_unknown_keys_empty(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.json() == []

    def test_mappings(self, client):
        resp = client.get("/taxonomy/layers/W/mappings")
        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 73
        sunset = next(e for e in body if e["hfn"] == "W.BCH.SUN.001")
        assert sunset == {
            "hfn": "W.BCH.SUN.001",
            "mfa": "5.004.003.001",
            "category": "BCH",
            "subcategory": "SUN",
            "category_name": "Beach",
            "subcategory_name": "Sunset",
        }


class TestValidate:

    @pytest.mark.parametrize("hfn,valid", [
        ("W.BCH.SUN.001", True),
        ("w.bch.sun", True),
        ("W.BCH.XXX.001", False),
        ("W.BCH", False),
    ])
    def test_validate(self, client, hfn, valid):
        resp = client.get("/taxonomy/validate", params={"hfn": hfn})
        assert resp.status_code == 200
        assert resp.json() == {"hfn": hfn, "valid": valid}

    def test_hfn_required(self, client):
        assert client.get("/taxonomy/validate").status_code == 422


class TestConvert:

    def test_hfn_to_mfa(self, client):
        resp = client.post("/taxonomy/convert/hfn-to-mfa", json={"hfn": "W.BCH.SUN.001.mp4"})
        assert resp.status_code == 200
        assert resp.json() == {"hfn": "W.BCH.SUN.001.mp4", "mfa": "5.004.003.001.mp4"}

    def test_mfa_to_hfn(self, client):
        resp = client.post("/taxonomy/convert/mfa-to-hfn", json={"mfa": "2.001.007.001"})
        assert resp.status_code == 200
        assert resp.json() == {"hfn": "S.POP.HPM.001", "mfa": "2.001.007.001"}

    def test_override_wins_in_strict_mode(self, client):
        resp = client.post(
            "/taxonomy/convert/mfa-to-hfn", json={"mfa": "5.004.003.001", "strict": True}
        )
        assert resp.status_code == 200
        assert resp.json()["hfn"] == "W.BCH.SUN.001"

    def test_unknown_hfn_is_422(self, client):
        resp = client.post("/taxonomy/convert/hfn-to-mfa", json={"hfn": "W.BCH.XXX.001"})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert "Unknown subcategory W.BCH.XXX" in detail["error"]
        assert detail["value"] == "W.BCH.XXX.001"

    def test_unknown_mfa_is_422(self, client):
        resp = client.post("/taxonomy/convert/mfa-to-hfn", json={"mfa": "99.001.001.001"})
        assert resp.status_code == 422
        assert "Unknown layer number 99" in resp.json()["detail"]["error"]

    def test_empty_hfn_rejected(self, client):
        resp = client.post("/taxonomy/convert/hfn-to-mfa", json={"hfn": ""})
        assert resp.status_code == 422

    def test_ambiguous_lenient_picks_first(self, ambiguous_client):
        resp = ambiguous_client.post("/taxonomy/convert/mfa-to-hfn", json={"mfa": "5.004.003.001"})
        assert resp.status_code == 200
        assert resp.json()["hfn"] == "W.BCH.SUN.001"

    def test_ambiguous_strict_is_409(self, ambiguous_client):
        resp = ambiguous_client.post(
            "/taxonomy/convert/mfa-to-hfn", json={"mfa": "5.004.003.001", "strict": True}
        )
        assert resp.status_code == 409
        detail = resp.json()["detail"]
        assert detail["candidates"] == ["SUN", "FES"]
        assert detail["value"] == "5.004.003.001"


class TestTaxonomyUnavailable:
    """Every route answers 503 while the reference table fails its integrity check."""

    @pytest.fixture
    def broken_client(self, client, monkeypatch, fresh_reference_table):
        monkeypatch.setattr(settings, "taxonomy_strict_numeric_codes", True)
        reset_reference_table()
        yield client

    @pytest.mark.parametrize("method,path,body", [
        ("get", "/taxonomy/layers", None),
        ("get", "/taxonomy/layers/W/categories", None),
        ("get", "/taxonomy/layers/W/categories/BCH/subcategories", None),
        ("get", "/taxonomy/layers/W/mappings", None),
        ("get", "/taxonomy/validate?hfn=W.BCH.SUN.001", None),
        ("post", "/taxonomy/convert/hfn-to-mfa", {"hfn": "W.BCH.SUN.001"}),
        ("post", "/taxonomy/convert/mfa-to-hfn", {"mfa": "5.004.003.001"}),
    ])
    def test_routes_return_503(self, broken_client, method, path, body):
        kwargs = {"json": body} if body is not None else {}
        resp = getattr(broken_client, method)(path, **kwargs)
        assert resp.status_code == 503
        assert "integrity check failed" in resp.json()["detail"]["error"]
        assert "SUN, FES" in resp.json()["detail"]["error"]
