"""
Tests for the FastAPI endpoints.

Covers:
- Health and rule listing
- Design report with and without resolution
- Resolution, cut list, outlines and diagram
- Validation errors
"""
import pytest
from fastapi.testclient import TestClient

from glazing.api.main import app

SINGLE = {"survey": {"width": 500}}


@pytest.fixture
def client():
    return TestClient(app)


class TestMeta:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_rules(self, client):
        response = client.get("/api/rules")
        assert response.status_code == 200
        rules = response.json()
        assert len(rules) == 15
        assert rules[-1]["id"] == "hardware.hinges"


class TestDesign:
    def test_default_request(self, client):
        response = client.post("/api/design", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["design"]["survey"]["width"] == 1065
        assert data["derived"]["casement_count"] == 2

    def test_apply_resolution(self, client):
        response = client.post("/api/design", json={"design": SINGLE, "apply_resolution": True})
        assert response.status_code == 200
        data = response.json()
        assert data["design"]["casement_width"] == 444
        assert any(w.startswith("EGRESS WARNING") for w in data["diagnostics"])

    def test_disabled_rules(self, client):
        response = client.post("/api/design", json={
            "design": SINGLE,
            "apply_resolution": True,
            "diagnostics": {"disabled_rules": ["layout.egress"]},
        })
        assert not any(w.startswith("EGRESS WARNING") for w in response.json()["diagnostics"])

    def test_rejects_negative_gap(self, client):
        response = client.post("/api/design", json={"design": {"gap": -1}})
        assert response.status_code == 422

    def test_rejects_zero_reveal(self, client):
        response = client.post("/api/design", json={"design": {"survey": {"width": 0}}})
        assert response.status_code == 422


class TestOutputs:
    def test_resolve(self, client):
        response = client.post("/api/resolve", json={"design": SINGLE})
        assert response.status_code == 200
        data = response.json()
        assert data["opening_left"] == 28
        assert data["opening_width"] == 444
        assert data["left_tier"] == "glass"

    def test_parts(self, client):
        design = dict(SINGLE, casement_width=444)
        data = client.post("/api/parts", json={"design": design}).json()
        assert data["parts"][0]["name"] == "Liner (Horizontal)"
        assert data["stats"]["glass_panes"] == 1

    def test_outlines(self, client):
        design = dict(SINGLE, casement_width=444)
        data = client.post("/api/outlines", json={"design": design}).json()
        assert set(data) == {"liner_horizontal", "sash_vertical", "sash_horizontal", "glass", "opening"}
        assert data["opening"]["commands"][0] == {"op": "M", "args": [0, 0]}

    def test_diagram(self, client):
        data = client.post("/api/diagram", json={"design": SINGLE}).json()
        assert len(data["secondary"]) == 3
        assert len(data["primary"]) == 2
        assert data["view_box"] == [-100, -100, 700, 1565]
