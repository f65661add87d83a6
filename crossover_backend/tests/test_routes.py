"""
Tests for the CrossForge HTTP API.

The engine is covered by crossover_engine/tests; these check request
validation, response shape and error mapping.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from fastapi.testclient import TestClient

from crossover_backend.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealthAndCatalog:

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_crossover_types(self, client):
        response = client.get("/api/catalog/crossover-types")
        assert response.status_code == 200
        labels = [t["label"] for t in response.json()]
        assert "4th Order Linkwitz-Riley" in labels
        assert len(labels) == 6

    def test_crossover_types_by_order(self, client):
        response = client.get("/api/catalog/crossover-types", params={"order": 3})
        assert [t["id"] for t in response.json()] == ["butterworth_3rd"]

    def test_design_intents(self, client):
        response = client.get("/api/catalog/design-intents")
        assert [i["id"] for i in response.json()] == ["flat", "warm", "bright", "vocal"]


class TestCrossoverRoutes:

    def test_first_order_reference(self, client):
        response = client.post("/api/crossover", json={
            "rh": 8, "rl": 8, "frequency": 3000, "crossover_type": "1st Order Butterworth",
        })
        assert response.status_code == 200
        body = response.json()
        assert body["highPass"] == [{"name": "C1", "value": "6.63", "unit": "uF"}]
        assert body["lowPass"] == [{"name": "L1", "value": "0.42", "unit": "mH"}]
        assert body["snapped"] is None

    def test_snapped_values(self, client):
        response = client.post("/api/crossover", json={
            "rh": 8, "rl": 8, "frequency": 3000,
            "crossover_type": "butterworth_1st", "e_series": "E12",
        })
        snapped = response.json()["snapped"]
        assert [s["name"] for s in snapped] == ["C1", "L1"]
        assert snapped[0]["value"] == pytest.approx(6.8)

    def test_snapped_part_below_display_resolution(self, client):
        """A part that renders as 0.00 still snaps instead of failing."""
        response = client.post("/api/crossover", json={
            "rh": 8, "rl": 0.5, "frequency": 20000,
            "crossover_type": "butterworth_1st", "e_series": "E24",
        })
        assert response.status_code == 200
        body = response.json()
        assert body["lowPass"] == [{"name": "L1", "value": "0.00", "unit": "mH"}]
        assert body["snapped"][1]["value"] == pytest.approx(0.0039)

    def test_unknown_type_is_400(self, client):
        response = client.post("/api/crossover", json={
            "rh": 8, "rl": 8, "frequency": 3000, "crossover_type": "Chebyshev",
        })
        assert response.status_code == 400
        assert "Chebyshev" in response.json()["detail"]

    def test_zero_frequency_is_422(self, client):
        response = client.post("/api/crossover", json={
            "rh": 8, "rl": 8, "frequency": 0, "crossover_type": "butterworth_2nd",
        })
        assert response.status_code == 422

    def test_three_way(self, client):
        response = client.post("/api/crossover/3way", json={
            "rw": 8, "rm": 8, "rt": 6,
            "low_frequency": 500, "high_frequency": 3500,
            "crossover_type": "2nd Order Linkwitz-Riley",
        })
        assert response.status_code == 200
        body = response.json()
        assert [c["name"] for c in body["woofer"]] == ["C2", "L2"]
        assert [c["name"] for c in body["midrange"]] == ["C1", "L1", "C2", "L2"]
        assert [c["name"] for c in body["tweeter"]] == ["C1", "L1"]

    def test_three_way_inverted_points_is_400(self, client):
        response = client.post("/api/crossover/3way", json={
            "rw": 8, "rm": 8, "rt": 8,
            "low_frequency": 3500, "high_frequency": 500,
            "crossover_type": "butterworth_2nd",
        })
        assert response.status_code == 400


class TestNetworkRoutes:

    def test_lpad(self, client):
        response = client.post("/api/lpad", json={"rh": 8, "attenuation_db": 3})
        assert response.json() == {"r1": "2.34", "r2": "19.39"}

    def test_lpad_zero_db_is_422(self, client):
        response = client.post("/api/lpad", json={"rh": 8, "attenuation_db": 0})
        assert response.status_code == 422

    def test_zobel(self, client):
        response = client.post("/api/zobel", json={"re": 8, "le": 0.5})
        assert response.json() == {"rz": "10.00", "cz": "5.00"}


class TestAdvisoryRoutes:

    def test_safety_hazard(self, client):
        response = client.post("/api/safety", json={
            "rh": 8, "rl": 8, "frequency": 1500, "fs": 1000,
            "crossover_type": "butterworth_2nd",
        })
        warnings = response.json()["warnings"]
        assert [w["type"] for w in warnings] == ["hazard"]

    def test_safety_without_fs(self, client):
        response = client.post("/api/safety", json={
            "rh": 8, "rl": 8, "frequency": 1500, "crossover_type": "butterworth_2nd",
        })
        assert response.json() == {"warnings": []}

    def test_intent_guidance(self, client):
        response = client.get("/api/intent-guidance", params={"intent": "Warm"})
        body = response.json()
        assert body["intent"] == "Warm"
        assert "L-Pad" in body["guidance"]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
