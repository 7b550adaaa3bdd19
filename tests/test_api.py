"""HTTP surface tests through the FastAPI test client."""

import httpx
import pytest
from fastapi.testclient import TestClient

from exportdesk.core.weather import OpenWeatherClient
from exportdesk.main import app

API = "/api/v1"


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _context_payload():
    return {
        "exporter": {"company_name": "Argane Souss SARL", "address": "12 Rue des Orangers",
                     "city": "Agadir"},
        "consignee": {"company_name": "Maison Bio GmbH", "country": "Germany"},
        "quantity": 1200,
        "unit_price": 18.5,
    }


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "operational"


class TestClassificationRoutes:

    def test_categories(self, client):
        categories = client.get(f"{API}/classification/categories").json()["categories"]
        assert "agri" in [c["id"] for c in categories]

    def test_rank(self, client):
        response = client.post(f"{API}/classification/rank", json={
            "category": "agri",
            "subcategory": "oils",
            "free_text_description": "Pure argan oil for cosmetic use",
        })
        body = response.json()

        assert response.status_code == 200
        assert body["total"] == 4
        assert [m["entry"]["hs_code"] for m in body["matches"]] == \
            ["1515.30", "1509.10", "1515.50", "0910.99"]
        assert body["matches"][0]["confidence"] == 99

    def test_rank_with_jitter_keeps_order(self, client):
        response = client.post(f"{API}/classification/rank", json={
            "category": "agri",
            "subcategory": "oils",
            "free_text_description": "argan oil",
            "jitter": True,
            "limit": 2,
        })
        matches = response.json()["matches"]

        assert [m["entry"]["hs_code"] for m in matches] == ["1515.30", "1509.10"]
        assert all(45 <= m["confidence"] <= 99 for m in matches)

    def test_rank_rejects_out_of_range_limit(self, client):
        response = client.post(f"{API}/classification/rank", json={
            "free_text_description": "argan", "limit": 0,
        })
        assert response.status_code == 422

    def test_tariff_lookup(self, client):
        response = client.get(f"{API}/classification/tariff/151530")
        assert response.status_code == 200
        assert response.json()["hs_code"] == "1515.30"

    def test_unknown_tariff_is_404(self, client):
        assert client.get(f"{API}/classification/tariff/9999.99").status_code == 404


class TestDocumentRoutes:

    def test_markets(self, client):
        markets = client.get(f"{API}/documents/markets").json()["markets"]
        assert [m["value"] for m in markets] == ["EU", "UK", "USA", "GCC", "OTHER"]

    def test_checklist(self, client):
        response = client.post(f"{API}/documents/checklist",
                               json={"hs_code": "1515.30", "destination_market": "EU"})
        ids = [d["document_id"] for d in response.json()["documents"]]

        assert response.status_code == 200
        assert ids[-3:] == ["eur1_certificate", "csddd_compliance", "onssa_certificate"]

    def test_status_for_empty_form(self, client):
        response = client.post(f"{API}/documents/status",
                               json={"hs_code": "1515.30", "destination_market": "EU"})
        body = response.json()

        assert set(body["statuses"].values()) == {"Missing"}
        assert body["missing_fields"]["packing_list"] == [
            "exporter.company_name", "consignee.company_name", "quantity",
        ]
        assert body["summary"]["progress_percent"] == 0
        assert not body["summary"]["can_finalize"]

    def test_status_respects_filed_ids(self, client):
        response = client.post(f"{API}/documents/status", json={
            "hs_code": "1515.30",
            "destination_market": "EU",
            "context": _context_payload(),
            "filed_ids": ["commercial_invoice"],
        })
        statuses = response.json()["statuses"]

        assert statuses["commercial_invoice"] == "Filed"
        assert statuses["packing_list"] == "Ready"

    def test_finalize_blocked(self, client):
        response = client.post(f"{API}/documents/finalize",
                               json={"hs_code": "0307.43", "destination_market": "GCC"})
        detail = response.json()["detail"]

        assert response.status_code == 409
        assert detail["outstanding_critical"] == ["CI", "PL", "B/L", "CO", "HC", "ONSSA", "VC"]

    def test_finalize(self, client):
        response = client.post(f"{API}/documents/finalize", json={
            "hs_code": "1515.30",
            "destination_market": "EU",
            "context": _context_payload(),
        })
        body = response.json()

        assert response.status_code == 200
        assert body["status"] == "Filed"
        assert body["filed_ids"][:4] == [
            "commercial_invoice", "packing_list", "bill_of_lading", "certificate_of_origin",
        ]
        assert len(body["filed_ids"]) == 7


class TestRiskRoutes:

    def test_efactor(self, client):
        response = client.post(f"{API}/risk/efactor", json={"samples": [
            {"port_id": "tanger-med", "wind_speed_knots": 30, "visibility_meters": 500,
             "has_storm_alert": True},
            {"port_id": "casablanca", "wind_speed_knots": 5, "visibility_meters": 10000},
        ]})
        body = response.json()

        assert response.status_code == 200
        assert body["multiplier"] == 1.375
        assert body["port_congestion_tier"] == "high"
        assert body["storm_risk_tier"] == "severe"

    def test_efactor_without_samples_is_rejected(self, client):
        response = client.post(f"{API}/risk/efactor", json={"samples": []})
        assert response.status_code == 422

    def test_negative_wind_is_rejected(self, client):
        response = client.post(f"{API}/risk/efactor", json={"samples": [
            {"port_id": "agadir", "wind_speed_knots": -1, "visibility_meters": 10000},
        ]})
        assert response.status_code == 422

    @pytest.mark.parametrize("field", ["wind_speed_knots", "visibility_meters"])
    def test_non_finite_readings_are_rejected(self, client, field):
        readings = {"wind_speed_knots": "5", "visibility_meters": "10000", field: "Infinity"}
        body = ('{"samples": [{"port_id": "agadir", "wind_speed_knots": %(wind_speed_knots)s, '
                '"visibility_meters": %(visibility_meters)s}]}' % readings)

        response = client.post(
            f"{API}/risk/efactor",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422

    def test_live_efactor_unavailable(self, client, monkeypatch):
        async def no_samples(self, ports=None):
            return []

        monkeypatch.setattr(OpenWeatherClient, "fetch_all", no_samples)
        response = client.get(f"{API}/risk/efactor/live")

        assert response.status_code == 502
        assert response.json()["detail"].startswith("Risk unavailable")

    def test_live_efactor_without_api_key(self, client, monkeypatch):
        monkeypatch.setattr("exportdesk.core.weather.client.settings.OPENWEATHER_API_KEY", "")
        response = client.get(f"{API}/risk/efactor/live")
        assert response.status_code == 502

    def test_live_efactor_with_malformed_weather_payloads(self, client, monkeypatch):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=["unexpected"]))
        monkeypatch.setattr(
            "exportdesk.api.routes.risk.OpenWeatherClient",
            lambda: OpenWeatherClient(api_key="test-key", transport=transport),
        )

        response = client.get(f"{API}/risk/efactor/live")

        assert response.status_code == 502
        assert response.json()["detail"].startswith("Risk unavailable")
