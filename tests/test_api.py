"""Tests for the HTTP API layer.

Covers:
  - Root / health endpoints
  - /uptime success path (ordering, summary, unreported chargers)
  - /uptime input errors mapped to HTTP 422
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from charger_uptime.api.server import app


client = TestClient(app)


def _doc(stations: str, reports: str) -> str:
    return f"[Stations]\n{stations}\n\n[Charger Availability Reports]\n{reports}\n"


class TestMeta:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self):
        body = client.get("/").json()
        assert body["name"] == "Charger Uptime API"
        assert "/uptime" in body["start_here"]


class TestUptimeEndpoint:
    def test_results_sorted(self, reference_document):
        resp = client.post("/uptime", json={"text": reference_document})
        assert resp.status_code == 200
        body = resp.json()
        assert body["results"] == [
            {"station_id": 0, "uptime_percentage": 100},
            {"station_id": 1, "uptime_percentage": 0},
            {"station_id": 2, "uptime_percentage": 66},
        ]

    def test_summary_included(self, reference_document):
        body = client.post("/uptime", json={"text": reference_document, "threshold_pct": 70}).json()
        summary = body["summary"]
        assert summary["station_count"] == 3
        assert summary["min_pct"] == 0
        assert summary["max_pct"] == 100
        assert summary["threshold_pct"] == 70
        assert summary["stations_below_threshold"] == [1, 2]
        assert body["narrative"].startswith("3 stations")

    def test_default_threshold_from_settings(self, reference_document):
        summary = client.post("/uptime", json={"text": reference_document}).json()["summary"]
        assert summary["threshold_pct"] == 90
        assert summary["stations_below_threshold"] == [1, 2]

    def test_chargers_without_reports(self):
        body = client.post("/uptime", json={"text": _doc("1 1 2", "1 0 100 true")}).json()
        assert body["chargers_without_reports"] == [2]
        assert body["results"] == [{"station_id": 1, "uptime_percentage": 100}]

    def test_line_error_is_422(self):
        resp = client.post("/uptime", json={"text": _doc("1 4294967296", "1 0 1 true")})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["kind"] == "range"
        assert detail["line_number"] == 2
        assert detail["entity_id"] is None

    def test_model_error_is_422(self):
        resp = client.post("/uptime", json={"text": _doc("1 1", "1 0 100 true\n1 50 150 true")})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["kind"] == "overlap"
        assert detail["entity_id"] == 1
        assert detail["message"] == "Overlapping time periods found for Charger ID 1"

    def test_empty_text(self):
        resp = client.post("/uptime", json={"text": ""})
        assert resp.status_code == 422
        assert resp.json()["detail"]["kind"] == "empty"

    def test_missing_text_field(self):
        resp = client.post("/uptime", json={})
        assert resp.status_code == 422

    def test_threshold_out_of_range(self, valid_document):
        resp = client.post("/uptime", json={"text": valid_document, "threshold_pct": 101})
        assert resp.status_code == 422
