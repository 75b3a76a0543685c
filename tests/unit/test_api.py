"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from api.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("TREND_LOG_LEVEL", "ERROR")
    with TestClient(create_app()) as c:
        yield c


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestAnalyze:
    def test_overview_by_default(self, client, records):
        resp = client.post("/api/v1/analyze", json={"records": records})
        assert resp.status_code == 200
        body = resp.json()
        assert body["sample_count"] == 5
        assert body["reports"]["analyze"]["trend"]["slope"] == pytest.approx(4.5)

    def test_options_applied(self, client, records):
        resp = client.post(
            "/api/v1/analyze",
            json={
                "records": records,
                "reports": ["forecast", "moving_average"],
                "options": {"forecast_periods": 4, "moving_average_window": 2},
            },
        )
        body = resp.json()
        assert len(body["reports"]["forecast"]["points"]) == 4
        assert body["reports"]["moving_average"]["window"] == 2

    def test_empty_dataset_is_422(self, client):
        resp = client.post("/api/v1/analyze", json={"records": ["date,value"]})
        assert resp.status_code == 422
        assert "No data loaded" in resp.json()["detail"]

    def test_invalid_option_is_400(self, client, records):
        resp = client.post(
            "/api/v1/analyze",
            json={"records": records, "reports": ["forecast"], "options": {"forecast_periods": 0}},
        )
        assert resp.status_code == 400

    def test_unknown_report_rejected(self, client, records):
        resp = client.post("/api/v1/analyze", json={"records": records, "reports": ["nope"]})
        assert resp.status_code == 422

    def test_skipped_reports_listed(self, client):
        resp = client.post("/api/v1/analyze", json={"records": ["1,3"], "reports": ["forecast"]})
        assert resp.status_code == 200
        assert resp.json()["skipped"][0]["name"] == "forecast"

    def test_empty_correlation_dataset_is_not_fatal(self, client, records):
        resp = client.post(
            "/api/v1/analyze",
            json={"records": records, "reports": ["analyze", "correlation"], "correlation_records": ["x,y"]},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert "analyze" in body["reports"]
        assert body["skipped"][0]["name"] == "correlation"
