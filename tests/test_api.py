from __future__ import annotations

from fastapi.testclient import TestClient

from case_finance_app import main
from case_finance_app.main import app

client = TestClient(app)


def test_healthcheck():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_defaults_endpoint():
    body = client.get("/assumptions/defaults").json()
    assert body["monthly_price"] == 3500
    assert body["margin_ramp"] == [0.15, 0.35, 0.52, 0.6, 0.65]


def test_financials_for_empty_case_uses_defaults():
    response = client.post("/financials", json={"assumptions": {}})
    assert response.status_code == 200
    body = response.json()
    assert body["assumptions"]["investment_amount"] == 1_800_000
    assert body["results"]["annual_revenues"][0] == 630_000
    assert body["results"]["cash_flows"][0] == -1_800_000
    assert len(body["results"]["cash_flows"]) == 6
    assert body["case_financials"]["npv"] == body["results"]["npv"]


def test_financials_without_payback_returns_null():
    response = client.post("/financials", json={"assumptions": {"monthly_price": 10, "year1_customers": 1}})
    assert response.status_code == 200
    assert response.json()["results"]["payback_months"] is None


def test_financials_rejects_zero_year_horizon():
    response = client.post("/financials", json={"assumptions": {"projection_years": 0}})
    assert response.status_code == 422


def test_financials_rejects_non_numeric_input():
    response = client.post("/financials", json={"assumptions": {"monthly_price": "lots"}})
    assert response.status_code == 422


def test_sensitivity_endpoint():
    response = client.post("/sensitivity", json={"assumptions": {"discount_rate": 8}, "variation_pct": 10})
    assert response.status_code == 200
    result = response.json()["result"]
    assert result["variation_pct"] == 10
    assert len(result["bars"]) == 6
    spreads = [bar["spread"] for bar in result["bars"]]
    assert spreads == sorted(spreads, reverse=True)
    assert result["bars"][-1]["assumption_key"] == "gross_margin_pct"


def test_sensitivity_rejects_out_of_range_variation():
    response = client.post("/sensitivity", json={"variation_pct": 150})
    assert response.status_code == 422


def test_logging_is_configured_on_startup(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "configure_logging", lambda: calls.append("configured"))
    assert calls == []
    with TestClient(app) as started:
        assert started.get("/health").status_code == 200
    assert calls == ["configured"]
