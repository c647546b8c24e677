from __future__ import annotations

from math import isclose

from fire_planner.schemas.profile import DEFAULT_PROFILE


def profile_payload(**overrides) -> dict:
    payload = DEFAULT_PROFILE.model_dump()
    payload.update(overrides)
    return payload


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_default_profile_endpoint(client):
    response = client.get("/api/profile/default")

    assert response.status_code == 200
    assert response.get_json() == profile_payload()


def test_kpis_endpoint(client):
    response = client.post("/api/kpis", json=profile_payload())

    assert response.status_code == 200
    body = response.get_json()
    assert isclose(body["annualLivingCost"], 60000.0)
    assert isclose(body["fireNumber"], 1500000.0)
    assert body["runwayYears"] == {"kind": "finite", "years": 0.8}


def test_kpis_endpoint_unbounded_runway(client):
    response = client.post("/api/kpis", json=profile_payload(monthlyLivingCost=0))

    assert response.status_code == 200
    assert response.get_json()["runwayYears"] == {"kind": "unbounded"}


def test_simulation_endpoint_returns_full_schedule(client):
    response = client.post("/api/simulation", json=profile_payload(startYear=2030))

    assert response.status_code == 200
    body = response.get_json()
    records = body["records"]
    assert len(records) == 56
    assert records[0]["year"] == 2030
    assert records[0]["startBalance"] == 50000.0
    assert records[-1]["age"] == 85

    by_age = {row["age"]: row for row in records}
    assert by_age[54]["phase"] == "Accumulation"
    assert by_age[55]["phase"] == "Distribution"
    assert body["summary"]["years"] == 56
    assert body["summary"]["retirementBalance"] == by_age[55]["startBalance"]


def test_dashboard_endpoint(client):
    response = client.post("/api/dashboard", json=profile_payload(startYear=2025))

    assert response.status_code == 200
    body = response.get_json()
    assert set(body) == {"profile", "kpis", "records", "summary", "nominalReturnRate"}
    assert body["profile"] == profile_payload()
    assert isclose(body["nominalReturnRate"], (1.055 * 1.035 - 1) * 100)
    assert body["records"][0]["year"] == 2025


def test_nominal_rate_endpoint(client):
    response = client.post("/api/rates/nominal", json={"realRate": 6.0, "inflationRate": 0.0})

    assert response.status_code == 200
    assert isclose(response.get_json()["nominalRate"], 6.0)


def test_out_of_order_ages_return_422(client):
    response = client.post("/api/simulation", json=profile_payload(lifeExpectancy=50))

    assert response.status_code == 422
    body = response.get_json()
    assert any("lifeExpectancy" in error["msg"] for error in body["detail"])


def test_target_below_current_age_returns_422(client):
    response = client.post("/api/kpis", json=profile_payload(targetAge=25))

    assert response.status_code == 422


def test_negative_contribution_returns_422(client):
    response = client.post("/api/kpis", json=profile_payload(monthlyContribution=-1))

    assert response.status_code == 422
    assert response.get_json()["detail"][0]["loc"] == ["monthlyContribution"]


def test_unknown_field_returns_422(client):
    response = client.post("/api/dashboard", json=profile_payload(salary=1000))

    assert response.status_code == 422


def test_missing_fields_return_422(client):
    response = client.post("/api/kpis", json={"currentAge": 30})

    assert response.status_code == 422
    assert len(response.get_json()["detail"]) == 8


def test_malformed_json_returns_400(client):
    response = client.post("/api/kpis", data="{not json", content_type="application/json")

    assert response.status_code == 400


def test_cors_header_for_dev_origin(client):
    response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})

    assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_dashboard_with_very_large_balances(client):
    response = client.post(
        "/api/dashboard",
        json=profile_payload(realReturnRate=300.0, startYear=2025),
    )

    assert response.status_code == 200
    summary = response.get_json()["summary"]
    assert summary["depletionAge"] is None
    assert summary["finalBalance"] > 1e30
