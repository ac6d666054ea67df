"""API tests for the eligibility routes and service health."""

import json

from fastapi.testclient import TestClient

from app.crs.defaults import DEFAULT_CRS_CONFIG

COMPUTE_URL = "/api/v1/eligibility/crs/compute"

SKILLED_WORKER = {
    "age": 30,
    "marital_status": "single",
    "education": "bachelors",
    "first_language": {"test": "IELTS", "speaking": 7.0, "listening": 8.0, "reading": 7.0, "writing": 7.0},
    "foreign_work_experience": 3,
}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "config_version": "express-entry-default"}


def test_compute(client):
    response = client.post(COMPUTE_URL, json={"profile": SKILLED_WORKER})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 449
    assert body["core_human_capital"] == 349
    assert body["skill_transferability"] == 100
    assert body["eligibility"]["fsw"]["eligible"] is True
    assert body["eligibility"]["cec"]["eligible"] is False
    assert body["score_comparison"]["fsw"] == -21
    assert body["score_comparison"]["french"] is None
    assert body["disclaimer"]


def test_compute_cutoff_override(client):
    response = client.post(COMPUTE_URL, json={"profile": SKILLED_WORKER, "cutoffs": {"fsw": 400}})
    assert response.status_code == 200
    comparison = response.json()["score_comparison"]
    assert comparison["fsw"] == 49
    assert comparison["cec"] is None


def test_compute_rejects_bad_profile(client):
    response = client.post(COMPUTE_URL, json={"profile": {**SKILLED_WORKER, "education": "wizard"}})
    assert response.status_code == 422


def test_compute_is_deterministic(client):
    first = client.post(COMPUTE_URL, json={"profile": SKILLED_WORKER}).json()
    second = client.post(COMPUTE_URL, json={"profile": SKILLED_WORKER}).json()
    assert first == second


def test_config_endpoint(client):
    response = client.get("/api/v1/eligibility/crs/config")
    assert response.status_code == 200
    body = response.json()
    assert body["version"] == "express-entry-default"
    assert body["additional_points"]["provincial_nomination"] == 600


def test_cutoffs_endpoint(client):
    response = client.get("/api/v1/eligibility/crs/cutoffs")
    assert response.status_code == 200
    assert response.json() == {
        "cutoffs": DEFAULT_CRS_CONFIG["cutoff_scores"],
        "config_version": "express-entry-default",
    }


def test_normalize(client):
    response = client.post(
        "/api/v1/eligibility/crs/normalize",
        json={"age": 30, "educationLevel": "Bachelor's degree", "languageScores": {"test": "IELTS", "speaking": 7}},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["can_calculate"] is True
    assert body["profile"]["education"] == "bachelors"


def test_normalize_non_finite_age(client):
    response = client.post("/api/v1/eligibility/crs/normalize", json={"age": "1e999", "education": "bachelors"})
    assert response.status_code == 200
    body = response.json()
    assert body["profile"]["age"] == 0
    assert "age" in body["missing_or_defaulted"]


def test_missing_configuration_returns_503(client):
    client.app.state.crs_config = None
    response = client.post(COMPUTE_URL, json={"profile": SKILLED_WORKER})
    assert response.status_code == 503
    assert "not loaded" in response.json()["detail"]
    assert client.get("/health").json()["status"] == "degraded"


def test_startup_loads_configuration_file(tmp_path, monkeypatch):
    raw = json.loads(json.dumps(DEFAULT_CRS_CONFIG))
    raw["version"] = "2026-custom"
    raw["cutoff_scores"] = {"fsw": 500}
    path = tmp_path / "crs.json"
    path.write_text(json.dumps(raw))
    monkeypatch.setenv("CRS_CONFIG_PATH", str(path))
    monkeypatch.delenv("CRS_CUTOFFS_SOURCE", raising=False)
    from app.main import app

    with TestClient(app) as client:
        body = client.post(COMPUTE_URL, json={"profile": SKILLED_WORKER}).json()
        assert body["config_version"] == "2026-custom"
        assert body["score_comparison"]["fsw"] == -51
        assert body["score_comparison"]["cec"] is None
