import pytest
from fastapi.testclient import TestClient

from zone_api import api

SQUARE = "48.0,2.0,48.0,3.0,49.0,3.0,49.0,2.0"
FAR_SQUARE = "10.0,10.0,10.0,11.0,11.0,11.0,11.0,10.0"


@pytest.fixture()
def client():
    with TestClient(api) as client:
        yield client


def make_body(lat=48.5, lon=2.5):
    return {
        "location": {
            "address": {},
            "referencePosition": {"latitude": lat, "longitude": lon},
        },
        "prohibited": {
            "id": "prohibited",
            "roadsToBeAttributed": [{"description": "prohibited zone", "points": SQUARE}],
        },
        "restricted": {
            "id": "restricted",
            "roadsToBeAttributed": [{"description": "restricted zone", "points": FAR_SQUARE}],
        },
    }


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_check_returns_prohibited_match(client):
    response = client.post("/zones/check", json=make_body())
    assert response.status_code == 200
    body = response.json()
    assert body["severity"] == "prohibited"
    assert body["message"] == "Prohibited motorized access"
    assert body["descriptions"] == ["prohibited zone"]
    assert body["prohibited"]["id"] == "prohibited"
    assert len(body["prohibited"]["features"]) == 1
    assert body["restricted"]["id"] == "restricted"
    assert body["errors"] == []


def test_check_outside_every_zone(client):
    response = client.post("/zones/check", json=make_body(lat=0.5, lon=0.5))
    assert response.status_code == 200
    body = response.json()
    assert body["severity"] == "none"
    assert body["descriptions"] == []


def test_check_without_scenarios_defaults_to_prohibited(client):
    response = client.post("/zones/check", json={"location": make_body()["location"]})
    assert response.status_code == 200
    body = response.json()
    assert body["severity"] == "prohibited"
    assert body["scenarios_loaded"] is False
    assert body["prohibited"] is None


def test_check_reports_bad_records(client):
    body = make_body()
    body["prohibited"]["roadsToBeAttributed"].append({"description": "broken", "points": "48.0,abc"})
    response = client.post("/zones/check", json=body)
    assert response.status_code == 200
    errors = response.json()["errors"]
    assert len(errors) == 1
    assert errors[0]["scenario_id"] == "prohibited"
    assert errors[0]["index"] == 1
    assert errors[0]["description"] == "broken"


def test_check_rejects_location_without_reference_position(client):
    response = client.post("/zones/check", json={"location": {"roadAccessPosition": {"latitude": 1, "longitude": 2}}})
    assert response.status_code == 422


@pytest.mark.parametrize("latitude", ["48.5", True, None])
def test_check_rejects_non_numeric_latitude(client, latitude):
    body = make_body()
    body["location"]["referencePosition"]["latitude"] = latitude
    response = client.post("/zones/check", json=body)
    assert response.status_code == 422
    assert "location.referencePosition.latitude" in response.json()["detail"]


def test_check_rejects_malformed_scenario(client):
    body = make_body()
    body["restricted"]["roadsToBeAttributed"] = "48.0,2.0"
    response = client.post("/zones/check", json=body)
    assert response.status_code == 422
    assert "roadsToBeAttributed" in response.json()["detail"]


def test_check_rejects_non_object_body(client):
    response = client.post("/zones/check", json=[1, 2])
    assert response.status_code == 422
