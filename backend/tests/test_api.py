"""API tests against an in-memory SQLite record store."""
import uuid

import pytest
from fastapi.testclient import TestClient

from homehealth import main
from homehealth.scoring import ConfigurationError


def _record(client, property_id, metric, value, room_id=None):
    payload = {"metric": metric, "value": value}
    if room_id:
        payload["room_id"] = room_id
    return client.post(f"/properties/{property_id}/measurements", json=payload)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}
    assert resp.headers["X-Request-ID"]


def test_request_id_is_echoed(client):
    resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"


def test_catalog_lists_metrics_and_weights(client):
    resp = client.get("/catalog")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["metrics"]) == 12
    ph = next(m for m in data["metrics"] if m["key"] == "pH")
    assert ph["ideal_low"] == 6.5
    assert ph["ideal_high"] == 8.5
    assert ph["weight"] == 0.3
    assert data["overall_weights"] == {"air": 0.45, "water": 0.35, "ether": 0.2}


def test_unknown_property_is_404(client):
    resp = client.get(f"/properties/{uuid.uuid4()}/report")
    assert resp.status_code == 404


def test_rooms_are_created_in_order(client, property_id):
    for name in ("Kitchen", "Nursery"):
        assert client.post(f"/properties/{property_id}/rooms", json={"name": name}).status_code == 201
    rooms = client.get(f"/properties/{property_id}/rooms").json()
    assert [r["name"] for r in rooms] == ["Kitchen", "Nursery"]
    assert [r["order_index"] for r in rooms] == [0, 1]


def test_blank_room_name_rejected(client, property_id):
    resp = client.post(f"/properties/{property_id}/rooms", json={"name": "  "})
    assert resp.status_code == 422


def test_record_measurement_resolves_alias_and_unit(client, property_id):
    resp = _record(client, property_id, "PM2.5", 14.5)
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["metric"] == "PM25"
    assert data["unit"] == "µg/m³"
    assert data["room_id"] is None

    listed = client.get(f"/properties/{property_id}/measurements").json()
    assert [m["metric"] for m in listed] == ["PM25"]


def test_record_unknown_metric_is_400(client, property_id):
    resp = _record(client, property_id, "Radon", 2.0)
    assert resp.status_code == 400
    assert "Radon" in resp.json()["detail"]


def test_record_negative_value_is_400(client, property_id):
    resp = _record(client, property_id, "CO2", -10)
    assert resp.status_code == 400


def test_record_room_from_other_property_is_404(client, property_id):
    other = client.post("/properties", json={"address": "9 Oak Ave"}).json()["id"]
    room_id = client.post(f"/properties/{other}/rooms", json={"name": "Den"}).json()["id"]
    resp = _record(client, property_id, "CO2", 700, room_id=room_id)
    assert resp.status_code == 404


def test_report_without_readings_is_insufficient(client, property_id):
    resp = client.get(f"/properties/{property_id}/report")
    assert resp.status_code == 200
    data = resp.json()
    assert data["overall_score"] is None
    assert data["overall_label"] == "Not enough data"
    assert data["insufficient_data"] == ["air", "water", "ether"]
    assert all(c["score"] is None and c["insufficient_data"] for c in data["categories"])


def test_report_end_to_end(client, property_id):
    bedroom = client.post(f"/properties/{property_id}/rooms", json={"name": "Bedroom"}).json()["id"]
    kitchen = client.post(f"/properties/{property_id}/rooms", json={"name": "Kitchen"}).json()["id"]
    client.post(f"/properties/{property_id}/rooms", json={"name": "Office"})

    _record(client, property_id, "CO2", 800, room_id=bedroom)
    _record(client, property_id, "PM25", 5, room_id=bedroom)
    _record(client, property_id, "PM25", 9, room_id=kitchen)
    _record(client, property_id, "PM10", 30, room_id=kitchen)
    _record(client, property_id, "Mag Field", 2.0)
    _record(client, property_id, "Electric Field", 0.5)
    _record(client, property_id, "RF", 0.1)

    resp = client.get(f"/properties/{property_id}/report")
    assert resp.status_code == 200, resp.text
    data = resp.json()

    categories = {c["category"]: c for c in data["categories"]}
    assert categories["air"]["score"] == 100
    assert categories["ether"]["score"] == 100
    assert categories["water"]["score"] is None
    assert categories["water"]["insufficient_data"] is True
    assert categories["water"]["summary"] == "Not enough data to assess water quality."
    # water re-normalized away, not counted as 0
    assert data["overall_score"] == 100
    assert data["overall_label"] == "Excellent"
    assert data["insufficient_data"] == ["water"]

    metrics = {m["key"]: m for m in data["metrics"]}
    assert metrics["PM25"]["value"] == 9
    assert metrics["TDS"]["value"] is None
    assert metrics["TDS"]["status"] == "Not measured"

    assert [r["name"] for r in data["rooms"]] == ["Bedroom", "Kitchen", "Office", "Whole-home / Unassigned"]
    office = data["rooms"][2]
    assert office["reading_count"] == 0
    assert office["insufficient_data"] == ["air", "water", "ether"]
    assert data["rooms"][3]["scores"]["ether"] == 100

    assert data["comparisons"]["PM25"][0] == {"name": "Your Home", "value": 9}
    assert data["skipped"] == []


def test_metrics_endpoint_exposed(client):
    resp = client.get("/metrics")
    assert resp.status_code == 200


def test_report_with_single_reading(client, property_id):
    assert _record(client, property_id, "CO2", 700).status_code == 201

    resp = client.get(f"/properties/{property_id}/report")
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert isinstance(data["categories"], list)
    assert data["overall_score"] == 100
    assert [r["name"] for r in data["rooms"]] == ["Whole-home / Unassigned"]
    assert data["rooms"][0]["insufficient_data"] == ["water", "ether"]


def test_report_for_room_without_readings(client, property_id):
    client.post(f"/properties/{property_id}/rooms", json={"name": "Attic"})

    resp = client.get(f"/properties/{property_id}/report")
    assert resp.status_code == 200, resp.text
    rooms = resp.json()["rooms"]
    assert rooms[0]["name"] == "Attic"
    assert rooms[0]["scores"] == {"air": None, "water": None, "ether": None}


def test_invalid_threshold_override_stops_startup(monkeypatch):
    # good_max above the default fair_max of 1200
    monkeypatch.setattr(main.settings, "threshold_overrides", {"CO2": {"good_max": 1300}})

    with pytest.raises(ConfigurationError):
        with TestClient(main.app):
            pass


def test_property_profile_round_trip(client):
    payload = {
        "address": "77 Bayou Ln",
        "sqft": 2150,
        "year_built": 1987,
        "primary_contact_email": " owner@example.com ",
        "occupants_adults": 2,
        "occupants_children": 1,
        "occupants_animals": 0,
        "occupants_allergies": True,
        "occupants_asthma": False,
    }
    resp = client.post("/properties", json=payload)
    assert resp.status_code == 201, resp.text

    data = client.get(f"/properties/{resp.json()['id']}").json()
    assert data["sqft"] == 2150
    assert data["year_built"] == 1987
    assert data["primary_contact_email"] == "owner@example.com"
    assert data["occupants_children"] == 1
    assert data["occupants_allergies"] is True
    assert data["occupants_asthma"] is False


def test_property_profile_rejects_bad_values(client):
    assert client.post("/properties", json={"sqft": -5}).status_code == 422
    assert client.post("/properties", json={"primary_contact_email": "not-an-email"}).status_code == 422


def test_delete_room_moves_readings_to_unassigned(client, property_id):
    den = client.post(f"/properties/{property_id}/rooms", json={"name": "Den"}).json()["id"]
    _record(client, property_id, "CO2", 1000, room_id=den)
    _record(client, property_id, "RF", 0.1, room_id=den)

    resp = client.delete(f"/properties/{property_id}/rooms/{den}")
    assert resp.status_code == 204

    assert client.get(f"/properties/{property_id}/rooms").json() == []
    listed = client.get(f"/properties/{property_id}/measurements").json()
    assert [m["room_id"] for m in listed] == [None, None]

    data = client.get(f"/properties/{property_id}/report").json()
    assert [r["name"] for r in data["rooms"]] == ["Whole-home / Unassigned"]
    assert data["rooms"][0]["reading_count"] == 2
    # property-level worst case is unchanged
    assert {m["key"]: m["value"] for m in data["metrics"]}["CO2"] == 1000


def test_delete_room_of_other_property_is_404(client, property_id):
    other = client.post("/properties", json={"address": "9 Oak Ave"}).json()["id"]
    room_id = client.post(f"/properties/{other}/rooms", json={"name": "Den"}).json()["id"]

    assert client.delete(f"/properties/{property_id}/rooms/{room_id}").status_code == 404
    assert client.delete(f"/properties/{other}/rooms/{uuid.uuid4()}").status_code == 404
    assert len(client.get(f"/properties/{other}/rooms").json()) == 1
