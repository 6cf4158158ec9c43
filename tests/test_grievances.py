"""
Tests for grievances and the status transition rule
"""
import pytest
from bson import ObjectId

from welfare_api.exceptions import InvalidStatusError
from welfare_api.services.grievance_service import build_status_update

GRIEVANCE = {"userId": "u1", "subject": "Pension delay", "details": "Two months late"}


def _file(client, **overrides):
    r = client.post("/api/grievances", json={**GRIEVANCE, **overrides})
    assert r.status_code == 201, r.text
    return r.json()["grievance"]


def _stored(fake_db, grievance_id):
    return next(d for d in fake_db["grievances"].documents if str(d["_id"]) == grievance_id)


def test_file_grievance_defaults(client):
    grievance = _file(client)
    assert grievance["status"] == "Open"
    assert grievance["priority"] == "low"
    assert "filedAt" in grievance
    assert "resolvedAt" not in grievance


def test_file_grievance_cannot_choose_status(client):
    grievance = _file(client, status="Resolved", priority="critical")
    assert grievance["status"] == "Open"
    assert grievance["priority"] == "critical"


def test_list_grievances_by_user(client):
    _file(client)
    _file(client, userId="u2")
    assert len(client.get("/api/grievances").json()) == 2
    mine = client.get("/api/grievances", params={"userId": "u2"}).json()
    assert [g["userId"] for g in mine] == ["u2"]


def test_resolved_then_in_progress_clears_resolved_at(client, fake_db):
    grievance_id = _file(client)["_id"]

    r = client.patch(f"/api/grievances/{grievance_id}/status", json={"status": "Resolved"})
    assert r.status_code == 200, r.text
    assert r.json()["grievance"]["resolvedAt"] is not None

    r = client.patch(f"/api/grievances/{grievance_id}/status", json={"status": "In Progress"})
    assert r.status_code == 200
    assert r.json()["grievance"]["status"] == "In Progress"
    assert "resolvedAt" not in r.json()["grievance"]
    assert "resolvedAt" not in _stored(fake_db, grievance_id)


def test_rejected_stamps_resolved_at(client, fake_db):
    grievance_id = _file(client)["_id"]
    r = client.patch(f"/api/grievances/{grievance_id}/status", json={"status": "Rejected"})
    assert r.status_code == 200
    assert r.json()["grievance"]["status"] == "Rejected"
    assert _stored(fake_db, grievance_id)["resolvedAt"] is not None


def test_resolved_to_rejected_is_allowed(client):
    grievance_id = _file(client)["_id"]
    client.patch(f"/api/grievances/{grievance_id}/status", json={"status": "Resolved"})
    r = client.patch(f"/api/grievances/{grievance_id}/status", json={"status": "Rejected"})
    assert r.status_code == 200
    assert r.json()["grievance"]["resolvedAt"] is not None


@pytest.mark.parametrize("status", ["Open", "banana", None, 3])
def test_invalid_status_is_400_and_record_unchanged(client, fake_db, status):
    grievance_id = _file(client)["_id"]
    before = dict(_stored(fake_db, grievance_id))
    r = client.patch(f"/api/grievances/{grievance_id}/status", json={"status": status})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid status provided"
    assert _stored(fake_db, grievance_id) == before


def test_status_update_unknown_id_is_404(client):
    r = client.patch(f"/api/grievances/{ObjectId()}/status", json={"status": "Resolved"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Grievance not found"


def test_build_status_update():
    assert build_status_update("In Progress") == {
        "$set": {"status": "In Progress"},
        "$unset": {"resolvedAt": ""}
    }
    update = build_status_update("Resolved")
    assert update["$set"]["status"] == "Resolved"
    assert update["$set"]["resolvedAt"] is not None
    with pytest.raises(InvalidStatusError):
        build_status_update("Open")
