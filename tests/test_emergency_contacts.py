from bson import ObjectId

CONTACT = {"userId": "u1", "name": "Asha", "phone": "+91 98765 43210", "relationship": "Spouse"}


def _create(client, **overrides):
    r = client.post("/api/emergency-contacts", json={**CONTACT, **overrides})
    assert r.status_code == 201, r.text
    return r.json()["contact"]


def test_contacts_are_scoped_to_user(client):
    contact = _create(client)

    mine = client.get("/api/users/u1/emergency-contacts")
    assert mine.status_code == 200
    assert [c["_id"] for c in mine.json()] == [contact["_id"]]

    other = client.get("/api/users/u2/emergency-contacts")
    assert other.status_code == 200
    assert other.json() == []


def test_create_requires_phone(client):
    r = client.post("/api/emergency-contacts", json={"userId": "u1", "name": "A", "relationship": "Brother"})
    assert r.status_code == 400


def test_partial_update(client):
    contact_id = _create(client)["_id"]
    r = client.patch(f"/api/emergency-contacts/{contact_id}", json={"phone": "100"})
    assert r.status_code == 200, r.text
    contact = r.json()["contact"]
    assert contact["phone"] == "100"
    assert contact["name"] == "Asha"


def test_empty_update_returns_current_record(client):
    contact_id = _create(client)["_id"]
    r = client.patch(f"/api/emergency-contacts/{contact_id}", json={})
    assert r.status_code == 200
    assert r.json()["contact"]["name"] == "Asha"


def test_update_missing_contact_is_404(client):
    r = client.patch(f"/api/emergency-contacts/{ObjectId()}", json={"name": "B"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Contact not found"


def test_delete_contact(client):
    contact_id = _create(client)["_id"]
    assert client.delete(f"/api/emergency-contacts/{contact_id}").status_code == 200
    assert client.get("/api/users/u1/emergency-contacts").json() == []
    assert client.delete(f"/api/emergency-contacts/{contact_id}").status_code == 404
