from fastapi.testclient import TestClient

from welfare_api.database import get_database
from welfare_api.main import app


def test_root_is_plain_text(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Military Welfare Backend API is running!"


def test_health_with_database(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_health_without_database():
    app.dependency_overrides[get_database] = lambda: None
    try:
        r = TestClient(app).get("/health")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 200
    assert r.json()["status"] == "unhealthy"


def test_routes_fail_with_500_without_database():
    app.dependency_overrides[get_database] = lambda: None
    try:
        r = TestClient(app).get("/api/grievances")
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500


def test_cors_allows_any_origin(client):
    r = client.get("/api/schemes", headers={"Origin": "http://example.org"})
    assert r.headers["access-control-allow-origin"] == "*"
