"""Tests for health endpoints."""

from fastapi.testclient import TestClient

from src.music_api.core.services import DbSessionService


def test_liveness(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"]["database"]["status"] == "healthy"
    assert body["checks"]["database"]["type"] == "sqlite"


def test_readiness_reports_database_failure(client: TestClient, monkeypatch):
    monkeypatch.setattr(DbSessionService, "health_check", lambda self: False)

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["checks"]["database"]["status"] == "unhealthy"


def test_lifespan_creates_tables(database_service: DbSessionService):
    from src.music_api.api.http.app import app
    from src.music_api.api.http.app_data import ApplicationDependencies

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )
    try:
        with TestClient(app) as client:
            response = client.get("/musics")
            assert response.status_code == 200
            assert response.json()["content"] == []
    finally:
        app.state.app_dependencies = None
