import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from devicehub.core.config import settings
from devicehub.db.session import get_db
from devicehub.main import app


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "app": settings.PROJECT_NAME, "version": settings.VERSION}


@pytest.mark.parametrize("path, keys", [
    ("/temperature", {"valor", "timestamp"}),
    ("/velocidad", {"nomnre", "apellido"}),
    ("/Tiempo", {"Hora", "ciudad"}),
])
def test_mock_sensor_readings(client, path, keys):
    response = client.get(path)

    assert response.status_code == 200
    assert set(response.json()) == keys


@pytest.fixture
def broken_client(engine):
    # Tables are never created, so every query fails at the storage layer
    session_factory = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_storage_failure_is_500_without_details(broken_client):
    response = broken_client.post("/login-device", json={"enrollId": "E1"})

    assert response.status_code == 500
    assert response.json() == {"message": "Error interno del servidor"}


def test_relay_storage_failure_is_500(broken_client):
    assert broken_client.get("/status").status_code == 500


@pytest.fixture
def lenient_client(session_factory):
    # Let unhandled errors reach the app's catch-all handler instead of the test
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_unexpected_error_is_json_500(lenient_client, monkeypatch, caplog):
    async def refuse(db, enroll_id):
        raise ConnectionRefusedError("database unreachable")
    monkeypatch.setattr("devicehub.api.v1.endpoints.device.get_device_by_enroll_id", refuse)

    with caplog.at_level(logging.ERROR, logger="devicehub.main"):
        response = lenient_client.post("/login-device", json={"enrollId": "E1"})

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"message": "Error interno del servidor"}
    assert "database unreachable" not in response.text
    assert any(record.exc_info for record in caplog.records)
