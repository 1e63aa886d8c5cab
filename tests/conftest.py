import asyncio
import os
import tempfile

# Settings are read once at import time, so the environment must be ready first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(), "devicehub.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from devicehub.db.session import create_tables, get_db
from devicehub.main import app


@pytest.fixture
def engine(tmp_path):
    # NullPool: no connection outlives the event loop that opened it
    return create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)


@pytest.fixture
def session_factory(engine):
    asyncio.run(create_tables(engine))
    return sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
def run_db(session_factory):
    """Run `fn(session)` against the test database outside of a request."""
    def runner(fn):
        async def _run():
            async with session_factory() as session:
                return await fn(session)
        return asyncio.run(_run())
    return runner


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register():
    """POST /register-device; pass status=None to leave it out of the body."""
    def _register(client, enroll_id="E1", device_name="D1", status="off"):
        body = {"enroll_id": enroll_id, "device_name": device_name}
        if status is not None:
            body["status"] = status
        return client.post("/register-device", json=body)
    return _register


@pytest.fixture
def login_headers():
    def _login_headers(client, enroll_id="E1"):
        response = client.post("/login-device", json={"enrollId": enroll_id})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _login_headers
