from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from tests.support import (
    TEST_DATABASE_URL,
    FakeBlobStore,
    FakeIdentityProvider,
    attorney_payload,
    auth,
    memory_database,
)


@pytest.fixture
def identity_provider():
    provider = FakeIdentityProvider()
    provider.add_user("user_superadmin", role="superadmin", first_name="Ana", last_name="Root")
    provider.add_user("user_admin", role="admin", first_name="Luis", last_name="Admin")
    provider.add_user("user_creator", role="content_creator", first_name="Sofía", last_name="Blog")
    provider.add_user("user_creator2", role="content_creator", first_name="Pablo", last_name="Notas")
    provider.add_user("user_dev", role="developer")
    provider.add_user("user_plain", role=None)
    return provider


@pytest.fixture
def blob_store():
    return FakeBlobStore()


@pytest.fixture
def settings():
    return Settings(database_url=TEST_DATABASE_URL, upload_max_bytes=2048, log_level="WARNING")


@pytest.fixture
def client(settings, identity_provider, blob_store):
    app = create_app(
        settings=settings,
        database=memory_database(),
        identity_provider=identity_provider,
        blob_store=blob_store,
    )
    # El contexto ejecuta el lifespan (creación de tablas)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def database():
    db = memory_database()
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database):
    async with database.session_factory() as db_session:
        yield db_session


@pytest.fixture
def create_attorney(client):
    def _create(**overrides) -> Dict[str, Any]:
        response = client.post("/api/attorneys", json=attorney_payload(**overrides), headers=auth("user_admin"))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def create_category(client):
    def _create(name: str = "Corporativo", **overrides) -> Dict[str, Any]:
        body = {"name": name}
        body.update(overrides)
        response = client.post("/api/admin/blog/categories", json=body, headers=auth("user_admin"))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def create_post(client, create_category):
    state = {}

    def _create(user_id: str = "user_admin", **overrides) -> Dict[str, Any]:
        if "category" not in state:
            state["category"] = create_category()
        body = {
            "title": "Reforma laboral 2024",
            "content": "<p>Contenido</p>",
            "excerpt": "Resumen de la reforma",
            "categoryId": state["category"]["id"],
            "tags": ["laboral"],
        }
        body.update(overrides)
        response = client.post("/api/admin/blog/posts", json=body, headers=auth(user_id))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
