"""Shared fixtures: an in-memory store and an API client bound to it."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from app.db.init_db import init_db
from app.db.session import StoreClient
from app.main import create_app
from app.models.user import UserRole
from app.services.auth_service import AuthService


@pytest.fixture
def store():
    client = StoreClient.in_memory()
    init_db(client)
    yield client
    client.dispose()


@pytest.fixture
def db(store):
    with store.session() as session:
        yield session


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def signup(client):
    """Register a user and return ``(profile json, auth headers)``."""

    def _signup(email: str, role: str = "athlete", name: str = "홍길동", password: str = "secret123"):
        response = client.post("/api/v1/auth/register", json={
            "email": email, "password": password, "name": name, "phone": "010-1234-5678", "role": role,
        })
        assert response.status_code == 201, response.text
        token = client.post("/api/v1/auth/token", json={ "email": email, "password": password }).json()
        return response.json(), { "Authorization": f"Bearer {token['access_token']}" }

    return _signup


@pytest.fixture
def admin(client, store):
    """Auth headers of an admin created outside the public sign-up."""
    with store.session() as session:
        AuthService(session, store.feed).create_account("admin@example.com", "secret123", name="관리자",
                                                        phone="010-0000-0000", role=UserRole.ADMIN, )
    token = client.post("/api/v1/auth/token", json={ "email": "admin@example.com", "password": "secret123" }).json()
    return { "Authorization": f"Bearer {token['access_token']}" }
