# Test configuration: in-memory SQLite per test, FastAPI TestClient bound to it.

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")

from datetime import datetime, timezone
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import todo_api.models  # noqa: F401
from todo_api.core.database import get_session
from main import app


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        SQLModel.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture()
def session(engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine) -> Iterator[TestClient]:
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def register(client: TestClient) -> Callable[..., str]:
    """Register a user through the API and return its bearer token."""

    def _register(username: str, email: str | None = None, password: str = "password123") -> str:
        r = client.post(
            "/api/auth/register",
            json={"username": username, "email": email or f"{username}@example.com", "password": password},
        )
        assert r.status_code == 201, r.text
        return r.json()["token"]

    return _register


def as_utc(value) -> datetime:
    """Normalise a datetime or ISO string to an aware UTC datetime; naive means UTC."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
