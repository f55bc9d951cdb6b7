"""Shared fixtures: the app runs against a private in-memory SQLite database."""
from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from app.core.db import Base, SessionLocal, engine  # noqa: E402
from app.main import app as fastapi_app  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_schema() -> Generator[None, None, None]:
    """Recreate every table so each test starts from an empty store."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def api_app() -> FastAPI:
    return fastapi_app


@pytest.fixture
def test_client(api_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(api_app) as client:
        yield client


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def create_user(test_client: TestClient):
    """Create a user over HTTP and return the response body."""

    def _create(name: str = "John Doe", email: str = "john@example.com") -> dict:
        response = test_client.post("/api/users", json={"name": name, "email": email})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
