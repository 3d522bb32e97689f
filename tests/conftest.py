"""Shared fixtures: in-memory database, API client and user helpers."""

from __future__ import annotations

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("INGESTION_URL", "http://ingest.test/ingest")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from docflow.auth.deps import get_db
from docflow.db.session import init_db
from docflow.main import create_app
from docflow.users.service import create_user


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_app(engine):
    """Build a fresh app whose sessions come from the test engine."""
    Session = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def _get_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    def _make():
        app = create_app()
        app.dependency_overrides[get_db] = _get_db
        return app

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def login(client: TestClient, email: str, password: str) -> str:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


@pytest.fixture
def admin_headers(client, db) -> dict[str, str]:
    create_user(db, "admin@example.com", "admin-pass", role="admin")
    return {"Authorization": f"Bearer {login(client, 'admin@example.com', 'admin-pass')}"}


@pytest.fixture
def viewer_headers(client, db) -> dict[str, str]:
    create_user(db, "viewer@example.com", "viewer-pass")
    return {"Authorization": f"Bearer {login(client, 'viewer@example.com', 'viewer-pass')}"}
