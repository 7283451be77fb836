"""Shared fixtures: an in-memory SQLite pool injected into the app and repository."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from users_api.core.config import Settings
from users_api.core.db import Base, create_session_factory
from users_api.main import create_app
from users_api.models import user  # noqa: F401 - ensure models are registered
from users_api.repositories.user_repository import UserRepository


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine) -> UserRepository:
    return UserRepository(create_session_factory(engine))


@pytest.fixture
def app(engine):
    return create_app(settings=Settings(DB_CREATE_TABLES=False), engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def valid_user() -> dict:
    return {"username": "alice", "email": "a@b.com", "password": "password123"}
