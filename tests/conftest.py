"""
Shared pytest fixtures.

Environment overrides are applied before the application package is
imported so the module-level settings pick them up.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DEBUG", "false")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from userapi.domain.users.ports import UserStore
from userapi.infrastructure.db import build_engine
from userapi.infrastructure.users.schema import create_schema
from userapi.infrastructure.users.sql_user_store import SqlUserStore
from userapi.interfaces.users.dependencies import get_user_store
from userapi.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database with the users table."""
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> SqlUserStore:
    return SqlUserStore(engine=engine)


@pytest.fixture
def mock_store() -> MagicMock:
    return MagicMock(spec=UserStore)


@pytest.fixture
def client(store):
    """TestClient backed by the in-memory store."""
    app.dependency_overrides[get_user_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_client(mock_store):
    """TestClient backed by a mocked store."""
    app.dependency_overrides[get_user_store] = lambda: mock_store
    yield TestClient(app)
    app.dependency_overrides.clear()
