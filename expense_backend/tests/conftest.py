# expense_backend/tests/conftest.py
# Test configuration and fixtures for pytest

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from expense_backend import models
from expense_backend.auth import AuthManager
from expense_backend.config import Settings
from expense_backend.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture()
def settings():
    """Settings independent of the environment; bcrypt cost 4 keeps hashing fast."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture()
def engine():
    """
    A fresh in-memory SQLite database per test. StaticPool keeps a single
    connection so every session sees the same database.
    """
    test_engine = models.build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.create_tables(test_engine)
    yield test_engine
    models.drop_tables(test_engine)
    test_engine.dispose()


@pytest.fixture()
def db_session(engine):
    session = models.build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def auth_manager(settings):
    return AuthManager.from_settings(settings)


@pytest.fixture()
def app(settings, engine):
    return create_app(settings, engine=engine)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
