"""Shared fixtures.

API tests run against the in-memory backend, so no MongoDB is needed.
"""
import pytest
from fastapi.testclient import TestClient

from user_api.core.config import Settings, reset_settings
from user_api.di.container import DIContainer
from user_api.main import create_application


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Pin the environment so a developer's .env or shell never leaks into tests."""
    monkeypatch.setenv("USER_REPOSITORY", "inmemory")
    monkeypatch.setenv("TIMEZONE", "UTC")
    monkeypatch.delenv("MONGO_URI", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def container(settings):
    return DIContainer(settings)


@pytest.fixture
def client(container, settings):
    app = create_application(container=container, settings=settings)
    with TestClient(app) as test_client:
        yield test_client
