"""Shared fixtures: an in-memory document store and an app built around it."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.db.session import DocumentStore
from app.main import create_app


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    store = DocumentStore("mongodb://localhost:27017", "ams-test", client_factory=mongomock.MongoClient)
    yield store
    store.close()


@pytest.fixture
def db(store):
    return store.get_connection()


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setattr(settings, "SECRET_KEY", "test-secret")
    monkeypatch.setattr(settings, "OWNER_USERNAME", "owner")
    monkeypatch.setattr(settings, "OWNER_PASSWORD", "owner-password")
    monkeypatch.setattr(settings, "OWNER_EMAIL", "owner@example.com")
    monkeypatch.setattr(settings, "CACHE_TTL_SECONDS", 300.0)
    return settings


@pytest.fixture
def app(store, clock):
    return create_app(store=store, clock=clock)


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
