"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import random

import pytest
from fastapi.testclient import TestClient
from main import app
from shortlink_app.dependencies import get_url_service
from shortlink_app.services.short_code_strategies import RandomShortCodeStrategy, ShortCodeStrategy
from shortlink_app.services.url_service import URLService
from shortlink_app.storage.strategies import JsonFileSnapshotStorage
from shortlink_app.store.durable_store import DurableStore

BASE_URL = "http://localhost:8080/"


class ScriptedCodes(ShortCodeStrategy):
    """Generator that hands out a fixed sequence of codes"""

    def __init__(self, codes, length=6):
        super().__init__(length)
        self._codes = iter(codes)

    def generate(self) -> str:
        return next(self._codes)


@pytest.fixture
def snapshot_path(tmp_path):
    """Snapshot file inside a per-test temporary directory"""
    return tmp_path / "urls.json"


@pytest.fixture
def generator():
    """Seeded generator so failures are reproducible"""
    return RandomShortCodeStrategy(length=6, rng=random.Random(1234))


@pytest.fixture
def store(generator, snapshot_path):
    """
    Create a fresh, loaded store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    store = DurableStore(generator=generator, storage=JsonFileSnapshotStorage(snapshot_path))
    store.load_from_disk()
    return store


@pytest.fixture
def scripted_store(snapshot_path):
    """Factory for stores whose codes come from a fixed list"""
    def make(codes, storage=None):
        return DurableStore(
            generator=ScriptedCodes(codes),
            storage=storage or JsonFileSnapshotStorage(snapshot_path)
        )
    return make


@pytest.fixture
def url_service(store):
    return URLService(store=store, base_url=BASE_URL)


@pytest.fixture
def client(url_service):
    """
    Create a test client with the URL service dependency overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_url_service] = lambda: url_service

    # Create test client
    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
