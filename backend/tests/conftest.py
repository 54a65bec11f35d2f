import pytest
from fastapi.testclient import TestClient

from savepoint.config import get_config
from savepoint.main import create_app
from savepoint.store import GameStore


@pytest.fixture(autouse=True)
def fresh_config():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def store() -> GameStore:
    return GameStore()


@pytest.fixture
def client(store: GameStore) -> TestClient:
    return TestClient(create_app(store))
