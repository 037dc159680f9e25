"""Pytest configuration and fixtures for the backend API."""

import os

import pytest

# Settings are read once at import time (CORS); keep the default DB out of the cwd
os.environ.setdefault("DATABASE_PATH", ":memory:")
os.environ.setdefault("SEED_ON_STARTUP", "false")

from app.config import get_settings  # noqa: E402
from app.main import app  # noqa: E402
from app.rate_limit import limiter  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point logs and the database at a temp dir for every test."""
    monkeypatch.setenv("SHIPTIVITY_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "clients.db"))
    # File logging is exercised in the library tests
    monkeypatch.setattr("app.main.configure_logging", lambda level="INFO": None)
    get_settings.cache_clear()
    limiter.reset()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    """Test client with the lifespan (store open/close) running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(client):
    """The store the running app is using."""
    return app.state.store


@pytest.fixture
def board(store):
    """Backlog A(1) B(2) C(3), in-progress D(1), complete empty."""
    from shiptivity.types import Lane

    return {
        "A": store.add_client("Alpha", Lane.BACKLOG),
        "B": store.add_client("Bravo", Lane.BACKLOG),
        "C": store.add_client("Charlie", Lane.BACKLOG),
        "D": store.add_client("Delta", Lane.IN_PROGRESS),
    }
