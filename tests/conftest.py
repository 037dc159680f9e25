"""
Pytest fixtures and test configuration for shiptivity tests.
"""

import pytest

from shiptivity.storage import SQLiteClientStore
from shiptivity.types import Lane


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Keep logs and default databases inside the test's temp dir."""
    path = tmp_path / "shiptivity-home"
    monkeypatch.setenv("SHIPTIVITY_DATA_DIR", str(path))
    return path


@pytest.fixture
def store():
    """Empty in-memory store."""
    s = SQLiteClientStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def file_store(tmp_path):
    """Empty store backed by a file."""
    s = SQLiteClientStore(tmp_path / "clients.db")
    yield s
    s.close()


@pytest.fixture
def make_board(store):
    """Factory: create clients from ``{lane: [name, ...]}`` in priority order.

    Returns a name -> Client mapping.
    """

    def _make(layout):
        created = {}
        for lane, names in layout.items():
            for name in names:
                created[name] = store.add_client(name, Lane(lane))
        return created

    return _make


@pytest.fixture
def board(make_board):
    """backlog A(1) B(2) C(3), in-progress X(1), complete empty."""
    return make_board({"backlog": ["A", "B", "C"], "in-progress": ["X"]})
