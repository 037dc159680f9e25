"""Tests for the shiptivity CLI."""

import json

import pytest

from shiptivity.cli.__main__ import main
from shiptivity.storage import DEMO_CLIENTS, SQLiteClientStore
from shiptivity.types import Lane


@pytest.fixture(autouse=True)
def reset_logging():
    import logging

    yield
    logger = logging.getLogger("shiptivity")
    for h in logger.handlers:
        h.close()
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def db(tmp_path):
    return str(tmp_path / "cli.db")


@pytest.fixture
def seeded_db(db):
    assert main(["--db", db, "seed"]) == 0
    return db


def _json(capsys):
    return json.loads(capsys.readouterr().out)


class TestInitAndSeed:
    def test_init_creates_database(self, db, capsys):
        assert main(["--db", db, "init"]) == 0
        assert "Database ready" in capsys.readouterr().out

    def test_seed_only_fills_empty_board(self, seeded_db, capsys):
        capsys.readouterr()
        assert main(["--db", seeded_db, "seed"]) == 0
        assert "nothing seeded" in capsys.readouterr().out
        with SQLiteClientStore(seeded_db) as store:
            assert len(store.list_clients()) == len(DEMO_CLIENTS)

    def test_default_db_in_data_dir(self, data_dir):
        assert main(["init"]) == 0
        assert (data_dir / "clients.db").exists()


class TestListShowMove:
    def test_list_lane_json(self, seeded_db, capsys):
        capsys.readouterr()
        assert main(["--db", seeded_db, "list", "--status", "in-progress", "--json"]) == 0
        clients = _json(capsys)
        assert [c["priority"] for c in clients] == [1, 2, 3]
        assert {c["status"] for c in clients} == {"in-progress"}

    def test_list_board_text(self, seeded_db, capsys):
        capsys.readouterr()
        assert main(["--db", seeded_db, "list"]) == 0
        out = capsys.readouterr().out
        assert "backlog (4)" in out
        assert "complete (3)" in out

    def test_show(self, seeded_db, capsys):
        capsys.readouterr()
        assert main(["--db", seeded_db, "show", "1", "--json"]) == 0
        assert _json(capsys)["name"] == DEMO_CLIENTS[0][0]

    def test_move(self, seeded_db, capsys):
        capsys.readouterr()
        assert main(["--db", seeded_db, "move", "1", "--status", "complete", "--json"]) == 0
        moved = _json(capsys)
        assert (moved["status"], moved["priority"]) == ("complete", 4)
        with SQLiteClientStore(seeded_db) as store:
            assert [p for _, p in store.lane_priorities(Lane.BACKLOG)] == [1, 2, 3]

    def test_invalid_lane_exit_code(self, seeded_db, capsys):
        assert main(["--db", seeded_db, "move", "1", "--status", "done"]) == 2
        assert "Status can only be one of" in capsys.readouterr().err

    def test_unknown_id_exit_code(self, seeded_db, capsys):
        assert main(["--db", seeded_db, "show", "999"]) == 2
        assert "Cannot find client with that id." in capsys.readouterr().err

    def test_oversized_id_exit_code(self, seeded_db, capsys):
        assert main(["--db", seeded_db, "move", "99999999999999999999999", "--priority", "1"]) == 2
        assert "Cannot find client with that id." in capsys.readouterr().err


class TestAudit:
    def test_clean_board(self, seeded_db, capsys):
        capsys.readouterr()
        assert main(["--db", seeded_db, "audit", "--json"]) == 0
        assert _json(capsys)["ok"] is True

    def test_corrupted_board(self, seeded_db, capsys):
        with SQLiteClientStore(seeded_db) as store:
            store.move_client(1, Lane.BACKLOG, 7)
        capsys.readouterr()
        assert main(["--db", seeded_db, "audit"]) == 1
        assert "violation(s)" in capsys.readouterr().out
