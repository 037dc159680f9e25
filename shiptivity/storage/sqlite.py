"""SQLite record store for the shiptivity board.

One long-lived connection per store, opened at construction and closed
explicitly. Every public method holds the store lock, and ``transaction()``
holds it for the whole block, so writers are serialized within a process
and ``BEGIN IMMEDIATE`` serializes them across processes.
"""

import contextlib
import logging
import sqlite3
import threading
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ..logging_config import log_client_added
from ..protocols import StorageError
from ..types import Client, Lane
from .schema import init_db

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"

# Range of a SQLite INTEGER; ids outside it cannot name a row
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def _row_to_client(row: sqlite3.Row) -> Client:
    return Client(
        id=row["id"],
        name=row["name"],
        status=Lane(row["status"]),
        priority=row["priority"],
        description=row["description"] or "",
    )


class SQLiteClientStore:
    """SQLite-backed client store.

    Args:
        db_path: Database file, or ``":memory:"`` for a throwaway store.
        initialize: Create the schema on open.
    """

    # Seconds to wait on a locked database before failing
    BUSY_TIMEOUT = 5.0

    def __init__(self, db_path: Union[str, Path] = MEMORY_DB, initialize: bool = True):
        self.db_path = db_path if str(db_path) == MEMORY_DB else Path(db_path)
        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._lock = threading.RLock()
        self._tx_depth = 0
        self._conn: Optional[sqlite3.Connection] = self._open()

        if initialize:
            # executescript commits on its own; run outside transaction()
            with self._lock:
                try:
                    init_db(self._conn)
                except sqlite3.Error as e:
                    raise StorageError(f"Cannot initialize schema: {e}") from e

    def _open(self) -> sqlite3.Connection:
        try:
            # isolation_level=None: transactions are managed explicitly below
            conn = sqlite3.connect(
                str(self.db_path),
                timeout=self.BUSY_TIMEOUT,
                isolation_level=None,
                check_same_thread=False,
            )
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        if self.db_path != MEMORY_DB:
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Store is closed")
        return self._conn

    @property
    def total_changes(self) -> int:
        """Rows modified through this store's connection since it was opened."""
        return self.conn.total_changes

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def __enter__(self) -> "SQLiteClientStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # === Transactions ===

    @contextlib.contextmanager
    def transaction(self) -> Iterator["SQLiteClientStore"]:
        """Run a block as one write transaction.

        Nested calls join the outermost transaction. On any exception the
        whole transaction is rolled back and the exception re-raised
        (sqlite3 errors as StorageError).
        """
        with self._lock:
            if self._tx_depth > 0:
                self._tx_depth += 1
                try:
                    yield self
                finally:
                    self._tx_depth -= 1
                return

            self._execute("BEGIN IMMEDIATE")
            self._tx_depth = 1
            try:
                yield self
            except Exception as e:
                logger.debug(f"Transaction failed, rolling back: {e}")
                self._tx_depth = 0
                self.conn.rollback()
                if isinstance(e, sqlite3.Error):
                    raise StorageError(str(e)) from e
                raise
            else:
                self._tx_depth = 0
                try:
                    self._execute("COMMIT")
                except StorageError:
                    if self.conn.in_transaction:
                        self.conn.rollback()
                    raise

    def _execute(self, sql: str, params: Tuple = ()) -> sqlite3.Cursor:
        try:
            return self.conn.execute(sql, params)
        except sqlite3.Error as e:
            logger.error(f"SQLite error: {e}")
            raise StorageError(str(e)) from e

    # === Reads ===

    def get_client(self, client_id: int) -> Optional[Client]:
        if not SQLITE_INT_MIN <= client_id <= SQLITE_INT_MAX:
            return None
        with self._lock:
            row = self._execute(
                "SELECT * FROM clients WHERE id = ? LIMIT 1", (client_id,)
            ).fetchone()
        return _row_to_client(row) if row else None

    def list_clients(self, lane: Optional[Lane] = None) -> List[Client]:
        """List clients, in priority order when filtered by lane, else by id."""
        with self._lock:
            if lane is None:
                rows = self._execute("SELECT * FROM clients ORDER BY id").fetchall()
            else:
                rows = self._execute(
                    "SELECT * FROM clients WHERE status = ? ORDER BY priority, id",
                    (Lane(lane).value,),
                ).fetchall()
        return [_row_to_client(row) for row in rows]

    def count_lane(self, lane: Lane) -> int:
        with self._lock:
            row = self._execute(
                "SELECT COUNT(id) AS count FROM clients WHERE status = ?", (Lane(lane).value,)
            ).fetchone()
        return row["count"]

    def lane_priorities(self, lane: Lane) -> List[Tuple[int, int]]:
        """``(id, priority)`` pairs of a lane, ordered by priority."""
        with self._lock:
            rows = self._execute(
                "SELECT id, priority FROM clients WHERE status = ? ORDER BY priority, id",
                (Lane(lane).value,),
            ).fetchall()
        return [(row["id"], row["priority"]) for row in rows]

    # === Writes ===

    def shift_lane(
        self, lane: Lane, from_priority: int, delta: int, exclude_id: Optional[int] = None
    ) -> int:
        """Add ``delta`` to every priority >= ``from_priority`` in ``lane``.

        One UPDATE statement per call. ``exclude_id`` leaves that client
        untouched (the one being moved).
        """
        sql = "UPDATE clients SET priority = priority + ? WHERE status = ? AND priority >= ?"
        params: Tuple = (delta, Lane(lane).value, from_priority)
        if exclude_id is not None:
            sql += " AND id != ?"
            params += (exclude_id,)
        with self._lock:
            cursor = self._execute(sql, params)
        return cursor.rowcount

    def move_client(self, client_id: int, lane: Lane, priority: int) -> None:
        with self._lock:
            self._execute(
                "UPDATE clients SET status = ?, priority = ? WHERE id = ?",
                (Lane(lane).value, priority, client_id),
            )

    def add_client(self, name: str, lane: Lane = Lane.BACKLOG, description: str = "") -> Client:
        """Insert a client at the bottom of ``lane``."""
        lane = Lane(lane)
        with self.transaction():
            priority = self.count_lane(lane) + 1
            cursor = self._execute(
                "INSERT INTO clients (name, description, status, priority) VALUES (?, ?, ?, ?)",
                (name, description, lane.value, priority),
            )
            client_id = cursor.lastrowid
        log_client_added(client_id, lane.value, priority)
        return Client(
            id=client_id, name=name, status=lane, priority=priority, description=description
        )
