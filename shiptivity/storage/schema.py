"""Database schema for the shiptivity SQLite store.

Contains:
- Schema DDL (SCHEMA)
- Schema version tracking (SCHEMA_VERSION)
- Database initialization (init_db)
"""

import logging
import sqlite3

logger = logging.getLogger(__name__)

# Schema version for migrations
SCHEMA_VERSION = 1

SCHEMA = """
-- Schema version tracking
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY
);

-- Client cards. status is the lane, priority the 1-based rank inside it.
-- No UNIQUE(status, priority): batched shifts pass through transient
-- duplicates before the statement completes.
CREATE TABLE IF NOT EXISTS clients (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    status TEXT NOT NULL CHECK (status IN ('backlog', 'in-progress', 'complete')),
    priority INTEGER NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_clients_lane ON clients(status, priority);
"""


def init_db(conn: sqlite3.Connection) -> None:
    """Create tables and record the schema version.

    CREATE TABLE IF NOT EXISTS keeps this safe to run against an existing
    database, including a ``clients.db`` created by earlier versions of the service.
    """
    conn.executescript(SCHEMA)

    row = conn.execute("SELECT version FROM schema_version LIMIT 1").fetchone()
    if row is None:
        conn.execute("INSERT INTO schema_version (version) VALUES (?)", (SCHEMA_VERSION,))
    elif row[0] != SCHEMA_VERSION:
        logger.info(f"Updating schema version {row[0]} -> {SCHEMA_VERSION}")
        conn.execute("UPDATE schema_version SET version = ?", (SCHEMA_VERSION,))
