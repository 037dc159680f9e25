"""Record storage for shiptivity."""

from .schema import SCHEMA_VERSION, init_db
from .seed import DEMO_CLIENTS, seed_demo_clients
from .sqlite import SQLiteClientStore

__all__ = [
    "DEMO_CLIENTS",
    "SCHEMA_VERSION",
    "SQLiteClientStore",
    "init_db",
    "seed_demo_clients",
]
