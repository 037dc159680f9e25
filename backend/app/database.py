"""Database utilities for the Shiptivity backend.

The store is process-wide: opened in the application lifespan, kept on
``app.state.store`` and handed to routes through the ``Store`` dependency.
"""

from typing import Annotated

from fastapi import Depends, Request

from shiptivity.reorder import ReorderEngine
from shiptivity.storage import SQLiteClientStore, seed_demo_clients

from .config import Settings
from .logging_config import get_logger

logger = get_logger("shiptivity.database")


def open_store(settings: Settings) -> SQLiteClientStore:
    """Open the configured store, seeding it when asked to."""
    store = SQLiteClientStore(settings.database_path)
    if settings.seed_on_startup:
        seed_demo_clients(store)
    logger.info(f"Opened client store at {settings.database_path}")
    return store


def get_store(request: Request) -> SQLiteClientStore:
    """FastAPI dependency for the client store."""
    return request.app.state.store


def get_engine(store: Annotated[SQLiteClientStore, Depends(get_store)]) -> ReorderEngine:
    """FastAPI dependency for the reordering engine."""
    return ReorderEngine(store)


# Type aliases for dependency injection
Store = Annotated[SQLiteClientStore, Depends(get_store)]
Engine = Annotated[ReorderEngine, Depends(get_engine)]
