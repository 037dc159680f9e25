"""
Shiptivity - Swimlane board for client onboarding.

Clients move through three ordered lanes (backlog, in-progress, complete),
each keeping a dense 1..N priority ranking.
"""

from .reorder import ReorderEngine
from .storage import SQLiteClientStore
from .types import Client, Lane

try:
    from importlib.metadata import version

    __version__ = version("shiptivity")
except Exception:
    __version__ = "0.0.0"

__all__ = ["Client", "Lane", "ReorderEngine", "SQLiteClientStore"]
