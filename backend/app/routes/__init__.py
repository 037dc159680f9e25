"""API routes."""

from .clients import router as clients_router

__all__ = [
    "clients_router",
]
