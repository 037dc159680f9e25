"""Demo board used by ``shiptivity seed`` and SEED_ON_STARTUP."""

import logging
from typing import List, Tuple

from ..types import Client, Lane

logger = logging.getLogger(__name__)

DEMO_CLIENTS: Tuple[Tuple[str, str, Lane], ...] = (
    ("Stark, White and Abbott", "Enterprise-wide user-facing open architecture", Lane.BACKLOG),
    ("Wiza LLC", "Pre-emptive bi-directional synergy", Lane.BACKLOG),
    ("Nolan LLC", "Phased neutral functionalities", Lane.BACKLOG),
    ("Thompson PLC", "Multi-layered well-modulated customer loyalty", Lane.BACKLOG),
    ("Walker-Williamson", "Profit-focused reciprocal budgetary management", Lane.IN_PROGRESS),
    ("Boehm and Sons", "Cross-group regional collaboration", Lane.IN_PROGRESS),
    ("Runolfsson, Hegmann and Block", "Universal client-server hierarchy", Lane.IN_PROGRESS),
    ("Schumm-Labadie", "Quality-focused mission-critical workforce", Lane.COMPLETE),
    ("Kohler Group", "Persistent next generation pricing structure", Lane.COMPLETE),
    ("Romaguera Inc", "Reactive system-worthy knowledge base", Lane.COMPLETE),
)


def seed_demo_clients(store) -> List[Client]:
    """Populate an empty board. Does nothing if any client exists."""
    with store.transaction():
        if store.list_clients():
            logger.info("Board already has clients, skipping seed")
            return []
        created = [
            store.add_client(name, lane=lane, description=description)
            for name, description, lane in DEMO_CLIENTS
        ]
    logger.info(f"Seeded {len(created)} demo clients")
    return created
