"""Logging setup for shiptivity.

Records of the ``shiptivity`` logger hierarchy go to
``<data dir>/logs/local-YYYY-MM-DD.log`` once logging is set up. Board
mutations are logged on ``shiptivity.events``, one line each.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from .utils import get_shiptivity_home

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

events_logger = logging.getLogger("shiptivity.events")


def _log_dir() -> Path:
    log_dir = get_shiptivity_home() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _today() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def setup_shiptivity_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``shiptivity`` logger with a dated file handler.

    Safe to call repeatedly; handlers are only added once. A console
    handler is added at DEBUG level.
    """
    logger = logging.getLogger("shiptivity")
    resolved = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logger.setLevel(resolved)
    # Handlers below own the output; keep records off the root logger
    logger.propagate = False

    if any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    file_handler = logging.FileHandler(_log_dir() / f"local-{_today()}.log")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if resolved == logging.DEBUG:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``shiptivity`` hierarchy."""
    if name != "shiptivity" and not name.startswith("shiptivity."):
        name = f"shiptivity.{name}"
    return logging.getLogger(name)


def log_board_event(event_type: str, details: str) -> None:
    """Log a single board event line on the ``shiptivity.events`` logger."""
    events_logger.info(f"{event_type} | {details}")


def log_reposition(
    client_id: int,
    from_lane: str,
    from_priority: int,
    to_lane: str,
    to_priority: int,
) -> None:
    log_board_event(
        "reposition",
        f"id={client_id} from={from_lane}#{from_priority} to={to_lane}#{to_priority}",
    )


def log_client_added(client_id: int, lane: str, priority: int) -> None:
    log_board_event("add", f"id={client_id} lane={lane} priority={priority}")
