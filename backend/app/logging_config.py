"""Logging helpers for the Shiptivity backend.

Backend loggers live in the ``shiptivity`` hierarchy so they share the
library's file log.
"""

from shiptivity.logging_config import get_logger, setup_shiptivity_logging

__all__ = ["configure_logging", "get_logger", "log_request_rejected"]

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Attach the shiptivity file log once per process."""
    global _configured
    if _configured:
        return
    setup_shiptivity_logging(level=level)
    _configured = True


def log_request_rejected(route: str, raw_id, reason: str) -> None:
    """Log a validation rejection (no mutation was attempted)."""
    get_logger("shiptivity.api").info(f"REJECTED | {route} | id={raw_id!r} | {reason}")
