"""Rate limiting configuration for the Shiptivity backend."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_settings


def reposition_limit() -> str:
    """Limit applied to PUT /clients/{id}, read from settings at request time."""
    return get_settings().reposition_rate_limit


# Create limiter using client IP address as the key
limiter = Limiter(key_func=get_remote_address)
