"""
Shiptivity protocols and errors.

The reordering engine talks to its record store only through
ClientStoreProtocol, so any backend (SQLite here, a test double in the
test suite) can be injected.
"""

from contextlib import AbstractContextManager
from enum import Enum
from typing import List, Optional, Protocol, runtime_checkable

from .types import Client, Lane

# =============================================================================
# ERRORS
# =============================================================================


class ShiptivityError(Exception):
    """Base for all shiptivity errors."""

    pass


class ValidationError(ShiptivityError):
    """Raised when request input is rejected before any write happens.

    Carries the short and long messages returned to API callers, plus the
    HTTP status code the rejection maps to.
    """

    status_code = 400

    def __init__(self, message: str, long_message: str):
        self.message = message
        self.long_message = long_message
        super().__init__(f"{message} {long_message}")

    def to_dict(self) -> dict:
        return {"message": self.message, "long_message": self.long_message}


class InvalidIdReason(str, Enum):
    NOT_A_NUMBER = "not_a_number"
    NOT_FOUND = "not_found"


class InvalidIdError(ValidationError):
    """Raised when a client id is malformed or unknown."""

    _LONG_MESSAGES = {
        InvalidIdReason.NOT_A_NUMBER: "Id can only be integer.",
        InvalidIdReason.NOT_FOUND: "Cannot find client with that id.",
    }

    def __init__(self, reason: InvalidIdReason, client_id=None):
        self.reason = reason
        self.client_id = client_id
        self.status_code = 404 if reason is InvalidIdReason.NOT_FOUND else 400
        super().__init__("Invalid id provided.", self._LONG_MESSAGES[reason])


class InvalidLaneError(ValidationError):
    """Raised when a lane (status) name is not one of the recognized lanes."""

    def __init__(self, value=None):
        self.value = value
        super().__init__(
            "Invalid status provided.",
            "Status can only be one of the following: [backlog | in-progress | complete].",
        )


class StorageError(ShiptivityError):
    """Raised by store implementations on storage failures."""

    pass


# =============================================================================
# STORE PROTOCOL
# =============================================================================


@runtime_checkable
class ClientStoreProtocol(Protocol):
    """Record store contract used by the validator and the reordering engine."""

    def transaction(self) -> AbstractContextManager:
        """Scope in which every write commits together or not at all."""
        ...

    def get_client(self, client_id: int) -> Optional[Client]: ...

    def list_clients(self, lane: Optional[Lane] = None) -> List[Client]: ...

    def count_lane(self, lane: Lane) -> int: ...

    def shift_lane(
        self, lane: Lane, from_priority: int, delta: int, exclude_id: Optional[int] = None
    ) -> int:
        """Add ``delta`` to every priority >= ``from_priority`` in ``lane``.

        Returns the number of rows shifted.
        """
        ...

    def move_client(self, client_id: int, lane: Lane, priority: int) -> None: ...
