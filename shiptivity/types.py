"""
Shared board types for shiptivity.

The Lane enum and the Client record are the vocabulary shared by the
store, the validator, the reordering engine and the HTTP layer.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict

# === Enums ===


class Lane(str, Enum):
    """Swimlane a client belongs to. Stored in the ``status`` column."""

    BACKLOG = "backlog"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"


# Canonical set of valid lane string values, derived from the enum.
VALID_LANE_VALUES = frozenset(lane.value for lane in Lane)

# Board display order
LANE_ORDER = (Lane.BACKLOG, Lane.IN_PROGRESS, Lane.COMPLETE)


# === Records ===


@dataclass
class Client:
    """A client card on the board."""

    id: int
    name: str
    status: Lane
    priority: int  # 1 = top of the lane
    description: str = ""

    @property
    def lane(self) -> Lane:
        return self.status

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass(frozen=True)
class Placement:
    """Where a client sits: its lane and its rank within that lane."""

    lane: Lane
    priority: int

    def __str__(self) -> str:
        return f"{self.lane.value}#{self.priority}"
