"""Request input validation.

Runs before the reordering engine touches the store. Ids and lanes are
rejected here; priorities are never rejected, the engine clamps them.
"""

import re
from typing import Any, Optional

from .protocols import (
    ClientStoreProtocol,
    InvalidIdError,
    InvalidIdReason,
    InvalidLaneError,
)
from .types import VALID_LANE_VALUES, Lane

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def parse_id(raw_id: Any) -> int:
    """Parse a client id without touching the store.

    Accepts ints and strings holding an optionally signed run of digits.

    Raises:
        InvalidIdError: NOT_A_NUMBER for anything else (bools and floats included)
    """
    if isinstance(raw_id, bool):
        raise InvalidIdError(InvalidIdReason.NOT_A_NUMBER, raw_id)
    if isinstance(raw_id, int):
        return raw_id
    if isinstance(raw_id, str) and _INTEGER_RE.match(raw_id.strip()):
        return int(raw_id.strip())
    raise InvalidIdError(InvalidIdReason.NOT_A_NUMBER, raw_id)


def validate_id(raw_id: Any, store: ClientStoreProtocol) -> int:
    """Check that ``raw_id`` is an integer naming an existing client.

    Performs one point lookup. Ids too large for the store are reported
    as not found.

    Returns:
        The parsed id

    Raises:
        InvalidIdError: NOT_A_NUMBER or NOT_FOUND
    """
    client_id = parse_id(raw_id)
    if store.get_client(client_id) is None:
        raise InvalidIdError(InvalidIdReason.NOT_FOUND, client_id)
    return client_id


def validate_lane(raw_lane: Any) -> Optional[Lane]:
    """Convert a requested lane to a Lane.

    ``None`` and ``""`` mean no lane change and return None.

    Raises:
        InvalidLaneError: for anything that is not one of the three lanes
    """
    if raw_lane is None or raw_lane == "":
        return None
    if isinstance(raw_lane, Lane):
        return raw_lane
    if isinstance(raw_lane, str) and raw_lane in VALID_LANE_VALUES:
        return Lane(raw_lane)
    raise InvalidLaneError(raw_lane)
