"""Lane reordering engine.

Moves a client to a new lane and/or rank and applies the compensating
shifts that keep every lane densely ranked 1..N:

1. close the gap in the source lane (others at >= old priority move up)
2. open a slot in the destination lane (others at >= new priority move down)
3. write the client at its new placement

The three writes share one store transaction. The two shifts exclude the
moving client and run in that order, so for a same-lane move the first
leaves the other members dense over 1..N-1 and the second opens exactly
the target slot.
"""

import logging
from typing import Optional

from .logging_config import log_reposition
from .protocols import ClientStoreProtocol, InvalidIdError, InvalidIdReason
from .types import Client, Lane, Placement

logger = logging.getLogger(__name__)


def resolve_target_priority(
    current: Placement,
    target_lane: Lane,
    requested_priority: Optional[int],
    lane_size: int,
) -> Optional[int]:
    """Clamp a requested priority into the destination lane.

    Args:
        current: The client's placement before the move
        target_lane: Lane the client ends up in
        requested_priority: Priority asked for, or None
        lane_size: Clients in ``target_lane`` now, the moving client included
            when it already sits there

    Returns:
        The effective priority, or None when nothing should change (same
        lane and no priority requested)
    """
    same_lane = target_lane == current.lane

    if requested_priority is None:
        if same_lane:
            return None
        return lane_size + 1

    if requested_priority <= 0:
        return 1
    if requested_priority > lane_size:
        # Same lane: the client already occupies one of the counted slots
        return lane_size if same_lane else lane_size + 1
    return requested_priority


class ReorderEngine:
    """Repositions clients on the board.

    The store is injected; the engine keeps no state of its own between
    calls.
    """

    def __init__(self, store: ClientStoreProtocol):
        self._store = store

    def reposition(
        self,
        client_id: int,
        lane: Optional[Lane] = None,
        priority: Optional[int] = None,
    ) -> Client:
        """Move a client to ``lane`` at ``priority``.

        Both arguments are optional. With neither, or with only the
        client's current lane, the record is returned untouched. Expects
        ``client_id`` and ``lane`` to have been through the validator.

        Returns:
            The client as stored after the move
        """
        store = self._store

        with store.transaction():
            client = store.get_client(client_id)
            if client is None:
                raise InvalidIdError(InvalidIdReason.NOT_FOUND, client_id)

            if lane is None and priority is None:
                return client

            current = Placement(client.lane, client.priority)
            target_lane = Lane(lane) if lane is not None else current.lane
            lane_size = store.count_lane(target_lane)

            target_priority = resolve_target_priority(current, target_lane, priority, lane_size)
            if target_priority is None:
                logger.debug(f"Client {client_id} already in {target_lane.value}, nothing to do")
                return client
            target = Placement(target_lane, target_priority)

            closed = store.shift_lane(
                current.lane, from_priority=current.priority, delta=-1, exclude_id=client_id
            )
            opened = store.shift_lane(
                target.lane, from_priority=target.priority, delta=1, exclude_id=client_id
            )
            store.move_client(client_id, target.lane, target.priority)

        logger.info(
            f"Repositioned client {client_id}: {current} -> {target} "
            f"(closed={closed}, opened={opened})"
        )
        log_reposition(
            client_id,
            current.lane.value,
            current.priority,
            target.lane.value,
            target.priority,
        )
        return store.get_client(client_id)
