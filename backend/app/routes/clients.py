"""Client board routes.

GET  /api/v1/clients?status={lane}  - list clients, optionally one lane
GET  /api/v1/clients/{client_id}    - get one client
PUT  /api/v1/clients/{client_id}    - change lane and/or priority

Priority 1 is the top of a lane. No two clients in a lane share a
priority, and priorities in a lane always run 1..N.
"""

from fastapi import APIRouter, Request

from shiptivity.validation import validate_id, validate_lane

from ..database import Engine, Store
from ..logging_config import get_logger
from ..models import ClientResponse, ErrorResponse, RepositionRequest
from ..rate_limit import limiter, reposition_limit

logger = get_logger("shiptivity.api.clients")
router = APIRouter(prefix="/api/v1/clients", tags=["clients"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("", response_model=list[ClientResponse], responses={400: {"model": ErrorResponse}})
def list_clients(store: Store, status: str | None = None):
    """
    List all clients.

    Optional ``status`` filter: 'backlog' | 'in-progress' | 'complete'.
    A filtered list comes back in priority order.
    """
    lane = validate_lane(status)
    return [ClientResponse.from_client(c) for c in store.list_clients(lane)]


@router.get("/{client_id}", response_model=ClientResponse, responses=_ERROR_RESPONSES)
def get_client(client_id: str, store: Store):
    """Get a client by id."""
    parsed_id = validate_id(client_id, store)
    return ClientResponse.from_client(store.get_client(parsed_id))


@router.put("/{client_id}", response_model=ClientResponse, responses=_ERROR_RESPONSES)
@limiter.limit(reposition_limit)
def reposition_client(
    request: Request,
    client_id: str,
    store: Store,
    engine: Engine,
    body: RepositionRequest | None = None,
):
    """
    Update a client's lane (status) and/or priority.

    - status only: the client moves to the bottom of the new lane
    - priority only: the client moves within its lane
    - both: the client is inserted into the new lane at that priority
    - neither (or no body), or the current lane without a priority: nothing changes

    Priorities <= 0 mean the top of the lane; priorities past the end of
    the lane mean the bottom.
    """
    if body is None:
        body = RepositionRequest()
    parsed_id = validate_id(client_id, store)
    lane = validate_lane(body.status)

    logger.info(f"PUT | id={parsed_id} | status={body.status} priority={body.priority}")
    client = engine.reposition(parsed_id, lane=lane, priority=body.priority)
    return ClientResponse.from_client(client)
