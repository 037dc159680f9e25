"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, ConfigDict

from shiptivity.types import Client

# =============================================================================
# Client Models
# =============================================================================


class ClientResponse(BaseModel):
    """A client card."""

    id: int
    name: str
    description: str | None = None
    status: str
    priority: int

    @classmethod
    def from_client(cls, client: Client) -> "ClientResponse":
        return cls(**client.to_dict())


class RepositionRequest(BaseModel):
    """Request to change a client's lane and/or priority.

    Both fields are optional. The lane is checked by the validator so bad
    names get the service's own error body rather than a 422. Priorities
    are never rejected; they are clamped into the lane.
    """

    model_config = ConfigDict(extra="ignore")

    status: str | None = None
    priority: int | None = None


# =============================================================================
# Error / Service Models
# =============================================================================


class ErrorResponse(BaseModel):
    """Rejection body."""

    message: str
    long_message: str


class RootResponse(BaseModel):
    message: str
