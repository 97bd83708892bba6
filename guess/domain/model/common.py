"""Base model for game entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for votes and time constraints.

    Entities are snapshots: repositories hand out new instances instead of
    mutating stored ones, and unknown fields are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
