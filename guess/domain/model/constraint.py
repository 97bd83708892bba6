"""Time constraint entity.

Constraints are authored by admins and decide which votes count toward
the game based on when they were cast.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from guess.domain.model.common import DomainModel
from guess.domain.value import ConstraintId, ConstraintKind, to_utc


class TimeConstraint(DomainModel):
    """Time constraint entity.

    Business rules:
    - Ranges are inclusive on both ends
    - Disabled constraints have no effect
    - start_time <= end_time is expected but not enforced
    - Bounds without a timezone are read as UTC
    """

    id: ConstraintId
    start_time: datetime
    end_time: datetime
    kind: ConstraintKind
    enabled: bool = True
    note: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_bounds(cls, value: datetime) -> datetime:
        return to_utc(value)

    def covers(self, timestamp: datetime) -> bool:
        """Check whether a timestamp falls within this constraint's range."""
        return self.start_time <= timestamp <= self.end_time
