"""Vote entity.

A vote is a single guess submitted by a participant. Votes are inserted
once and never modified; an admin may delete them.
"""

from datetime import datetime, timezone

from pydantic import Field

from guess.domain.model.common import DomainModel
from guess.domain.value import MAX_VOTE_VALUE, MIN_VOTE_VALUE, PlayerId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Origin metadata (IP address, location, player) is carried for rate
    limiting and display only. Game statistics never look at it.
    """

    id: VoteId
    value: int = Field(ge=MIN_VOTE_VALUE, le=MAX_VOTE_VALUE)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    ip_address: str | None = None
    location: str | None = None
    player_id: PlayerId | None = None
