"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional

from guess.domain.model.vote import Vote
from guess.domain.repository.vote import VoteRepository
from guess.domain.value import PlayerId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._next_id = 1

    async def create(
        self,
        value: int,
        created_at: datetime,
        ip_address: Optional[str] = None,
        location: Optional[str] = None,
        player_id: Optional[PlayerId] = None,
    ) -> Vote:
        """Insert a vote, assigning the next sequential ID."""
        vote = Vote(
            id=VoteId(self._next_id),
            value=value,
            created_at=created_at,
            ip_address=ip_address,
            location=location,
            player_id=player_id,
        )
        self._next_id += 1
        self._votes.append(vote)
        return vote

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        for vote in self._votes:
            if vote.id == vote_id:
                return vote
        return None

    async def find_all(self) -> list[Vote]:
        """Find all votes in insertion order."""
        return list(self._votes)

    async def find_recent(self, limit: int = 50) -> list[Vote]:
        """Find the most recently cast votes."""
        votes = sorted(self._votes, key=lambda v: (v.created_at, v.id), reverse=True)
        return votes[:limit]

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                self._votes.pop(i)
                return True
        return False

    async def count_by_ip_since(self, ip_address: str, since: datetime) -> int:
        """Count votes from an address since a point in time."""
        return sum(
            1
            for v in self._votes
            if v.ip_address == ip_address and v.created_at >= since
        )

    async def count_by_player_since(self, player_id: PlayerId, since: datetime) -> int:
        """Count votes by a player since a point in time."""
        return sum(
            1 for v in self._votes if v.player_id == player_id and v.created_at >= since
        )
