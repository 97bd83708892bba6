"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from guess.domain.model.vote import Vote
from guess.domain.value import PlayerId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(
        self,
        value: int,
        created_at: datetime,
        ip_address: Optional[str] = None,
        location: Optional[str] = None,
        player_id: Optional[PlayerId] = None,
    ) -> Vote:
        """Insert a new vote.

        The store assigns the identifier; ids increase with insertion order.

        Args:
            value: Guessed value
            created_at: When the vote was cast
            ip_address: Client network address
            location: Human-readable location derived from the address
            player_id: Player cookie identifier

        Returns:
            The stored vote with its assigned ID
        """
        pass

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Vote]:
        """Find all votes in insertion order.

        Returns:
            Every stored vote, oldest first
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 50) -> List[Vote]:
        """Find the most recently cast votes.

        Args:
            limit: Maximum number of votes to return

        Returns:
            Votes ordered newest first
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_ip_since(self, ip_address: str, since: datetime) -> int:
        """Count votes cast from an address at or after a point in time.

        Args:
            ip_address: Client network address
            since: Start of the counting window

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def count_by_player_since(self, player_id: PlayerId, since: datetime) -> int:
        """Count votes cast by a player at or after a point in time.

        Args:
            player_id: Player cookie identifier
            since: Start of the counting window

        Returns:
            Number of votes
        """
        pass
