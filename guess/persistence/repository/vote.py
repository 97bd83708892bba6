"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from guess.domain.model import Vote
from guess.domain.repository import VoteRepository
from guess.domain.value import PlayerId, VoteId
from guess.persistence.mappers import row_to_vote
from guess.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(
        self,
        value: int,
        created_at: datetime,
        ip_address: Optional[str] = None,
        location: Optional[str] = None,
        player_id: Optional[PlayerId] = None,
    ) -> Vote:
        """Insert a vote and return it with its serial ID."""
        stmt = (
            insert(votes_table)
            .values(
                value=value,
                created_at=created_at,
                ip_address=ip_address,
                location=location,
                player_id=player_id,
            )
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_all(self) -> List[Vote]:
        """Find all votes in insertion order."""
        stmt = select(votes_table).order_by(votes_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_recent(self, limit: int = 50) -> List[Vote]:
        """Find the most recently cast votes."""
        stmt = (
            select(votes_table)
            .order_by(votes_table.c.created_at.desc(), votes_table.c.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_ip_since(self, ip_address: str, since: datetime) -> int:
        """Count votes from an address since a point in time."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                and_(
                    votes_table.c.ip_address == ip_address,
                    votes_table.c.created_at >= since,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_player_since(self, player_id: PlayerId, since: datetime) -> int:
        """Count votes by a player since a point in time."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                and_(
                    votes_table.c.player_id == player_id,
                    votes_table.c.created_at >= since,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
