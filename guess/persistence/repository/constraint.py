"""PostgreSQL implementation of TimeConstraint repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, insert, not_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from guess.domain.model import TimeConstraint
from guess.domain.repository import ConstraintRepository
from guess.domain.value import ConstraintId, ConstraintKind
from guess.persistence.mappers import row_to_constraint
from guess.persistence.tables import vote_constraints_table


class PostgresConstraintRepository(ConstraintRepository):
    """PostgreSQL implementation of ConstraintRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(
        self,
        start_time: datetime,
        end_time: datetime,
        kind: ConstraintKind,
        enabled: bool,
        note: Optional[str] = None,
    ) -> TimeConstraint:
        """Insert a constraint and return it with its serial ID."""
        stmt = (
            insert(vote_constraints_table)
            .values(
                start_time=start_time,
                end_time=end_time,
                type=kind.value,
                enabled=enabled,
                note=note,
            )
            .returning(*vote_constraints_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_constraint(row._asdict())

    async def find_by_id(self, constraint_id: ConstraintId) -> Optional[TimeConstraint]:
        """Find a constraint by ID."""
        stmt = select(vote_constraints_table).where(
            vote_constraints_table.c.id == constraint_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_constraint(row._asdict()) if row else None

    async def find_all(self) -> List[TimeConstraint]:
        """Find all constraints, newest first."""
        stmt = select(vote_constraints_table).order_by(
            vote_constraints_table.c.created_at.desc(),
            vote_constraints_table.c.id.desc(),
        )
        result = await self.session.execute(stmt)
        return [row_to_constraint(row._asdict()) for row in result.fetchall()]

    async def toggle(self, constraint_id: ConstraintId) -> Optional[TimeConstraint]:
        """Flip a constraint's enabled flag in place."""
        stmt = (
            update(vote_constraints_table)
            .where(vote_constraints_table.c.id == constraint_id)
            .values(enabled=not_(vote_constraints_table.c.enabled))
            .returning(*vote_constraints_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_constraint(row._asdict()) if row else None

    async def delete(self, constraint_id: ConstraintId) -> bool:
        """Delete a constraint."""
        stmt = delete(vote_constraints_table).where(
            vote_constraints_table.c.id == constraint_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
