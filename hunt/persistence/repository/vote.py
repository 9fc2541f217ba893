"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.model import Vote
from hunt.domain.repository import VoteRepository
from hunt.domain.value import ProductId, UserId
from hunt.persistence.mappers import row_to_vote, vote_to_dict
from hunt.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> Optional[Vote]:
        """Find a user's vote on a product."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.product_id == product_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote and return the stored row."""
        stmt = insert(votes_table).values(**vote_to_dict(vote)).returning(votes_table)
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_vote(result.one()._asdict())

    async def delete_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> bool:
        """Delete a user's vote on a product."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.product_id == product_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
