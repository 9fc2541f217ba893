"""PostgreSQL implementation of Comment repository."""

from typing import Any, List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.model import Comment
from hunt.domain.repository import CommentRepository
from hunt.domain.value import CommentId, ProductId
from hunt.persistence.mappers import comment_to_dict, row_to_comment
from hunt.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_product(self, product_id: ProductId) -> List[Comment]:
        """Find all comments on a product, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.product_id == product_id)
            .order_by(comments_table.c.created_at.desc(), comments_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create(self, comment: Comment) -> Comment:
        """Insert a comment and return the stored row."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_comment(result.one()._asdict())

    async def update(
        self, comment_id: CommentId, changes: dict[str, Any]
    ) -> Optional[Comment]:
        """Update the given columns and return the stored row."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(**changes)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None
