"""PostgreSQL implementation of Product repository."""

from datetime import datetime
from typing import Any, List, Optional, Sequence

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.model import Product, ProductWithVotes
from hunt.domain.repository import ProductRepository
from hunt.domain.value import ProductId, UserId
from hunt.persistence.mappers import (
    product_to_dict,
    row_to_product,
    row_to_product_with_votes,
)
from hunt.persistence.tables import products_table, votes_table

NEWEST_FIRST = (products_table.c.created_at.desc(), products_table.c.id.desc())


class PostgresProductRepository(ProductRepository):
    """PostgreSQL implementation of ProductRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID."""
        stmt = select(products_table).where(products_table.c.id == product_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_product(row._asdict()) if row else None

    async def find_all(
        self,
        location: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        made_in_my_only: bool = True,
    ) -> List[Product]:
        """Find products matching the filters, newest first."""
        stmt = select(products_table)

        if made_in_my_only:
            stmt = stmt.where(products_table.c.is_made_in_my.is_(True))
        if location is not None:
            stmt = stmt.where(products_table.c.location == location)
        if tags:
            # && on text[]: any shared element
            stmt = stmt.where(products_table.c.tags.overlap(list(tags)))

        stmt = stmt.order_by(*NEWEST_FIRST)
        result = await self.session.execute(stmt)
        return [row_to_product(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Product]:
        """Find every product by an author, newest first."""
        stmt = (
            select(products_table)
            .where(products_table.c.author_id == author_id)
            .order_by(*NEWEST_FIRST)
        )
        result = await self.session.execute(stmt)
        return [row_to_product(row._asdict()) for row in result.fetchall()]

    async def find_with_votes(
        self,
        viewer_id: Optional[UserId] = None,
        votes_since: Optional[datetime] = None,
    ) -> List[ProductWithVotes]:
        """Rank locally made products by vote count.

        Votes are left-joined so products without (recent) votes keep a
        count of 0. The time window goes in the join condition, not the
        WHERE clause, for the same reason.
        """
        join_on = votes_table.c.product_id == products_table.c.id
        if votes_since is not None:
            join_on = and_(join_on, votes_table.c.created_at >= votes_since)

        vote_count = func.count(votes_table.c.id).label("vote_count")
        columns: list[Any] = [products_table, vote_count]

        if viewer_id is not None:
            viewer_votes = votes_table.alias("viewer_votes")
            user_voted = (
                select(viewer_votes.c.id)
                .where(
                    and_(
                        viewer_votes.c.product_id == products_table.c.id,
                        viewer_votes.c.user_id == viewer_id,
                    )
                )
                .exists()
                .label("user_voted")
            )
            columns.append(user_voted)

        stmt = (
            select(*columns)
            .select_from(products_table.outerjoin(votes_table, join_on))
            .where(products_table.c.is_made_in_my.is_(True))
            .group_by(products_table.c.id)
            .order_by(vote_count.desc(), *NEWEST_FIRST)
        )
        result = await self.session.execute(stmt)
        return [row_to_product_with_votes(row._asdict()) for row in result.fetchall()]

    async def create(self, product: Product) -> Product:
        """Insert a product and return the stored row."""
        stmt = (
            insert(products_table)
            .values(**product_to_dict(product))
            .returning(products_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_product(result.one()._asdict())

    async def update(
        self, product_id: ProductId, changes: dict[str, Any]
    ) -> Optional[Product]:
        """Update the given columns and return the stored row."""
        stmt = (
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(**changes)
            .returning(products_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_product(row._asdict()) if row else None
