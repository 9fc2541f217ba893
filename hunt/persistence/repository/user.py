"""PostgreSQL implementation of User repository."""

from typing import Any, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.model import User
from hunt.domain.repository import UserRepository
from hunt.domain.value import UserId
from hunt.persistence.mappers import row_to_user, user_to_dict
from hunt.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def create(self, user: User) -> User:
        """Insert a user and return the stored row.

        The insert runs in a savepoint so a unique violation leaves the
        request's transaction usable.
        """
        stmt = (
            insert(users_table).values(**user_to_dict(user)).returning(users_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_user(result.one()._asdict())

    async def update(self, user_id: UserId, changes: dict[str, Any]) -> Optional[User]:
        """Update the given columns and return the stored row."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(**changes)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None
