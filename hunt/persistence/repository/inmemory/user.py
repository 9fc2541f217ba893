"""In-memory user repository for testing."""

from typing import Any, Optional

from sqlalchemy.exc import IntegrityError

from hunt.domain.model.user import User
from hunt.domain.repository.constraints import UQ_USERS_EMAIL
from hunt.domain.repository.user import UserRepository
from hunt.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def create(self, user: User) -> User:
        """Store a new user.

        Raises:
            IntegrityError: If the email is taken
        """
        if await self.find_by_email(user.email):
            raise IntegrityError(
                "INSERT INTO users", None, Exception(f"violates {UQ_USERS_EMAIL}")
            )
        self._users[user.id] = user
        return user

    async def update(self, user_id: UserId, changes: dict[str, Any]) -> Optional[User]:
        """Replace the given fields of a stored user."""
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update=changes)
        self._users[user_id] = updated
        return updated
