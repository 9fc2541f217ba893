"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from hunt.domain.model.user import User
from hunt.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The user as persisted

        Raises:
            IntegrityError: If the email is already registered
        """
        pass

    @abstractmethod
    async def update(self, user_id: UserId, changes: dict[str, Any]) -> Optional[User]:
        """Apply a set of column changes to a user.

        Args:
            user_id: ID of the user to update
            changes: Column name to new value, only for changed columns

        Returns:
            The user as persisted after the update, None if it doesn't exist
        """
        pass
