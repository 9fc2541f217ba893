"""User domain service."""

from datetime import UTC, datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from hunt.domain.error import ConflictError, NotFoundError
from hunt.domain.model import User, UserPatch
from hunt.domain.repository import UserRepository
from hunt.domain.repository.constraints import UQ_USERS_EMAIL
from hunt.domain.value import UserId

from .base import Service, violated_constraint


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def register(
        self,
        name: str,
        email: str,
        avatar_url: str | None = None,
        location: str | None = None,
    ) -> User:
        """Register a new user.

        The email lookup gives a readable error for the common case; the
        unique constraint on users.email is what actually guarantees two
        concurrent registrations can't both succeed.

        Args:
            name: Display name
            email: Email address (must not be registered yet)
            avatar_url: Optional avatar URL
            location: Optional free-text location

        Returns:
            The persisted user

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("user_service.register", email=email):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Email already registered", email=email)
                raise ConflictError(f"Email already exists: {email}")

            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                avatar_url=avatar_url,
                location=location,
                created_at=datetime.now(UTC),
            )

            try:
                saved = await self.user_repository.create(user)
            except IntegrityError as e:
                if violated_constraint(e) == UQ_USERS_EMAIL:
                    logfire.warn("Concurrent registration for email", email=email)
                    raise ConflictError(f"Email already exists: {email}") from e
                raise

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)

            if user:
                logfire.info("User found", user_id=str(user_id))
            else:
                logfire.warn("User not found", user_id=str(user_id))

            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        user = await self.get_user_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    async def update_profile(self, user_id: UserId, patch: UserPatch) -> User:
        """Apply a partial update to a user's profile.

        Args:
            user_id: User ID
            patch: Fields to change; absent fields keep their stored value

        Returns:
            The user as stored after the update

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.update_profile",
            user_id=str(user_id),
            fields=sorted(patch.model_fields_set),
        ):
            user = await self.get_by_id(user_id)

            if patch.is_empty():
                logfire.info("Empty profile update", user_id=str(user_id))
                return user

            updated = await self.user_repository.update(user_id, patch.changes())
            if updated is None:
                raise NotFoundError("User", str(user_id))

            logfire.info("User profile updated", user_id=str(user_id))
            return updated
