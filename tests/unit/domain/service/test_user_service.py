"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from hunt.domain.error import ConflictError, NotFoundError
from hunt.domain.model import UserPatch
from hunt.domain.repository import UserRepository
from hunt.domain.service import UserService
from hunt.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_returns_persisted_user(self, unit_env):
        """Registering should store the user with a fresh id and timestamp."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await user_service.register(
            name="Aina", email="aina@example.com", location="Penang"
        )

        # Assert
        stored = await user_repo.find_by_id(user.id)
        assert stored == user
        assert user.name == "Aina"
        assert user.location == "Penang"
        assert user.avatar_url is None
        assert user.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_register_generates_distinct_ids(self, unit_env):
        """Every registration should get its own id."""
        user_service = await unit_env.get(UserService)

        first = await user_service.register(name="Aina", email="aina@example.com")
        second = await user_service.register(name="Badrul", email="badrul@example.com")

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises_conflict(self, unit_env):
        """A taken email should fail with ConflictError and store nothing."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        original = await user_service.register(name="Aina", email="aina@example.com")

        # Act & Assert
        with pytest.raises(ConflictError, match="Email already exists"):
            await user_service.register(name="Impostor", email="aina@example.com")

        stored = await user_repo.find_by_email("aina@example.com")
        assert stored.id == original.id

    @pytest.mark.asyncio
    async def test_register_maps_unique_violation_to_conflict(self, unit_env):
        """A unique violation the pre-check missed should still be a ConflictError."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)

        class RacingUserRepository(UserRepository):
            """Hides existing users from the email lookup, like a concurrent insert."""

            async def find_by_id(self, user_id):
                return await user_repo.find_by_id(user_id)

            async def find_by_email(self, email):
                return None

            async def create(self, user):
                return await user_repo.create(user)

            async def update(self, user_id, changes):
                return await user_repo.update(user_id, changes)

        user_service = UserService(user_repository=RacingUserRepository())
        await user_service.register(name="Aina", email="aina@example.com")

        # Act & Assert
        with pytest.raises(ConflictError):
            await user_service.register(name="Aina", email="aina@example.com")


class TestGetUser:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_user_by_id_returns_none_when_missing(self, unit_env):
        """Lookups of unknown ids should return None, not raise."""
        user_service = await unit_env.get(UserService)

        assert await user_service.get_user_by_id(UserId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_get_by_id_raises_not_found_when_missing(self, unit_env):
        """The strict lookup should raise NotFoundError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_by_id(UserId(uuid4()))


class TestUpdateProfile:
    """Tests for update_profile method."""

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        """Fields absent from the patch should keep their stored values."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.register(
            name="Aina",
            email="aina@example.com",
            avatar_url="https://cdn.example.com/aina.png",
            location="Penang",
        )

        # Act
        updated = await user_service.update_profile(user.id, UserPatch(name="Aina R."))

        # Assert
        assert updated.name == "Aina R."
        assert updated.avatar_url == "https://cdn.example.com/aina.png"
        assert updated.location == "Penang"
        assert updated.email == user.email
        assert updated.created_at == user.created_at

    @pytest.mark.asyncio
    async def test_update_with_explicit_none_clears_field(self, unit_env):
        """An explicit None should clear a nullable field."""
        user_service = await unit_env.get(UserService)
        user = await user_service.register(
            name="Aina", email="aina@example.com", location="Penang"
        )

        updated = await user_service.update_profile(user.id, UserPatch(location=None))

        assert updated.location is None
        assert updated.name == "Aina"

    @pytest.mark.asyncio
    async def test_empty_patch_returns_user_unchanged(self, unit_env):
        """An empty patch is a no-op."""
        user_service = await unit_env.get(UserService)
        user = await user_service.register(name="Aina", email="aina@example.com")

        updated = await user_service.update_profile(user.id, UserPatch())

        assert updated == user

    @pytest.mark.asyncio
    async def test_update_missing_user_raises_not_found(self, unit_env):
        """Updating an unknown user should raise NotFoundError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.update_profile(UserId(uuid4()), UserPatch(name="Ghost"))
