"""Update user use case."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from hunt.application.usecase.base import BaseUseCase, NonEmptyStr, UrlStr
from hunt.domain.model import UserPatch
from hunt.domain.service import UserService
from hunt.domain.value import UserId

from .common import UserResponse


class UpdateUserRequest(BaseModel):
    """Update user request.

    Fields left out of the payload are kept; ``avatar_url`` and
    ``location`` may be sent as null to clear them.
    """

    id: UUID
    name: NonEmptyStr | None = None
    avatar_url: UrlStr | None = None
    location: str | None = None

    @model_validator(mode="after")
    def check_patch(self) -> "UpdateUserRequest":
        self.to_patch()
        return self

    def to_patch(self) -> UserPatch:
        """Build the profile patch from the fields actually sent."""
        return UserPatch(**self.model_dump(include=self.model_fields_set - {"id"}))


class UpdateUserUseCase(BaseUseCase):
    """Use case for editing a user's profile.

    Email is the user's identity and cannot be changed here.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Apply the profile patch.

        Args:
            request: User ID plus the fields to change

        Returns:
            The stored user after the update

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_service.update_profile(
            UserId(request.id), request.to_patch()
        )
        return UserResponse.from_domain(user)
