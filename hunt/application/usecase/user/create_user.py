"""Create user use case."""

from pydantic import BaseModel

from hunt.application.usecase.base import (
    BaseUseCase,
    EmailAddressStr,
    NonEmptyStr,
    UrlStr,
)
from hunt.domain.service import UserService

from .common import UserResponse


class CreateUserRequest(BaseModel):
    """Create user request."""

    name: NonEmptyStr
    email: EmailAddressStr
    avatar_url: UrlStr | None = None
    location: str | None = None


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a new user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Register the user.

        Raises:
            ConflictError: If the email is already registered
        """
        user = await self.user_service.register(
            name=request.name,
            email=request.email,
            avatar_url=request.avatar_url,
            location=request.location,
        )
        return UserResponse.from_domain(user)
