"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.service import UserService
from hunt.domain.value import UserId

from .common import UserResponse


class GetUserRequest(BaseModel):
    """Get user request."""

    id: UUID


class GetUserResponse(BaseModel):
    """Get user response. ``user`` is None when no such user exists."""

    user: UserResponse | None


class GetUserUseCase(BaseUseCase):
    """Use case for looking up a single user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        user = await self.user_service.get_user_by_id(UserId(request.id))
        return GetUserResponse(user=UserResponse.from_domain(user) if user else None)
