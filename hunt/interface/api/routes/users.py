"""User procedures."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from hunt.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserResponse,
)

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.post("/createUser", response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserResponse:
    """Register a user. Fails with 409 if the email is taken."""
    return await create_user_use_case.execute(request)


@router.get("/getUserById", response_model=UserResponse | None)
async def get_user_by_id(
    id: UUID,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse | None:
    """Look up a user; null if there is none."""
    response = await get_user_use_case.execute(GetUserRequest(id=id))
    return response.user


@router.post("/updateUser", response_model=UserResponse)
async def update_user(
    request: UpdateUserRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> UserResponse:
    """Edit a user's profile.

    Only the fields present in the body change; ``avatar_url`` and
    ``location`` can be sent as null to clear them.
    """
    return await update_user_use_case.execute(request)
