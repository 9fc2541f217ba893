"""User use cases."""

from .common import UserResponse
from .create_user import CreateUserRequest, CreateUserUseCase
from .get_user import GetUserRequest, GetUserResponse, GetUserUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "UserResponse",
    "CreateUserRequest",
    "CreateUserUseCase",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
]
