"""User response shared by the user use cases."""

from datetime import datetime

from pydantic import BaseModel

from hunt.domain.model import User


class UserResponse(BaseModel):
    """User as returned to RPC callers."""

    id: str
    name: str
    email: str
    avatar_url: str | None
    location: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            avatar_url=user.avatar_url,
            location=user.location,
            created_at=user.created_at,
        )
