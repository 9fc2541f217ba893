"""User aggregate root.

Users register once with a unique email and then submit, vote on and
comment on products.
"""

from datetime import UTC, datetime
from typing import Optional

from pydantic import Field

from hunt.domain.model.common import DomainModel
from hunt.domain.value import Patch, UserId


class User(DomainModel):
    """User aggregate root.

    Email is unique across all users (enforced by database unique
    constraint) and cannot be changed after registration.
    """

    id: UserId
    name: str = Field(min_length=1)
    email: str
    avatar_url: Optional[str] = None
    location: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class UserPatch(Patch):
    """Partial update of a user's profile."""

    nullable_fields = frozenset({"avatar_url", "location"})

    name: Optional[str] = Field(default=None, min_length=1)
    avatar_url: Optional[str] = None
    location: Optional[str] = None
