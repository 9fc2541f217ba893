"""Product aggregate root.

Products are the submissions users vote and comment on. Only products
flagged as locally made show up in the public listings.
"""

from datetime import UTC, datetime
from typing import Optional

from pydantic import Field

from hunt.domain.model.common import DomainModel
from hunt.domain.value import Patch, ProductId, UserId


class Product(DomainModel):
    """Product aggregate root.

    Tags are a free-text ordered sequence: duplicates are kept and
    comparisons are case-sensitive.
    """

    id: ProductId
    author_id: UserId
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    url: str
    tags: list[str] = Field(default_factory=list)
    location: Optional[str] = None
    is_made_in_my: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ProductWithVotes(Product):
    """Product annotated with its vote tally.

    ``user_voted`` is None when the tally was computed without a viewer.
    """

    vote_count: int = Field(default=0, ge=0)
    user_voted: Optional[bool] = None


class ProductPatch(Patch):
    """Partial update of a product. Author and creation time never change."""

    nullable_fields = frozenset({"location"})

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    url: Optional[str] = None
    tags: Optional[list[str]] = None
    location: Optional[str] = None
    is_made_in_my: Optional[bool] = None
