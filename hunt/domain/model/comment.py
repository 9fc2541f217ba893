"""Comment entity."""

from datetime import UTC, datetime
from typing import Optional

from pydantic import Field

from hunt.domain.model.common import DomainModel
from hunt.domain.value import CommentId, Patch, ProductId, UserId


class Comment(DomainModel):
    """Flat comment on a product. Only the content is editable."""

    id: CommentId
    content: str = Field(min_length=1)
    author_id: UserId
    product_id: ProductId
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class CommentPatch(Patch):
    """Partial update of a comment."""

    content: Optional[str] = Field(default=None, min_length=1)
