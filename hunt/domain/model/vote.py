"""Vote entity.

Each user can cast one vote per product. Retracting a vote deletes it;
voting again afterwards creates a fresh vote.
"""

from datetime import UTC, datetime

from pydantic import Field

from hunt.domain.model.common import DomainModel
from hunt.domain.value import ProductId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per product (enforced by database unique constraint)
    - created_at drives the trending windows
    """

    id: VoteId
    user_id: UserId
    product_id: ProductId
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
