"""Domain value objects for Local Hunt."""

from hunt.domain.value.common import Patch, ValueObject
from hunt.domain.value.identifiers import CommentId, ProductId, UserId, VoteId
from hunt.domain.value.types import Timeframe

__all__ = [
    # Identifiers
    "UserId",
    "ProductId",
    "VoteId",
    "CommentId",
    # Types
    "Timeframe",
    "ValueObject",
    "Patch",
]
