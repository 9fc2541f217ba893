"""Domain model entities for Local Hunt."""

from hunt.domain.model.comment import Comment, CommentPatch
from hunt.domain.model.product import Product, ProductPatch, ProductWithVotes
from hunt.domain.model.user import User, UserPatch
from hunt.domain.model.vote import Vote

__all__ = [
    "User",
    "UserPatch",
    "Product",
    "ProductPatch",
    "ProductWithVotes",
    "Vote",
    "Comment",
    "CommentPatch",
]
