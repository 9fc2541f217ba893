"""Repository interfaces for Local Hunt domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from hunt.domain.repository.comment import CommentRepository
from hunt.domain.repository.product import ProductRepository
from hunt.domain.repository.user import UserRepository
from hunt.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "CommentRepository",
    "VoteRepository",
]
