"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .product import InMemoryProductRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryProductRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
