"""PostgreSQL repository implementations."""

from hunt.persistence.repository.comment import PostgresCommentRepository
from hunt.persistence.repository.product import PostgresProductRepository
from hunt.persistence.repository.user import PostgresUserRepository
from hunt.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresProductRepository",
    "PostgresVoteRepository",
    "PostgresCommentRepository",
]
