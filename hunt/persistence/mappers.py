"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from hunt.domain.model import Comment, Product, ProductWithVotes, User, Vote
from hunt.domain.value import CommentId, ProductId, UserId, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        avatar_url=row.get("avatar_url"),
        location=row.get("location"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def _product_fields(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": ProductId(_uuid(row["id"])),
        "author_id": UserId(_uuid(row["author_id"])),
        "title": row["title"],
        "description": row["description"],
        "url": row["url"],
        "tags": list(row.get("tags") or []),
        "location": row.get("location"),
        "is_made_in_my": row["is_made_in_my"],
        "created_at": row["created_at"],
    }


def row_to_product(row: Dict[str, Any]) -> Product:
    """Convert database row to Product domain model."""
    return Product(**_product_fields(row))


def row_to_product_with_votes(row: Dict[str, Any]) -> ProductWithVotes:
    """Convert an aggregated product row to ProductWithVotes.

    The row carries every product column plus ``vote_count`` and, when a
    viewer was given, ``user_voted``.
    """
    return ProductWithVotes(
        **_product_fields(row),
        vote_count=row["vote_count"],
        user_voted=row.get("user_voted"),
    )


def product_to_dict(product: Product) -> Dict[str, Any]:
    """Convert Product domain model to database dict."""
    return product.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        product_id=ProductId(_uuid(row["product_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        product_id=ProductId(_uuid(row["product_id"])),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
