"""In-memory comment repository for testing."""

from typing import Any, Optional

from hunt.domain.model.comment import Comment
from hunt.domain.repository.comment import CommentRepository
from hunt.domain.value import CommentId, ProductId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_product(self, product_id: ProductId) -> list[Comment]:
        """Find all comments on a product, newest first."""
        comments = [c for c in self._comments.values() if c.product_id == product_id]
        return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)

    async def create(self, comment: Comment) -> Comment:
        """Store a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update(
        self, comment_id: CommentId, changes: dict[str, Any]
    ) -> Optional[Comment]:
        """Replace the given fields of a stored comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update=changes)
        self._comments[comment_id] = updated
        return updated
