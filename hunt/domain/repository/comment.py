"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from hunt.domain.model.comment import Comment
from hunt.domain.value import CommentId, ProductId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_product(self, product_id: ProductId) -> List[Comment]:
        """Find all comments on a product, newest first.

        Args:
            product_id: The product ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The comment as persisted

        Raises:
            IntegrityError: If the author or product doesn't exist
        """
        pass

    @abstractmethod
    async def update(
        self, comment_id: CommentId, changes: dict[str, Any]
    ) -> Optional[Comment]:
        """Apply a set of column changes to a comment.

        Args:
            comment_id: ID of the comment to update
            changes: Column name to new value, only for changed columns

        Returns:
            The comment as persisted after the update, None if it doesn't exist
        """
        pass
