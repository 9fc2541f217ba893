"""Comment domain service."""

from datetime import UTC, datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from hunt.domain.error import NotFoundError
from hunt.domain.model import Comment, CommentPatch
from hunt.domain.repository import CommentRepository
from hunt.domain.repository.constraints import FK_COMMENTS_AUTHOR, FK_COMMENTS_PRODUCT
from hunt.domain.value import CommentId, ProductId, UserId

from .base import Service, violated_constraint
from .product_service import ProductService
from .user_service import UserService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_service: UserService,
        product_service: ProductService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            user_service: User domain service
            product_service: Product domain service
        """
        self.comment_repository = comment_repository
        self.user_service = user_service
        self.product_service = product_service

    async def create_comment(
        self, author_id: UserId, product_id: ProductId, content: str
    ) -> Comment:
        """Comment on a product.

        Args:
            author_id: Commenting user
            product_id: Product commented on
            content: Comment text

        Returns:
            The persisted comment

        Raises:
            NotFoundError: If the author or the product doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            product_id=str(product_id),
        ):
            await self.user_service.get_by_id(author_id)
            await self.product_service.get_by_id(product_id)

            comment = Comment(
                id=CommentId(uuid4()),
                content=content,
                author_id=author_id,
                product_id=product_id,
                created_at=datetime.now(UTC),
            )

            try:
                saved = await self.comment_repository.create(comment)
            except IntegrityError as e:
                constraint = violated_constraint(e)
                if constraint == FK_COMMENTS_AUTHOR:
                    raise NotFoundError("User", str(author_id)) from e
                if constraint == FK_COMMENTS_PRODUCT:
                    raise NotFoundError("Product", str(product_id)) from e
                raise

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                product_id=str(product_id),
            )
            return saved

    async def get_comments_for_product(self, product_id: ProductId) -> list[Comment]:
        """Get all comments on a product, newest first."""
        with logfire.span(
            "comment_service.get_comments_for_product", product_id=str(product_id)
        ):
            comments = await self.comment_repository.find_by_product(product_id)

            logfire.info(
                "Comments retrieved for product",
                product_id=str(product_id),
                count=len(comments),
            )
            return comments

    async def update_comment(self, comment_id: CommentId, patch: CommentPatch) -> Comment:
        """Change a comment's content. The creation time is left as is.

        Args:
            comment_id: Comment ID
            patch: New content

        Returns:
            The comment as stored after the update

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if patch.is_empty():
                return comment

            updated = await self.comment_repository.update(comment_id, patch.changes())
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                content_length=len(updated.content),
            )
            return updated
