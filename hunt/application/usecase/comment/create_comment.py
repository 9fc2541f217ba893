"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase, NonEmptyStr
from hunt.domain.service import CommentService
from hunt.domain.value import ProductId, UserId

from .common import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: NonEmptyStr
    author_id: UUID
    product_id: UUID


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a product."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Create the comment.

        Raises:
            NotFoundError: If the author or product doesn't exist
        """
        comment = await self.comment_service.create_comment(
            author_id=UserId(request.author_id),
            product_id=ProductId(request.product_id),
            content=request.content,
        )
        return CommentResponse.from_domain(comment)
