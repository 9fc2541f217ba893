"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase, NonEmptyStr
from hunt.domain.model import CommentPatch
from hunt.domain.service import CommentService
from hunt.domain.value import CommentId

from .common import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    id: UUID
    content: NonEmptyStr


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Replace the comment's content.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_service.update_comment(
            CommentId(request.id), CommentPatch(content=request.content)
        )
        return CommentResponse.from_domain(comment)
