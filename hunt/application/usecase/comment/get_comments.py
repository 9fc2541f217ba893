"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.service import CommentService
from hunt.domain.value import ProductId

from .common import CommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    product_id: UUID


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentResponse]


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading a product's comments, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        comments = await self.comment_service.get_comments_for_product(
            ProductId(request.product_id)
        )
        return GetCommentsResponse(
            comments=[CommentResponse.from_domain(c) for c in comments]
        )
