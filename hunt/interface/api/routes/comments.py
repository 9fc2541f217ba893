"""Comment procedures."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from hunt.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


@router.post("/createComment", response_model=CommentResponse)
async def create_comment(
    request: CreateCommentRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentResponse:
    """Comment on a product."""
    return await create_comment_use_case.execute(request)


@router.get("/getCommentsByProduct", response_model=list[CommentResponse])
async def get_comments_by_product(
    product_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentResponse]:
    """List a product's comments, newest first."""
    response = await get_comments_use_case.execute(
        GetCommentsRequest(product_id=product_id)
    )
    return response.comments


@router.post("/updateComment", response_model=CommentResponse)
async def update_comment(
    request: UpdateCommentRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentResponse:
    """Replace a comment's content."""
    return await update_comment_use_case.execute(request)
