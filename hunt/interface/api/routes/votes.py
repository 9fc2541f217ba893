"""Vote procedures."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from hunt.application.usecase.vote import (
    CreateVoteRequest,
    CreateVoteUseCase,
    DeleteVoteRequest,
    DeleteVoteUseCase,
    VoteResponse,
)

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/createVote", response_model=VoteResponse)
async def create_vote(
    request: CreateVoteRequest,
    create_vote_use_case: FromDishka[CreateVoteUseCase],
) -> VoteResponse:
    """Vote for a product.

    Fails with 404 if the user or product doesn't exist and with 409 if
    the user already voted for it.
    """
    return await create_vote_use_case.execute(request)


@router.post("/deleteVote", response_model=bool)
async def delete_vote(
    request: DeleteVoteRequest,
    delete_vote_use_case: FromDishka[DeleteVoteUseCase],
) -> bool:
    """Retract a vote. Returns false if there was nothing to retract."""
    response = await delete_vote_use_case.execute(request)
    return response.deleted
