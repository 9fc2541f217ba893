"""Delete vote use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.service import VoteService
from hunt.domain.value import ProductId, UserId


class DeleteVoteRequest(BaseModel):
    """Delete vote request."""

    user_id: UUID
    product_id: UUID


class DeleteVoteResponse(BaseModel):
    """Delete vote response."""

    deleted: bool


class DeleteVoteUseCase(BaseUseCase):
    """Use case for retracting a vote.

    Retracting a vote that doesn't exist reports ``deleted=False``.
    """

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: DeleteVoteRequest) -> DeleteVoteResponse:
        deleted = await self.vote_service.retract_vote(
            UserId(request.user_id), ProductId(request.product_id)
        )
        return DeleteVoteResponse(deleted=deleted)
