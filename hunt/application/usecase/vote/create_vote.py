"""Create vote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.service import VoteService
from hunt.domain.value import ProductId, UserId


class CreateVoteRequest(BaseModel):
    """Create vote request."""

    user_id: UUID
    product_id: UUID


class VoteResponse(BaseModel):
    """Vote as returned to RPC callers."""

    id: str
    user_id: str
    product_id: str
    created_at: datetime


class CreateVoteUseCase(BaseUseCase):
    """Use case for voting on a product."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize create vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CreateVoteRequest) -> VoteResponse:
        """Cast the vote.

        Args:
            request: Voting user and product

        Returns:
            The stored vote

        Raises:
            NotFoundError: If the user or product doesn't exist
            ConflictError: If the user already voted for the product
        """
        vote = await self.vote_service.cast_vote(
            UserId(request.user_id), ProductId(request.product_id)
        )

        return VoteResponse(
            id=str(vote.id),
            user_id=str(vote.user_id),
            product_id=str(vote.product_id),
            created_at=vote.created_at,
        )
