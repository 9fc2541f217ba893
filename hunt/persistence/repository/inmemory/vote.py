"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from hunt.domain.model.vote import Vote
from hunt.domain.repository.constraints import UQ_VOTES_USER_PRODUCT
from hunt.domain.repository.vote import VoteRepository
from hunt.domain.value import ProductId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> Optional[Vote]:
        """Find a user's vote on a product."""
        for vote in self._votes:
            if vote.user_id == user_id and vote.product_id == product_id:
                return vote
        return None

    def votes_on(self, product_id: ProductId) -> list[Vote]:
        """All stored votes on a product, for the in-memory rankings."""
        return [v for v in self._votes if v.product_id == product_id]

    async def create(self, vote: Vote) -> Vote:
        """Store a vote.

        Raises:
            IntegrityError: If the user already voted for the product
        """
        if await self.find_by_user_and_product(vote.user_id, vote.product_id):
            raise IntegrityError(
                "INSERT INTO votes",
                None,
                Exception(f"violates {UQ_VOTES_USER_PRODUCT}"),
            )
        self._votes.append(vote)
        return vote

    async def delete_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> bool:
        """Delete a user's vote on a product."""
        for i, vote in enumerate(self._votes):
            if vote.user_id == user_id and vote.product_id == product_id:
                self._votes.pop(i)
                return True
        return False
