"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hunt.domain.model.vote import Vote
from hunt.domain.value import ProductId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> Optional[Vote]:
        """Find a user's vote on a product.

        Args:
            user_id: The user's ID
            product_id: The product's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to insert

        Returns:
            The vote as persisted

        Raises:
            IntegrityError: If the user already voted on this product, or
                the user or product doesn't exist
        """
        pass

    @abstractmethod
    async def delete_by_user_and_product(
        self, user_id: UserId, product_id: ProductId
    ) -> bool:
        """Delete a user's vote on a product.

        Args:
            user_id: The user's ID
            product_id: The product's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
