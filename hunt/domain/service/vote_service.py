"""Vote domain service."""

from datetime import UTC, datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from hunt.domain.error import ConflictError, NotFoundError
from hunt.domain.model.vote import Vote
from hunt.domain.repository import VoteRepository
from hunt.domain.repository.constraints import (
    FK_VOTES_PRODUCT,
    FK_VOTES_USER,
    UQ_VOTES_USER_PRODUCT,
)
from hunt.domain.value import ProductId, UserId, VoteId

from .base import Service, violated_constraint
from .product_service import ProductService
from .user_service import UserService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        user_service: UserService,
        product_service: ProductService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            user_service: User domain service
            product_service: Product domain service
        """
        self.vote_repository = vote_repository
        self.user_service = user_service
        self.product_service = product_service

    async def cast_vote(self, user_id: UserId, product_id: ProductId) -> Vote:
        """Vote for a product.

        Args:
            user_id: Voting user
            product_id: Product voted for

        Returns:
            Created vote

        Raises:
            NotFoundError: If the user or the product doesn't exist
            ConflictError: If the user already voted for this product
        """
        with logfire.span(
            "vote_service.cast_vote", user_id=str(user_id), product_id=str(product_id)
        ):
            await self.user_service.get_by_id(user_id)
            await self.product_service.get_by_id(product_id)

            existing = await self.vote_repository.find_by_user_and_product(
                user_id, product_id
            )
            if existing:
                logfire.warn(
                    "Duplicate vote attempt",
                    user_id=str(user_id),
                    product_id=str(product_id),
                )
                raise ConflictError(
                    f"Duplicate vote: user {user_id} already voted for product {product_id}"
                )

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                product_id=product_id,
                created_at=datetime.now(UTC),
            )

            # The unique constraint settles races the lookup above can't see
            try:
                saved_vote = await self.vote_repository.create(vote)
            except IntegrityError as e:
                constraint = violated_constraint(e)
                if constraint == UQ_VOTES_USER_PRODUCT:
                    logfire.warn(
                        "Concurrent duplicate vote",
                        user_id=str(user_id),
                        product_id=str(product_id),
                    )
                    raise ConflictError(
                        f"Duplicate vote: user {user_id} already voted for product {product_id}"
                    ) from e
                if constraint == FK_VOTES_USER:
                    raise NotFoundError("User", str(user_id)) from e
                if constraint == FK_VOTES_PRODUCT:
                    raise NotFoundError("Product", str(product_id)) from e
                raise

            logfire.info(
                "Vote cast",
                vote_id=str(saved_vote.id),
                user_id=str(user_id),
                product_id=str(product_id),
            )
            return saved_vote

    async def retract_vote(self, user_id: UserId, product_id: ProductId) -> bool:
        """Remove a user's vote from a product.

        Retracting a vote that doesn't exist is not an error, so repeated
        calls are harmless.

        Args:
            user_id: Voting user
            product_id: Product voted for

        Returns:
            True if a vote was removed, False if no vote existed
        """
        with logfire.span(
            "vote_service.retract_vote",
            user_id=str(user_id),
            product_id=str(product_id),
        ):
            deleted = await self.vote_repository.delete_by_user_and_product(
                user_id, product_id
            )

            if deleted:
                logfire.info(
                    "Vote retracted", user_id=str(user_id), product_id=str(product_id)
                )
            else:
                logfire.info(
                    "No vote to retract",
                    user_id=str(user_id),
                    product_id=str(product_id),
                )

            return deleted
