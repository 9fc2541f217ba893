"""Domain layer DI providers."""

from dishka import Scope, provide

from hunt.domain.repository import (
    CommentRepository,
    ProductRepository,
    UserRepository,
    VoteRepository,
)
from hunt.domain.service import (
    CommentService,
    ProductService,
    UserService,
    VoteService,
)
from hunt.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each RPC call gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_product_service(
        self, product_repository: ProductRepository, user_service: UserService
    ) -> ProductService:
        """Provide product domain service."""
        return ProductService(
            product_repository=product_repository, user_service=user_service
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        user_service: UserService,
        product_service: ProductService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            user_service=user_service,
            product_service=product_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        user_service: UserService,
        product_service: ProductService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            user_service=user_service,
            product_service=product_service,
        )
