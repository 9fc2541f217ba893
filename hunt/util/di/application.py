"""Application layer DI providers."""

from dishka import Scope, provide

from hunt.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from hunt.application.usecase.product import (
    CreateProductUseCase,
    GetProductsWithVotesUseCase,
    GetProductUseCase,
    GetTrendingProductsUseCase,
    ListProductsByAuthorUseCase,
    ListProductsByLocationUseCase,
    ListProductsByTagsUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from hunt.application.usecase.user import (
    CreateUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from hunt.application.usecase.vote import CreateVoteUseCase, DeleteVoteUseCase
from hunt.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Use case provider.

    Use cases only take domain services, so each is built straight from
    its constructor signature.
    """

    scope = Scope.REQUEST

    # User use cases
    create_user = provide(CreateUserUseCase)
    get_user = provide(GetUserUseCase)
    update_user = provide(UpdateUserUseCase)

    # Product use cases
    create_product = provide(CreateProductUseCase)
    get_product = provide(GetProductUseCase)
    list_products = provide(ListProductsUseCase)
    list_products_by_location = provide(ListProductsByLocationUseCase)
    list_products_by_tags = provide(ListProductsByTagsUseCase)
    list_products_by_author = provide(ListProductsByAuthorUseCase)
    update_product = provide(UpdateProductUseCase)
    get_products_with_votes = provide(GetProductsWithVotesUseCase)
    get_trending_products = provide(GetTrendingProductsUseCase)

    # Vote use cases
    create_vote = provide(CreateVoteUseCase)
    delete_vote = provide(DeleteVoteUseCase)

    # Comment use cases
    create_comment = provide(CreateCommentUseCase)
    get_comments = provide(GetCommentsUseCase)
    update_comment = provide(UpdateCommentUseCase)
