"""Vote-ranked product use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.service import ProductService
from hunt.domain.value import Timeframe, UserId

from .common import ProductWithVotesResponse, RankedProductListResponse


class GetProductsWithVotesRequest(BaseModel):
    """Products-with-votes request.

    When ``user_id`` is given each product says whether that user voted
    on it.
    """

    user_id: UUID | None = None


class GetTrendingProductsRequest(BaseModel):
    """Trending products request."""

    timeframe: Timeframe = Timeframe.DAILY


class GetProductsWithVotesUseCase(BaseUseCase):
    """Use case for ranking products by all-time votes."""

    def __init__(self, product_service: ProductService) -> None:
        """Initialize products-with-votes use case.

        Args:
            product_service: Product domain service
        """
        self.product_service = product_service

    async def execute(
        self, request: GetProductsWithVotesRequest
    ) -> RankedProductListResponse:
        """Rank products, most voted first.

        Args:
            request: Optional viewer

        Returns:
            Ranked products with vote counts
        """
        viewer_id = UserId(request.user_id) if request.user_id else None
        ranked = await self.product_service.rank_by_votes(viewer_id=viewer_id)
        return RankedProductListResponse(
            products=[ProductWithVotesResponse.from_ranked(p) for p in ranked]
        )


class GetTrendingProductsUseCase(BaseUseCase):
    """Use case for ranking products by recent votes."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(
        self, request: GetTrendingProductsRequest
    ) -> RankedProductListResponse:
        with logfire.span(
            "get_trending_products.execute", timeframe=request.timeframe.value
        ):
            ranked = await self.product_service.rank_trending(request.timeframe)
            return RankedProductListResponse(
                products=[ProductWithVotesResponse.from_ranked(p) for p in ranked]
            )
