"""Product listing use cases.

Every listing except the by-author one only shows locally made products,
newest first.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.service import ProductService
from hunt.domain.value import UserId

from .common import ProductListResponse


class ListProductsRequest(BaseModel):
    """List products request (no parameters)."""


class ListProductsByLocationRequest(BaseModel):
    """List products by location request."""

    location: str


class ListProductsByTagsRequest(BaseModel):
    """List products by tags request.

    An empty ``tags`` list means no tag filter.
    """

    tags: list[str] = Field(default_factory=list)


class ListProductsByAuthorRequest(BaseModel):
    """List products by author request."""

    author_id: UUID


class ListProductsUseCase(BaseUseCase):
    """Use case for listing all locally made products."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: ListProductsRequest) -> ProductListResponse:
        products = await self.product_service.list_products()
        return ProductListResponse.from_domain(products)


class ListProductsByLocationUseCase(BaseUseCase):
    """Use case for listing locally made products at an exact location."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(
        self, request: ListProductsByLocationRequest
    ) -> ProductListResponse:
        products = await self.product_service.list_products(location=request.location)
        return ProductListResponse.from_domain(products)


class ListProductsByTagsUseCase(BaseUseCase):
    """Use case for listing locally made products sharing any given tag."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: ListProductsByTagsRequest) -> ProductListResponse:
        products = await self.product_service.list_products(tags=request.tags)
        return ProductListResponse.from_domain(products)


class ListProductsByAuthorUseCase(BaseUseCase):
    """Use case for listing everything an author submitted."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(
        self, request: ListProductsByAuthorRequest
    ) -> ProductListResponse:
        products = await self.product_service.list_by_author(UserId(request.author_id))
        return ProductListResponse.from_domain(products)
