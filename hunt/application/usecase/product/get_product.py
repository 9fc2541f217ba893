"""Get product use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.service import ProductService
from hunt.domain.value import ProductId

from .common import ProductResponse


class GetProductRequest(BaseModel):
    """Get product request."""

    id: UUID


class GetProductResponse(BaseModel):
    """Get product response. ``product`` is None when it doesn't exist."""

    product: ProductResponse | None


class GetProductUseCase(BaseUseCase):
    """Use case for looking up a single product.

    Unlike the listings this returns the product whether or not it is
    flagged as locally made.
    """

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: GetProductRequest) -> GetProductResponse:
        product = await self.product_service.get_product_by_id(ProductId(request.id))
        return GetProductResponse(
            product=ProductResponse.from_domain(product) if product else None
        )
