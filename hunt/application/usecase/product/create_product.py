"""Create product use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from hunt.application.usecase.base import BaseUseCase, NonEmptyStr, UrlStr
from hunt.domain.service import ProductService
from hunt.domain.value import UserId

from .common import ProductResponse


class CreateProductRequest(BaseModel):
    """Create product request."""

    title: NonEmptyStr
    description: NonEmptyStr
    url: UrlStr
    tags: list[str] = Field(default_factory=list)
    location: str | None = None
    is_made_in_my: bool = True
    author_id: UUID


class CreateProductUseCase(BaseUseCase):
    """Use case for submitting a product."""

    def __init__(self, product_service: ProductService) -> None:
        """Initialize create product use case.

        Args:
            product_service: Product domain service
        """
        self.product_service = product_service

    async def execute(self, request: CreateProductRequest) -> ProductResponse:
        """Submit the product on behalf of its author.

        Raises:
            NotFoundError: If the author doesn't exist
        """
        product = await self.product_service.submit(
            author_id=UserId(request.author_id),
            title=request.title,
            description=request.description,
            url=request.url,
            tags=request.tags,
            location=request.location,
            is_made_in_my=request.is_made_in_my,
        )
        return ProductResponse.from_domain(product)
