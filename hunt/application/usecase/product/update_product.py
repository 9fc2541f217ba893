"""Update product use case."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from hunt.application.usecase.base import BaseUseCase, NonEmptyStr, UrlStr
from hunt.domain.model import ProductPatch
from hunt.domain.service import ProductService
from hunt.domain.value import ProductId

from .common import ProductResponse


class UpdateProductRequest(BaseModel):
    """Update product request.

    Only the fields present in the payload change. ``location`` may be
    sent as null to clear it; ``tags`` may be sent as ``[]`` to remove all
    tags.
    """

    id: UUID
    title: NonEmptyStr | None = None
    description: NonEmptyStr | None = None
    url: UrlStr | None = None
    tags: list[str] | None = None
    location: str | None = None
    is_made_in_my: bool | None = None

    @model_validator(mode="after")
    def check_patch(self) -> "UpdateProductRequest":
        self.to_patch()
        return self

    def to_patch(self) -> ProductPatch:
        """Build the product patch from the fields actually sent."""
        return ProductPatch(**self.model_dump(include=self.model_fields_set - {"id"}))


class UpdateProductUseCase(BaseUseCase):
    """Use case for editing a product."""

    def __init__(self, product_service: ProductService) -> None:
        """Initialize update product use case.

        Args:
            product_service: Product domain service
        """
        self.product_service = product_service

    async def execute(self, request: UpdateProductRequest) -> ProductResponse:
        """Apply the product patch.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        product = await self.product_service.update_product(
            ProductId(request.id), request.to_patch()
        )
        return ProductResponse.from_domain(product)
