"""Product responses shared by the product use cases."""

from datetime import datetime

from pydantic import BaseModel

from hunt.domain.model import Product, ProductWithVotes


class ProductResponse(BaseModel):
    """Product as returned to RPC callers."""

    id: str
    author_id: str
    title: str
    description: str
    url: str
    tags: list[str]
    location: str | None
    is_made_in_my: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            author_id=str(product.author_id),
            title=product.title,
            description=product.description,
            url=product.url,
            tags=list(product.tags),
            location=product.location,
            is_made_in_my=product.is_made_in_my,
            created_at=product.created_at,
        )


class ProductWithVotesResponse(ProductResponse):
    """Product with its vote tally."""

    vote_count: int
    user_voted: bool | None

    @classmethod
    def from_ranked(cls, product: ProductWithVotes) -> "ProductWithVotesResponse":
        return cls(
            **ProductResponse.from_domain(product).model_dump(),
            vote_count=product.vote_count,
            user_voted=product.user_voted,
        )


class ProductListResponse(BaseModel):
    """A list of products."""

    products: list[ProductResponse]

    @classmethod
    def from_domain(cls, products: list[Product]) -> "ProductListResponse":
        return cls(products=[ProductResponse.from_domain(p) for p in products])


class RankedProductListResponse(BaseModel):
    """Products in ranking order, each with its vote tally."""

    products: list[ProductWithVotesResponse]
