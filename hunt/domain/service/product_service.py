"""Product domain service."""

from datetime import UTC, datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from hunt.domain.error import NotFoundError
from hunt.domain.model import Product, ProductPatch, ProductWithVotes
from hunt.domain.repository import ProductRepository
from hunt.domain.repository.constraints import FK_PRODUCTS_AUTHOR
from hunt.domain.value import ProductId, Timeframe, UserId

from .base import Service, violated_constraint
from .user_service import UserService


class ProductService(Service):
    """Domain service for product submission, listing and ranking."""

    def __init__(
        self, product_repository: ProductRepository, user_service: UserService
    ) -> None:
        """Initialize product service.

        Args:
            product_repository: Product repository
            user_service: User domain service
        """
        self.product_repository = product_repository
        self.user_service = user_service

    async def submit(
        self,
        author_id: UserId,
        title: str,
        description: str,
        url: str,
        tags: Sequence[str] = (),
        location: str | None = None,
        is_made_in_my: bool = True,
    ) -> Product:
        """Submit a new product.

        Args:
            author_id: Submitting user (must exist)
            title: Product title
            description: Product description
            url: Product URL
            tags: Free-text tags
            location: Optional location
            is_made_in_my: Whether the product is locally made

        Returns:
            The persisted product

        Raises:
            NotFoundError: If the author doesn't exist
        """
        with logfire.span(
            "product_service.submit", author_id=str(author_id), title=title
        ):
            await self.user_service.get_by_id(author_id)

            product = Product(
                id=ProductId(uuid4()),
                author_id=author_id,
                title=title,
                description=description,
                url=url,
                tags=list(tags),
                location=location,
                is_made_in_my=is_made_in_my,
                created_at=datetime.now(UTC),
            )

            try:
                saved = await self.product_repository.create(product)
            except IntegrityError as e:
                if violated_constraint(e) == FK_PRODUCTS_AUTHOR:
                    raise NotFoundError("User", str(author_id)) from e
                raise

            logfire.info(
                "Product submitted", product_id=str(saved.id), tags=saved.tags
            )
            return saved

    async def get_product_by_id(self, product_id: ProductId) -> Product | None:
        """Get a product by ID.

        Args:
            product_id: Product ID

        Returns:
            Product if found, None otherwise
        """
        with logfire.span(
            "product_service.get_product_by_id", product_id=str(product_id)
        ):
            product = await self.product_repository.find_by_id(product_id)

            if product:
                logfire.info(
                    "Product found", product_id=str(product_id), title=product.title
                )
            else:
                logfire.warn("Product not found", product_id=str(product_id))

            return product

    async def get_by_id(self, product_id: ProductId) -> Product:
        """Get a product by ID.

        Raises:
            NotFoundError: If product not found
        """
        product = await self.get_product_by_id(product_id)
        if not product:
            raise NotFoundError("Product", str(product_id))
        return product

    async def list_products(
        self,
        location: str | None = None,
        tags: Sequence[str] | None = None,
    ) -> list[Product]:
        """List locally made products, newest first.

        Args:
            location: Exact location to match (None for any)
            tags: Match products sharing any of these tags; an empty
                sequence means no tag filter

        Returns:
            Matching products
        """
        with logfire.span(
            "product_service.list_products",
            location=location,
            tags=list(tags) if tags is not None else None,
        ):
            products = await self.product_repository.find_all(
                location=location,
                tags=tags,
                made_in_my_only=True,
            )
            logfire.info("Products listed", count=len(products))
            return products

    async def list_by_author(self, author_id: UserId) -> list[Product]:
        """List every product by an author, locally made or not."""
        with logfire.span(
            "product_service.list_by_author", author_id=str(author_id)
        ):
            products = await self.product_repository.find_by_author(author_id)
            logfire.info(
                "Author products listed", author_id=str(author_id), count=len(products)
            )
            return products

    async def update_product(self, product_id: ProductId, patch: ProductPatch) -> Product:
        """Apply a partial update to a product.

        Args:
            product_id: Product ID
            patch: Fields to change; absent fields keep their stored value

        Returns:
            The product as stored after the update

        Raises:
            NotFoundError: If product not found
        """
        with logfire.span(
            "product_service.update_product",
            product_id=str(product_id),
            fields=sorted(patch.model_fields_set),
        ):
            product = await self.get_by_id(product_id)

            if patch.is_empty():
                logfire.info("Empty product update", product_id=str(product_id))
                return product

            updated = await self.product_repository.update(product_id, patch.changes())
            if updated is None:
                raise NotFoundError("Product", str(product_id))

            logfire.info("Product updated", product_id=str(product_id))
            return updated

    async def rank_by_votes(
        self, viewer_id: UserId | None = None
    ) -> list[ProductWithVotes]:
        """Rank locally made products by all-time vote count.

        Args:
            viewer_id: Optional viewer; when given, ``user_voted`` tells
                whether they voted on each product

        Returns:
            Products, most voted first, newest first among ties
        """
        with logfire.span(
            "product_service.rank_by_votes",
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            ranked = await self.product_repository.find_with_votes(viewer_id=viewer_id)
            logfire.info("Products ranked by votes", count=len(ranked))
            return ranked

    async def rank_trending(
        self, timeframe: Timeframe = Timeframe.DAILY
    ) -> list[ProductWithVotes]:
        """Rank locally made products by votes cast within a trailing window.

        Products with no votes in the window are still listed with a
        count of 0. There is no viewer here, so ``user_voted`` is None.

        Args:
            timeframe: Daily (24 hours) or weekly (7 days) window

        Returns:
            Products, most voted in the window first, newest first among ties
        """
        since = datetime.now(UTC) - timeframe.window
        with logfire.span(
            "product_service.rank_trending",
            timeframe=timeframe.value,
            since=since.isoformat(),
        ):
            ranked = await self.product_repository.find_with_votes(votes_since=since)
            logfire.info(
                "Trending products ranked", timeframe=timeframe.value, count=len(ranked)
            )
            return ranked
