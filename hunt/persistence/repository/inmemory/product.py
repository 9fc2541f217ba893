"""In-memory product repository for testing."""

from datetime import datetime
from typing import Any, Optional, Sequence

from hunt.domain.model.product import Product, ProductWithVotes
from hunt.domain.repository.product import ProductRepository
from hunt.domain.value import ProductId, UserId
from hunt.persistence.repository.inmemory.vote import InMemoryVoteRepository


def _newest_first(products: list[Product]) -> list[Product]:
    return sorted(products, key=lambda p: (p.created_at, p.id), reverse=True)


class InMemoryProductRepository(ProductRepository):
    """In-memory implementation of ProductRepository for testing.

    Vote tallies are read from the vote repository it is given, so both
    must be the same instances the services write to.
    """

    def __init__(self, vote_repository: InMemoryVoteRepository) -> None:
        self._products: dict[ProductId, Product] = {}
        self._vote_repository = vote_repository

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID."""
        return self._products.get(product_id)

    async def find_all(
        self,
        location: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        made_in_my_only: bool = True,
    ) -> list[Product]:
        """Find products matching the filters, newest first."""
        products = list(self._products.values())

        if made_in_my_only:
            products = [p for p in products if p.is_made_in_my]
        if location is not None:
            products = [p for p in products if p.location == location]
        if tags:
            wanted = set(tags)
            products = [p for p in products if wanted.intersection(p.tags)]

        return _newest_first(products)

    async def find_by_author(self, author_id: UserId) -> list[Product]:
        """Find every product by an author, newest first."""
        return _newest_first(
            [p for p in self._products.values() if p.author_id == author_id]
        )

    async def find_with_votes(
        self,
        viewer_id: Optional[UserId] = None,
        votes_since: Optional[datetime] = None,
    ) -> list[ProductWithVotes]:
        """Rank locally made products by vote count."""
        ranked = []
        for product in await self.find_all():
            votes = self._vote_repository.votes_on(product.id)
            counted = [
                v for v in votes if votes_since is None or v.created_at >= votes_since
            ]
            user_voted = None
            if viewer_id is not None:
                user_voted = any(v.user_id == viewer_id for v in votes)

            ranked.append(
                ProductWithVotes(
                    **product.model_dump(),
                    vote_count=len(counted),
                    user_voted=user_voted,
                )
            )

        # find_all is already newest first and sorted() is stable
        return sorted(ranked, key=lambda p: p.vote_count, reverse=True)

    async def create(self, product: Product) -> Product:
        """Store a new product."""
        self._products[product.id] = product
        return product

    async def update(
        self, product_id: ProductId, changes: dict[str, Any]
    ) -> Optional[Product]:
        """Replace the given fields of a stored product."""
        product = self._products.get(product_id)
        if product is None:
            return None
        updated = product.model_copy(update=changes)
        self._products[product_id] = updated
        return updated
