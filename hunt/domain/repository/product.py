"""Product repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Optional, Sequence

from hunt.domain.model.product import Product, ProductWithVotes
from hunt.domain.value import ProductId, UserId


class ProductRepository(ABC):
    """Repository for Product aggregate.

    Listings take ``made_in_my_only`` so callers decide whether products
    that are not locally made are visible. Every listing is ordered
    newest first with the ID as a tiebreaker.
    """

    @abstractmethod
    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID.

        Args:
            product_id: The product's unique identifier

        Returns:
            The product if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        location: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        made_in_my_only: bool = True,
    ) -> List[Product]:
        """Find products matching the given filters.

        Args:
            location: Exact (case-sensitive) location to match, None for any
            tags: Products sharing at least one of these tags; None or an
                empty sequence disables the tag filter
            made_in_my_only: Whether to only return locally made products

        Returns:
            Matching products, newest first
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Product]:
        """Find every product submitted by an author, locally made or not.

        Args:
            author_id: The author's user ID

        Returns:
            The author's products, newest first
        """
        pass

    @abstractmethod
    async def find_with_votes(
        self,
        viewer_id: Optional[UserId] = None,
        votes_since: Optional[datetime] = None,
    ) -> List[ProductWithVotes]:
        """Rank locally made products by their vote count.

        Products without any counted vote are included with a count of 0.

        Args:
            viewer_id: When given, ``user_voted`` reports whether this user
                has voted on each product; when None it is left as None
            votes_since: Only count votes cast at or after this instant;
                None counts every vote

        Returns:
            Products ordered by vote count, then newest first
        """
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Insert a new product.

        Args:
            product: The product to insert

        Returns:
            The product as persisted

        Raises:
            IntegrityError: If the author doesn't exist
        """
        pass

    @abstractmethod
    async def update(
        self, product_id: ProductId, changes: dict[str, Any]
    ) -> Optional[Product]:
        """Apply a set of column changes to a product.

        Args:
            product_id: ID of the product to update
            changes: Column name to new value, only for changed columns

        Returns:
            The product as persisted after the update, None if it doesn't exist
        """
        pass
