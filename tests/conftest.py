"""Test configuration and fixtures."""

from datetime import UTC, datetime
from uuid import uuid4

import logfire

from hunt.domain.model import Product, User
from hunt.domain.value import ProductId, UserId

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)


def make_user(email: str = "aina@example.com", **overrides) -> User:
    """Build a User with sensible defaults for tests."""
    fields = {
        "id": UserId(uuid4()),
        "name": "Aina",
        "email": email,
        "avatar_url": None,
        "location": "Kuala Lumpur",
        "created_at": datetime.now(UTC),
    }
    fields.update(overrides)
    return User(**fields)


def make_product(author_id: UserId, title: str = "Kopi Finder", **overrides) -> Product:
    """Build a Product with sensible defaults for tests."""
    fields = {
        "id": ProductId(uuid4()),
        "author_id": author_id,
        "title": title,
        "description": "Find the nearest kopitiam",
        "url": "https://kopifinder.my",
        "tags": ["food", "maps"],
        "location": "Kuala Lumpur",
        "is_made_in_my": True,
        "created_at": datetime.now(UTC),
    }
    fields.update(overrides)
    return Product(**fields)


