"""Integration tests for the PostgreSQL repositories.

These run against a real database (DATABASE__URL, migrations applied)
and are skipped when none is configured.
"""

import os
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from hunt.domain.error import ConflictError
from hunt.domain.model import ProductPatch
from hunt.domain.repository import ProductRepository, VoteRepository
from hunt.domain.service import ProductService, UserService, VoteService
from hunt.domain.value import UserId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="needs a PostgreSQL database"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _email() -> str:
    return f"{uuid4().hex}@example.com"


class TestPostgresRepositories:
    """Round trips through the real schema."""

    @pytest.mark.asyncio
    async def test_tags_survive_round_trip(self, integration_env):
        """Tag order and duplicates are kept; [] clears them."""
        user_service = await integration_env.get(UserService)
        product_service = await integration_env.get(ProductService)
        author = await user_service.register(name="Aina", email=_email())

        product = await product_service.submit(
            author_id=author.id,
            title="Kopi Finder",
            description="Find the nearest kopitiam",
            url="https://kopifinder.my",
            tags=["maps", "food", "maps"],
        )
        cleared = await product_service.update_product(
            product.id, ProductPatch(tags=[])
        )

        assert product.tags == ["maps", "food", "maps"]
        assert cleared.tags == []
        assert cleared.title == product.title

    @pytest.mark.asyncio
    async def test_duplicate_email_is_conflict(self, integration_env):
        user_service = await integration_env.get(UserService)
        email = _email()
        await user_service.register(name="Aina", email=email)

        with pytest.raises(ConflictError):
            await user_service.register(name="Other", email=email)

    @pytest.mark.asyncio
    async def test_ranking_counts_votes_and_viewer(self, integration_env):
        """Vote counts, the viewer flag and the trending window come from SQL."""
        user_service = await integration_env.get(UserService)
        product_service = await integration_env.get(ProductService)
        vote_service = await integration_env.get(VoteService)
        product_repository = await integration_env.get(ProductRepository)
        alice = await user_service.register(name="Alice", email=_email())
        bob = await user_service.register(name="Bob", email=_email())
        product = await product_service.submit(
            author_id=alice.id,
            title="Kopi Finder",
            description="Find the nearest kopitiam",
            url="https://kopifinder.my",
        )

        await vote_service.cast_vote(alice.id, product.id)
        await vote_service.cast_vote(bob.id, product.id)

        as_alice = await product_repository.find_with_votes(viewer_id=alice.id)
        as_stranger = await product_repository.find_with_votes(
            viewer_id=UserId(uuid4())
        )
        future = await product_repository.find_with_votes(
            votes_since=datetime.now(UTC) + timedelta(minutes=1)
        )

        mine = next(p for p in as_alice if p.id == product.id)
        assert mine.vote_count == 2
        assert mine.user_voted is True
        assert next(p for p in as_stranger if p.id == product.id).user_voted is False
        assert next(p for p in future if p.id == product.id).vote_count == 0

    @pytest.mark.asyncio
    async def test_retract_vote(self, integration_env):
        user_service = await integration_env.get(UserService)
        product_service = await integration_env.get(ProductService)
        vote_service = await integration_env.get(VoteService)
        vote_repository = await integration_env.get(VoteRepository)
        user = await user_service.register(name="Alice", email=_email())
        product = await product_service.submit(
            author_id=user.id,
            title="Kopi Finder",
            description="Find the nearest kopitiam",
            url="https://kopifinder.my",
        )
        await vote_service.cast_vote(user.id, product.id)

        assert await vote_service.retract_vote(user.id, product.id) is True
        assert await vote_service.retract_vote(user.id, product.id) is False
        assert await vote_repository.find_by_user_and_product(user.id, product.id) is None
