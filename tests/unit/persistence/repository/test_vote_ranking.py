"""Unit tests for vote-ranked product views."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from hunt.domain.model import Vote
from hunt.domain.repository import ProductRepository, VoteRepository
from hunt.domain.service import ProductService, UserService, VoteService
from hunt.domain.value import Timeframe, UserId, VoteId
from tests.conftest import make_product
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def _vote(user_id, product_id, age: timedelta) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        product_id=product_id,
        created_at=datetime.now(UTC) - age,
    )


class TestProductsWithVotes:
    """Tests for the all-time vote ranking."""

    @pytest.mark.asyncio
    async def test_vote_then_retract_scenario(self, unit_env):
        """Counts and viewer flags follow a vote and its retraction."""
        # Arrange
        user_service = await unit_env.get(UserService)
        product_service = await unit_env.get(ProductService)
        vote_service = await unit_env.get(VoteService)

        a = await user_service.register(name="A", email="a@x.com")
        p = await product_service.submit(
            author_id=a.id,
            title="P",
            description="Product P",
            url="https://p.example.com",
            is_made_in_my=True,
        )
        b = await user_service.register(name="B", email="b@x.com")

        # Act
        await vote_service.cast_vote(b.id, p.id)
        as_b = await product_service.rank_by_votes(viewer_id=b.id)
        as_a = await product_service.rank_by_votes(viewer_id=a.id)
        await vote_service.retract_vote(b.id, p.id)
        after = await product_service.rank_by_votes()

        # Assert
        assert as_b[0].vote_count == 1
        assert as_b[0].user_voted is True
        assert as_a[0].vote_count == 1
        assert as_a[0].user_voted is False
        assert after[0].vote_count == 0
        assert after[0].user_voted is None

    @pytest.mark.asyncio
    async def test_ordered_by_votes_then_newest(self, unit_env):
        """Most voted first; ties broken by newest product."""
        # Arrange
        product_service = await unit_env.get(ProductService)
        product_repo = await unit_env.get(ProductRepository)
        vote_repo = await unit_env.get(VoteRepository)
        author = UserId(uuid4())
        now = datetime.now(UTC)

        old_tied = await product_repo.create(
            make_product(author, "Old tied", created_at=now - timedelta(days=3))
        )
        new_tied = await product_repo.create(
            make_product(author, "New tied", created_at=now - timedelta(days=1))
        )
        popular = await product_repo.create(
            make_product(author, "Popular", created_at=now - timedelta(days=5))
        )
        await product_repo.create(make_product(author, "Hidden", is_made_in_my=False))

        for _ in range(3):
            await vote_repo.create(_vote(UserId(uuid4()), popular.id, timedelta(0)))
        await vote_repo.create(_vote(UserId(uuid4()), old_tied.id, timedelta(0)))
        await vote_repo.create(_vote(UserId(uuid4()), new_tied.id, timedelta(0)))

        # Act
        ranked = await product_service.rank_by_votes()

        # Assert
        assert [(p.title, p.vote_count) for p in ranked] == [
            ("Popular", 3),
            ("New tied", 1),
            ("Old tied", 1),
        ]


class TestTrendingProducts:
    """Tests for the time-windowed vote ranking."""

    @pytest.mark.asyncio
    async def test_daily_excludes_old_votes_but_keeps_product(self, unit_env):
        """A product with only a 2-day-old vote is listed with 0 votes."""
        # Arrange
        product_service = await unit_env.get(ProductService)
        product_repo = await unit_env.get(ProductRepository)
        vote_repo = await unit_env.get(VoteRepository)
        product = await product_repo.create(make_product(UserId(uuid4())))
        await vote_repo.create(_vote(UserId(uuid4()), product.id, timedelta(days=2)))

        # Act
        daily = await product_service.rank_trending(Timeframe.DAILY)
        weekly = await product_service.rank_trending(Timeframe.WEEKLY)

        # Assert
        assert [(p.id, p.vote_count) for p in daily] == [(product.id, 0)]
        assert [(p.id, p.vote_count) for p in weekly] == [(product.id, 1)]
        assert daily[0].user_voted is None

    @pytest.mark.asyncio
    async def test_trending_ranks_by_recent_votes(self, unit_env):
        """All-time favourites fall behind products with recent votes."""
        # Arrange
        product_service = await unit_env.get(ProductService)
        product_repo = await unit_env.get(ProductRepository)
        vote_repo = await unit_env.get(VoteRepository)
        author = UserId(uuid4())

        veteran = await product_repo.create(make_product(author, "Veteran"))
        rising = await product_repo.create(make_product(author, "Rising"))
        for _ in range(4):
            await vote_repo.create(
                _vote(UserId(uuid4()), veteran.id, timedelta(days=10))
            )
        for _ in range(2):
            await vote_repo.create(_vote(UserId(uuid4()), rising.id, timedelta(hours=2)))

        # Act
        trending = await product_service.rank_trending()
        all_time = await product_service.rank_by_votes()

        # Assert
        assert [p.title for p in trending] == ["Rising", "Veteran"]
        assert [p.vote_count for p in trending] == [2, 0]
        assert [p.title for p in all_time] == ["Veteran", "Rising"]

    def test_timeframe_windows(self):
        """Daily is 24 hours, weekly is 7 days."""
        assert Timeframe.DAILY.window == timedelta(hours=24)
        assert Timeframe.WEEKLY.window == timedelta(days=7)
        assert Timeframe("weekly") is Timeframe.WEEKLY
