"""Mock persistence providers for testing."""

from dishka import Scope, provide

from hunt.domain.repository import (
    CommentRepository,
    ProductRepository,
    UserRepository,
    VoteRepository,
)
from hunt.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from hunt.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so data written in one request is visible
    to the next, like a database. Every test builds its own container, so
    tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_votes(self) -> InMemoryVoteRepository:
        """Provide the single in-memory vote store."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self, votes: InMemoryVoteRepository) -> VoteRepository:
        """Provide in-memory vote repository."""
        return votes

    @provide(scope=Scope.APP)
    def get_product_repository(
        self, vote_repository: InMemoryVoteRepository
    ) -> ProductRepository:
        """Provide in-memory product repository reading tallies from the vote repository."""
        return InMemoryProductRepository(vote_repository)

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
