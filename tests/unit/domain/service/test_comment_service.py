"""Unit tests for CommentService."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from hunt.domain.error import NotFoundError
from hunt.domain.model import Comment, CommentPatch
from hunt.domain.repository import CommentRepository, ProductRepository
from hunt.domain.repository.constraints import FK_COMMENTS_AUTHOR, FK_COMMENTS_PRODUCT
from hunt.domain.service import CommentService, ProductService, UserService
from hunt.domain.value import CommentId, ProductId, UserId
from hunt.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_product
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_success(self, unit_env):
        """Commenting on an existing product by an existing user should work."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_service = await unit_env.get(UserService)
        product_repo = await unit_env.get(ProductRepository)
        author = await user_service.register(name="Aina", email="aina@example.com")
        product = await product_repo.create(make_product(author.id))

        # Act
        comment = await comment_service.create_comment(
            author_id=author.id, product_id=product.id, content="Bagus!"
        )

        # Assert
        assert comment.content == "Bagus!"
        assert await comment_service.get_comments_for_product(product.id) == [comment]

    @pytest.mark.asyncio
    async def test_create_comment_unknown_product_raises_not_found(self, unit_env):
        """The product must exist."""
        comment_service = await unit_env.get(CommentService)
        user_service = await unit_env.get(UserService)
        author = await user_service.register(name="Aina", email="aina@example.com")
        product_id = ProductId(uuid4())

        with pytest.raises(NotFoundError, match="Product not found"):
            await comment_service.create_comment(
                author_id=author.id, product_id=product_id, content="Hello?"
            )

        assert await comment_service.get_comments_for_product(product_id) == []

    @pytest.mark.asyncio
    async def test_create_comment_unknown_author_raises_not_found(self, unit_env):
        """The author must exist."""
        comment_service = await unit_env.get(CommentService)
        product_repo = await unit_env.get(ProductRepository)
        product = await product_repo.create(make_product(UserId(uuid4())))

        with pytest.raises(NotFoundError, match="User not found"):
            await comment_service.create_comment(
                author_id=UserId(uuid4()), product_id=product.id, content="Hi"
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "constraint,message",
        [
            (FK_COMMENTS_AUTHOR, "User not found"),
            (FK_COMMENTS_PRODUCT, "Product not found"),
        ],
    )
    async def test_foreign_key_violation_maps_to_not_found(
        self, unit_env, constraint, message
    ):
        """A user or product removed after the pre-check is a NotFoundError."""
        # Arrange
        user_service = await unit_env.get(UserService)
        product_repo = await unit_env.get(ProductRepository)
        author = await user_service.register(name="Aina", email="aina@example.com")
        product = await product_repo.create(make_product(author.id))

        class DanglingCommentRepository(InMemoryCommentRepository):
            async def create(self, comment):
                raise IntegrityError(
                    "INSERT INTO comments",
                    None,
                    Exception(f'violates foreign key constraint "{constraint}"'),
                )

        comment_service = CommentService(
            comment_repository=DanglingCommentRepository(),
            user_service=user_service,
            product_service=await unit_env.get(ProductService),
        )

        # Act & Assert
        with pytest.raises(NotFoundError, match=message):
            await comment_service.create_comment(
                author_id=author.id, product_id=product.id, content="Hi"
            )


class TestCommentsForProduct:
    """Tests for get_comments_for_product method."""

    @pytest.mark.asyncio
    async def test_comments_are_newest_first(self, unit_env):
        """Comments should come back newest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        product_id = ProductId(uuid4())
        now = datetime.now(UTC)

        for age, content in ((3, "oldest"), (1, "newest"), (2, "middle")):
            await comment_repo.create(
                Comment(
                    id=CommentId(uuid4()),
                    content=content,
                    author_id=UserId(uuid4()),
                    product_id=product_id,
                    created_at=now - timedelta(minutes=age),
                )
            )

        # Act
        comments = await comment_service.get_comments_for_product(product_id)

        # Assert
        assert [c.content for c in comments] == ["newest", "middle", "oldest"]


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_update_changes_content_and_keeps_timestamp(self, unit_env):
        """Only the content changes."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_service = await unit_env.get(UserService)
        product_repo = await unit_env.get(ProductRepository)
        author = await user_service.register(name="Aina", email="aina@example.com")
        product = await product_repo.create(make_product(author.id))
        comment = await comment_service.create_comment(
            author_id=author.id, product_id=product.id, content="Frist"
        )

        # Act
        updated = await comment_service.update_comment(
            comment.id, CommentPatch(content="First")
        )

        # Assert
        assert updated.content == "First"
        assert updated.created_at == comment.created_at
        assert updated.author_id == comment.author_id

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises_not_found(self, unit_env):
        """Updating an unknown comment should raise NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.update_comment(
                CommentId(uuid4()), CommentPatch(content="Ghost")
            )
