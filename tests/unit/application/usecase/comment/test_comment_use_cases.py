"""Unit tests for the comment use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from hunt.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from hunt.application.usecase.product import CreateProductRequest, CreateProductUseCase
from hunt.application.usecase.user import CreateUserRequest, CreateUserUseCase
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCommentUseCases:
    """Tests for the comment use cases."""

    def test_empty_content_rejected(self):
        """Comment content must be non-empty."""
        with pytest.raises(ValidationError):
            CreateCommentRequest(content="", author_id=uuid4(), product_id=uuid4())

        with pytest.raises(ValidationError):
            UpdateCommentRequest(id=uuid4(), content="")

    @pytest.mark.asyncio
    async def test_create_update_and_list(self, unit_env):
        """Comments are created, edited in place and listed newest first."""
        # Arrange
        author = await (await unit_env.get(CreateUserUseCase)).execute(
            CreateUserRequest(name="Aina", email="aina@example.com")
        )
        product = await (await unit_env.get(CreateProductUseCase)).execute(
            CreateProductRequest(
                title="Kopi Finder",
                description="Find the nearest kopitiam",
                url="https://kopifinder.my",
                author_id=author.id,
            )
        )
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)

        # Act
        first = await create.execute(
            CreateCommentRequest(
                content="First!", author_id=author.id, product_id=product.id
            )
        )
        second = await create.execute(
            CreateCommentRequest(
                content="Second", author_id=author.id, product_id=product.id
            )
        )
        edited = await update.execute(UpdateCommentRequest(id=first.id, content="1st"))
        listed = await get_comments.execute(GetCommentsRequest(product_id=product.id))

        # Assert
        assert edited.content == "1st"
        assert edited.created_at == first.created_at
        assert {c.id for c in listed.comments} == {first.id, second.id}
        assert listed.comments[0].created_at >= listed.comments[1].created_at
        assert {c.content for c in listed.comments} == {"1st", "Second"}
