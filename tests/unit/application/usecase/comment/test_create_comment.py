"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import NotFoundError, ValidationError
from discuss.domain.repository import CommentRepository, PostRepository, UserRepository
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_annotated_node(self, unit_env):
        """New comment has no likes and no replies."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        author = await (await unit_env.get(UserRepository)).save(make_user("Mauro"))

        # Act
        result = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), user_id=str(author.id), message="Hello"
            )
        )

        # Assert
        assert result.message == "Hello"
        assert result.post_id == str(post.id)
        assert result.parent_id is None
        assert result.author.id == str(author.id)
        assert result.author.name == "Mauro"
        assert result.like_count == 0
        assert result.liked_by_me is False
        assert result.children == []

    @pytest.mark.asyncio
    async def test_reply_carries_parent_id(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        author = await (await unit_env.get(UserRepository)).save(make_user())
        parent = await (await unit_env.get(CommentRepository)).save(
            make_comment(post, author)
        )

        result = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                user_id=str(author.id),
                message="Reply",
                parent_id=str(parent.id),
            )
        )

        assert result.parent_id == str(parent.id)

    @pytest.mark.asyncio
    async def test_empty_message_is_checked_before_post_lookup(self, unit_env):
        """Validation comes first, even when the post doesn't exist."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), user_id=str(uuid4()), message=""
                )
            )

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        author = await (await unit_env.get(UserRepository)).save(make_user())

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), user_id=str(author.id), message="Hi"
                )
            )
        assert exc_info.value.resource == "Post"

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        """The caller must be a known user, their name goes on the comment."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id), user_id=str(uuid4()), message="Hi"
                )
            )
        assert exc_info.value.resource == "User"
