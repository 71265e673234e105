"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

import pytest

from discuss.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from discuss.domain.error import NotAuthorizedError
from discuss.domain.repository import CommentRepository
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_owner_edit_returns_new_message(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        author = make_user()
        post = make_post()
        comment = await (await unit_env.get(CommentRepository)).save(
            make_comment(post, author, "before")
        )

        # Act
        result = await use_case.execute(
            UpdateCommentRequest(
                post_id=str(post.id),
                comment_id=str(comment.id),
                user_id=str(author.id),
                message="after",
            )
        )

        # Assert
        assert result.id == str(comment.id)
        assert result.message == "after"

    @pytest.mark.asyncio
    async def test_edit_by_someone_else_is_forbidden(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        post = make_post()
        comment = await (await unit_env.get(CommentRepository)).save(
            make_comment(post, make_user())
        )

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(comment.id),
                    user_id=str(make_user("Eve").id),
                    message="mine now",
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_owner_delete_returns_id(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        post = make_post()
        comment = await comment_repo.save(make_comment(post, author))

        # Act
        result = await use_case.execute(
            DeleteCommentRequest(
                post_id=str(post.id), comment_id=str(comment.id), user_id=str(author.id)
            )
        )

        # Assert
        assert result.id == str(comment.id)
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_delete_by_someone_else_is_forbidden(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        post = make_post()
        comment = await (await unit_env.get(CommentRepository)).save(
            make_comment(post, make_user())
        )

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(comment.id),
                    user_id=str(make_user("Eve").id),
                )
            )
