"""Unit tests for the in-memory repositories used by the test container."""

import pytest

from discuss.domain.error import UniqueViolationError
from discuss.domain.model import Like
from discuss.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
)
from tests.conftest import make_comment, make_post, make_user


class TestInMemoryLikeRepository:
    """Tests for the like store."""

    @pytest.mark.asyncio
    async def test_duplicate_like_violates_uniqueness(self):
        repo = InMemoryLikeRepository()
        comment = make_comment(make_post(), make_user())
        user = make_user()
        await repo.save(Like(user_id=user.id, comment_id=comment.id))

        with pytest.raises(UniqueViolationError):
            await repo.save(Like(user_id=user.id, comment_id=comment.id))

    @pytest.mark.asyncio
    async def test_delete_reports_whether_a_like_existed(self):
        repo = InMemoryLikeRepository()
        comment = make_comment(make_post(), make_user())
        user = make_user()
        await repo.save(Like(user_id=user.id, comment_id=comment.id))

        assert await repo.delete_by_user_and_comment(user.id, comment.id) is True
        assert await repo.delete_by_user_and_comment(user.id, comment.id) is False


class TestInMemoryCommentRepository:
    """Tests for the comment store."""

    @pytest.mark.asyncio
    async def test_delete_cascades_likes_and_orphans_replies(self):
        # Arrange
        likes = InMemoryLikeRepository()
        comments = InMemoryCommentRepository(like_repository=likes)
        post = make_post()
        author = make_user()
        parent = await comments.save(make_comment(post, author))
        reply = await comments.save(make_comment(post, author, parent=parent))
        await likes.save(Like(user_id=author.id, comment_id=parent.id))
        await likes.save(Like(user_id=author.id, comment_id=reply.id))

        # Act
        deleted = await comments.delete(parent.id)

        # Assert
        assert deleted is True
        assert await comments.delete(parent.id) is False
        assert (await comments.find_by_id(reply.id)).parent_id is None
        assert await likes.count_by_comments([parent.id, reply.id]) == {reply.id: 1}

    @pytest.mark.asyncio
    async def test_update_message_of_missing_comment_returns_none(self):
        comments = InMemoryCommentRepository()
        comment = make_comment(make_post(), make_user())

        assert await comments.update_message(comment.id, "text") is None
