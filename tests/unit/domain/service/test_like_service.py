"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from discuss.domain.error import NotFoundError, StoreError, UniqueViolationError
from discuss.domain.model import Like
from discuss.domain.repository import CommentRepository, LikeRepository
from discuss.domain.service import LikeService
from discuss.domain.value import CallerIdentity, CommentId
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _stored_comment(unit_env):
    comment_repo = await unit_env.get(CommentRepository)
    post = make_post()
    return post, await comment_repo.save(make_comment(post, make_user()))


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes_second_unlikes(self, unit_env):
        """Toggle on a comment: liked=True then liked=False."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        post, comment = await _stored_comment(unit_env)
        caller = CallerIdentity(user_id=make_user("Ada").id)

        # Act & Assert
        assert await like_service.toggle_like(comment.id, caller, post.id) is True
        assert await like_repo.find_by_user_and_comment(caller.user_id, comment.id)

        assert await like_service.toggle_like(comment.id, caller, post.id) is False
        assert (
            await like_repo.find_by_user_and_comment(caller.user_id, comment.id)
            is None
        )

    @pytest.mark.asyncio
    async def test_toggle_keeps_alternating(self, unit_env):
        """Odd calls report liked, even calls report not liked."""
        like_service = await unit_env.get(LikeService)
        _, comment = await _stored_comment(unit_env)
        caller = CallerIdentity(user_id=make_user().id)

        results = [await like_service.toggle_like(comment.id, caller) for _ in range(5)]

        assert results == [True, False, True, False, True]

    @pytest.mark.asyncio
    async def test_likes_by_different_users_are_independent(self, unit_env):
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        _, comment = await _stored_comment(unit_env)
        ada = CallerIdentity(user_id=make_user("Ada").id)
        bob = CallerIdentity(user_id=make_user("Bob").id)

        await like_service.toggle_like(comment.id, ada)
        await like_service.toggle_like(comment.id, bob)
        await like_service.toggle_like(comment.id, ada)

        counts = await like_repo.count_by_comments([comment.id])
        assert counts == {comment.id: 1}

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(
                CommentId(uuid4()), CallerIdentity(user_id=make_user().id)
            )

    @pytest.mark.asyncio
    async def test_comment_on_other_post_raises_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)
        _, comment = await _stored_comment(unit_env)

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(
                comment.id,
                CallerIdentity(user_id=make_user().id),
                post_id=make_post().id,
            )

    @pytest.mark.asyncio
    async def test_concurrent_like_is_reported_as_liked(self, unit_env):
        """A unique violation on create means a racing toggle already liked it."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        _, comment = await _stored_comment(unit_env)
        caller = CallerIdentity(user_id=make_user().id)

        # The read sees no like; another request inserts one before our save
        async def find_nothing(user_id, comment_id):
            return None

        like_repo.find_by_user_and_comment = find_nothing
        await like_repo.save(Like(user_id=caller.user_id, comment_id=comment.id))

        # Act
        liked = await like_service.toggle_like(comment.id, caller)

        # Assert
        assert liked is True
        assert await like_repo.count_by_comments([comment.id]) == {comment.id: 1}

    @pytest.mark.asyncio
    async def test_concurrent_unlike_is_reported_as_not_liked(self, unit_env):
        """A delete that finds nothing means a racing toggle already removed it."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        _, comment = await _stored_comment(unit_env)
        caller = CallerIdentity(user_id=make_user().id)
        stale = Like(user_id=caller.user_id, comment_id=comment.id)

        async def find_stale(user_id, comment_id):
            return stale

        like_repo.find_by_user_and_comment = find_stale

        # Act
        liked = await like_service.toggle_like(comment.id, caller)

        # Assert
        assert liked is False
        assert await like_repo.count_by_comments([comment.id]) == {}

    @pytest.mark.asyncio
    async def test_other_store_errors_propagate(self, unit_env):
        """Only unique violations are absorbed."""
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        _, comment = await _stored_comment(unit_env)

        async def broken_save(like):
            raise StoreError("create like failed")

        like_repo.save = broken_save

        with pytest.raises(StoreError) as exc_info:
            await like_service.toggle_like(
                comment.id, CallerIdentity(user_id=make_user().id)
            )
        assert not isinstance(exc_info.value, UniqueViolationError)


class TestGetLikeState:
    """Tests for get_like_state method."""

    @pytest.mark.asyncio
    async def test_counts_and_caller_likes(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        _, first = await _stored_comment(unit_env)
        _, second = await _stored_comment(unit_env)
        me = make_user("Me")
        other = make_user("Other")
        await like_repo.save(Like(user_id=me.id, comment_id=first.id))
        await like_repo.save(Like(user_id=other.id, comment_id=first.id))
        await like_repo.save(Like(user_id=other.id, comment_id=second.id))

        # Act
        liked_ids, counts = await like_service.get_like_state(
            CallerIdentity(user_id=me.id), [first.id, second.id]
        )

        # Assert
        assert liked_ids == {first.id}
        assert counts == {first.id: 2, second.id: 1}

    @pytest.mark.asyncio
    async def test_only_requested_comments_are_considered(self, unit_env):
        """Likes on comments outside the requested set are ignored."""
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        _, wanted = await _stored_comment(unit_env)
        _, elsewhere = await _stored_comment(unit_env)
        me = make_user()
        await like_repo.save(Like(user_id=me.id, comment_id=elsewhere.id))

        liked_ids, counts = await like_service.get_like_state(
            CallerIdentity(user_id=me.id), [wanted.id]
        )

        assert liked_ids == set()
        assert counts == {}

    @pytest.mark.asyncio
    async def test_anonymous_caller_gets_counts_only(self, unit_env):
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        _, comment = await _stored_comment(unit_env)
        await like_repo.save(Like(user_id=make_user().id, comment_id=comment.id))

        liked_ids, counts = await like_service.get_like_state(None, [comment.id])

        assert liked_ids == set()
        assert counts == {comment.id: 1}

    @pytest.mark.asyncio
    async def test_no_comments(self, unit_env):
        like_service = await unit_env.get(LikeService)

        assert await like_service.get_like_state(None, []) == (set(), {})
