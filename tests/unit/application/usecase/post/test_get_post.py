"""Unit tests for GetPostUseCase and ListPostsUseCase."""

import json
from uuid import uuid4

import pytest

from discuss.application.usecase.post import (
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.domain.model import Like
from discuss.domain.repository import CommentRepository, LikeRepository, PostRepository
from tests.conftest import at, make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_returns_post_with_annotated_thread(self, unit_env):
        """[C3, C1[C2]] with the caller's like on C2."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        post = await (await unit_env.get(PostRepository)).save(make_post("Hello"))
        author = make_user()
        me = make_user("Me")

        c1 = await comment_repo.save(make_comment(post, author, "C1", created_at=at(10)))
        c2 = await comment_repo.save(
            make_comment(post, author, "C2", parent=c1, created_at=at(20))
        )
        c3 = await comment_repo.save(make_comment(post, author, "C3", created_at=at(30)))
        await like_repo.save(Like(user_id=me.id, comment_id=c2.id))
        await like_repo.save(Like(user_id=author.id, comment_id=c2.id))

        # Act
        result = await use_case.execute(
            GetPostRequest(post_id=str(post.id), user_id=str(me.id))
        )

        # Assert
        assert result.id == str(post.id)
        assert result.title == "Hello"
        assert result.body == post.body
        assert [c.id for c in result.comments] == [str(c3.id), str(c1.id)]
        reply = result.comments[1].children[0]
        assert reply.id == str(c2.id)
        assert reply.like_count == 2
        assert reply.liked_by_me is True
        assert result.comments[0].like_count == 0
        assert json.loads(result.to_json()) == result.model_dump(mode="json")

    @pytest.mark.asyncio
    async def test_anonymous_read_has_no_liked_by_me(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        comment = await (await unit_env.get(CommentRepository)).save(
            make_comment(post, make_user())
        )
        await (await unit_env.get(LikeRepository)).save(
            Like(user_id=make_user().id, comment_id=comment.id)
        )

        result = await use_case.execute(GetPostRequest(post_id=str(post.id)))

        assert result.comments[0].like_count == 1
        assert result.comments[0].liked_by_me is False

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=str(uuid4())))


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_id_and_title_newest_first(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        old = await post_repo.save(make_post("Old", created_at=at(0)))
        new = await post_repo.save(make_post("New", created_at=at(100)))

        result = await use_case.execute(ListPostsRequest())

        assert [(p.id, p.title) for p in result.posts] == [
            (str(new.id), "New"),
            (str(old.id), "Old"),
        ]
