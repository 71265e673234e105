"""Unit tests for PostService and UserService."""

from uuid import uuid4

import pytest

from discuss.domain.error import NotFoundError
from discuss.domain.repository import PostRepository
from discuss.domain.service import PostService, UserService
from discuss.domain.value import PostId, UserId
from tests.conftest import at, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPostService:
    """Tests for PostService."""

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        old = await post_repo.save(make_post("Old", created_at=at(0)))
        new = await post_repo.save(make_post("New", created_at=at(60)))

        # Act
        posts = await post_service.list_posts()

        # Assert
        assert [p.id for p in posts] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_get_missing_post_returns_none(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_id(PostId(uuid4())) is None


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_save_and_get(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = make_user("Ada")

        await user_service.save(user)

        assert await user_service.get_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError) as exc_info:
            await user_service.get_by_id(UserId(uuid4()))
        assert exc_info.value.resource == "User"
