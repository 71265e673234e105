"""In-memory post repository for testing."""

from typing import Optional

from discuss.domain.model.post import Post
from discuss.domain.repository.post import PostRepository
from discuss.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """List posts, newest first."""
        return sorted(
            self._posts.values(),
            key=lambda p: (p.created_at, str(p.id)),
            reverse=True,
        )

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post
