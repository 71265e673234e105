"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.post import Post
from discuss.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post entity."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Create or replace a post.

        Used by seeding and tests; the API never writes posts.
        """
        pass
