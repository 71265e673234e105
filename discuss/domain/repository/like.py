"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from discuss.domain.model.like import Like
from discuss.domain.value import CommentId, UserId


class LikeRepository(ABC):
    """Repository for Like facts.

    The store enforces uniqueness of (user_id, comment_id); the
    application never relies on a read to guarantee it.
    """

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Like]:
        """Find a user's like on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            The like if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Like]:
        """Find a user's likes restricted to the given comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comment IDs to check

        Returns:
            Likes by the user on any of the given comments
        """
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes per comment (batch query).

        Args:
            comment_ids: Comment IDs to count

        Returns:
            Mapping of comment ID to like count. Comments without likes
            may be absent.
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Create a like.

        Args:
            like: The like to create

        Returns:
            The stored like

        Raises:
            UniqueViolationError: If the user already likes the comment
        """
        pass

    @abstractmethod
    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            True if a like was deleted, False if none existed
        """
        pass
