"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer and raise
    ``StoreError`` when the store itself fails.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post.

        No particular order is promised; the thread assembler sorts.

        Args:
            post_id: The post ID

        Returns:
            Flat list of the post's comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create a comment.

        Args:
            comment: The comment to create

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_message(
        self, comment_id: CommentId, message: str
    ) -> Optional[Comment]:
        """Replace the message of a comment. No other field is touched.

        Args:
            comment_id: The comment ID
            message: New message

        Returns:
            Updated comment, or None if the comment no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete).

        Replies are left in place; the likes of the comment go with it.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a row was deleted, False if it was already gone
        """
        pass
