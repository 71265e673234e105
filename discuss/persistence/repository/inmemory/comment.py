"""In-memory comment repository for testing."""

from typing import Optional

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId, PostId

from .like import InMemoryLikeRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Deleting a comment clears ``parent_id`` on its replies and purges its
    likes from the linked like repository, mirroring the foreign keys of
    the PostgreSQL schema.
    """

    def __init__(self, like_repository: InMemoryLikeRepository | None = None) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._like_repository = like_repository

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post."""
        return [c for c in self._comments.values() if c.post_id == post_id]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_message(
        self, comment_id: CommentId, message: str
    ) -> Optional[Comment]:
        """Replace the message of a comment."""
        existing = self._comments.get(comment_id)
        if existing is None:
            return None
        updated = existing.model_copy(update={"message": message})
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment, orphaning its replies."""
        if self._comments.pop(comment_id, None) is None:
            return False

        for child_id, child in list(self._comments.items()):
            if child.parent_id == comment_id:
                self._comments[child_id] = child.model_copy(update={"parent_id": None})

        if self._like_repository is not None:
            self._like_repository.purge_comment(comment_id)
        return True
