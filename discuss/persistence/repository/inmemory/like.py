"""In-memory like repository for testing."""

from typing import Optional, Sequence

from discuss.domain.error import UniqueViolationError
from discuss.domain.model.like import Like
from discuss.domain.repository.like import LikeRepository
from discuss.domain.value import CommentId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    Keyed by (user_id, comment_id), so the uniqueness rule holds here the
    same way the composite primary key enforces it in PostgreSQL.
    """

    def __init__(self) -> None:
        self._likes: dict[tuple[UserId, CommentId], Like] = {}

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Like]:
        """Find a user's like on a comment."""
        return self._likes.get((user_id, comment_id))

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Like]:
        """Find a user's likes on any of the given comments."""
        wanted = set(comment_ids)
        return [
            like
            for (uid, cid), like in self._likes.items()
            if uid == user_id and cid in wanted
        ]

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes per comment."""
        wanted = set(comment_ids)
        counts: dict[CommentId, int] = {}
        for _, cid in self._likes:
            if cid in wanted:
                counts[cid] = counts.get(cid, 0) + 1
        return counts

    async def save(self, like: Like) -> Like:
        """Save a like, rejecting duplicates."""
        key = (like.user_id, like.comment_id)
        if key in self._likes:
            raise UniqueViolationError("create like: duplicate row")
        self._likes[key] = like
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment."""
        return self._likes.pop((user_id, comment_id), None) is not None

    def purge_comment(self, comment_id: CommentId) -> None:
        """Drop every like on a comment (cascade on comment delete)."""
        for key in [key for key in self._likes if key[1] == comment_id]:
            del self._likes[key]
