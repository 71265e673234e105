"""Like domain service."""

import logfire

from discuss.domain.error import UniqueViolationError
from discuss.domain.model import Like
from discuss.domain.model.common import utcnow
from discuss.domain.repository import LikeRepository
from discuss.domain.value import CallerIdentity, CommentId, PostId

from .base import Service
from .comment_service import CommentService


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            comment_service: Comment domain service
        """
        self.like_repository = like_repository
        self.comment_service = comment_service

    async def toggle_like(
        self,
        comment_id: CommentId,
        caller: CallerIdentity,
        post_id: PostId | None = None,
    ) -> bool:
        """Like the comment if the caller doesn't yet, unlike it otherwise.

        Read-check-then-write without a lock. Two concurrent toggles by the
        same user can both see the same state, so:
        - a create that hits the uniqueness constraint means the like is
          already there, which is reported as liked
        - a delete that finds nothing means it is already gone, which is
          reported as not liked

        Args:
            comment_id: Comment ID
            caller: The requesting user
            post_id: Post the comment is expected on (optional)

        Returns:
            True if the comment is liked after the call, False otherwise

        Raises:
            NotFoundError: If the comment does not exist
            StoreError: If the store fails for any other reason
        """
        with logfire.span(
            "like_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(caller.user_id),
        ):
            await self.comment_service.get_existing_comment(comment_id, post_id)

            existing = await self.like_repository.find_by_user_and_comment(
                caller.user_id, comment_id
            )

            if existing is None:
                try:
                    await self.like_repository.save(
                        Like(
                            user_id=caller.user_id,
                            comment_id=comment_id,
                            created_at=utcnow(),
                        )
                    )
                    logfire.info(
                        "Like added",
                        comment_id=str(comment_id),
                        user_id=str(caller.user_id),
                    )
                except UniqueViolationError:
                    logfire.warn(
                        "Like already recorded by a concurrent request",
                        comment_id=str(comment_id),
                        user_id=str(caller.user_id),
                    )
                return True

            deleted = await self.like_repository.delete_by_user_and_comment(
                caller.user_id, comment_id
            )
            if deleted:
                logfire.info(
                    "Like removed",
                    comment_id=str(comment_id),
                    user_id=str(caller.user_id),
                )
            else:
                logfire.warn(
                    "Like already removed by a concurrent request",
                    comment_id=str(comment_id),
                    user_id=str(caller.user_id),
                )
            return False

    async def get_like_state(
        self,
        caller: CallerIdentity | None,
        comment_ids: list[CommentId],
    ) -> tuple[set[CommentId], dict[CommentId, int]]:
        """Load the like facts needed to annotate a set of comments.

        Only the given comments are queried, never the caller's global
        like set.

        Args:
            caller: The requesting user, or None when anonymous
            comment_ids: Comments to annotate

        Returns:
            IDs the caller likes, and like count per comment ID
        """
        if not comment_ids:
            return set(), {}

        with logfire.span(
            "like_service.get_like_state",
            user_id=str(caller.user_id) if caller else None,
            count=len(comment_ids),
        ):
            like_counts = await self.like_repository.count_by_comments(comment_ids)

            liked_ids: set[CommentId] = set()
            if caller is not None:
                likes = await self.like_repository.find_by_user_and_comments(
                    caller.user_id, comment_ids
                )
                liked_ids = {like.comment_id for like in likes}

            return liked_ids, like_counts
