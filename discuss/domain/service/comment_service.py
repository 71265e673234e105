"""Comment domain service."""

from uuid import uuid4

import logfire

from discuss.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from discuss.domain.model import Comment, User
from discuss.domain.model.comment import MAX_MESSAGE_LENGTH
from discuss.domain.model.common import utcnow
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CallerIdentity, CommentId, PostId

from .base import Service


def require_message(message: str | None) -> str:
    """Validate a comment message.

    Args:
        message: Raw message from the caller

    Returns:
        The message, unchanged

    Raises:
        ValidationError: If the message is missing, empty or too long
    """
    if not message:
        raise ValidationError("Message is required")
    if len(message) > MAX_MESSAGE_LENGTH:
        raise ValidationError(
            f"Message must be at most {MAX_MESSAGE_LENGTH} characters"
        )
    return message


class CommentService(Service):
    """Domain service for comment operations.

    Owns the comment rules: non-empty messages, replies stay inside their
    post, and only the author may edit or delete a comment.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author: User,
        message: str | None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        Args:
            post_id: Post ID
            author: The commenting user
            message: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If message is empty or parent is on another post
            NotFoundError: If the parent comment does not exist
        """
        message = require_message(message)

        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post"
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author.id,
                author_name=author.name,
                message=message,
                parent_id=parent_id,
                created_at=utcnow(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author_id=str(author.id),
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get the flat comment rows of a post.

        Args:
            post_id: Post ID

        Returns:
            Comments of the post, unordered
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_existing_comment(
        self, comment_id: CommentId, post_id: PostId | None = None
    ) -> Comment:
        """Get a comment that must exist, optionally scoped to a post.

        Raises:
            NotFoundError: If the comment is missing or lives on another post
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None or (post_id is not None and comment.post_id != post_id):
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def update_message(
        self,
        comment_id: CommentId,
        message: str | None,
        caller: CallerIdentity,
        post_id: PostId | None = None,
    ) -> Comment:
        """Replace the message of a comment owned by the caller.

        The ownership read and the write are separate store calls. That is
        safe because the author never changes; the only race is with a
        concurrent delete, which turns this into NotFoundError.

        Args:
            comment_id: Comment ID
            message: New message
            caller: The requesting user
            post_id: Post the comment is expected on (optional)

        Returns:
            The updated comment

        Raises:
            ValidationError: If the message is empty
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
        """
        message = require_message(message)

        with logfire.span(
            "comment_service.update_message",
            comment_id=str(comment_id),
            user_id=str(caller.user_id),
            message_length=len(message),
        ):
            comment = await self.get_existing_comment(comment_id, post_id)
            if not caller.owns(comment.author_id):
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    user_id=str(caller.user_id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(caller.user_id)
                )

            updated = await self.comment_repository.update_message(
                comment_id, message
            )
            if updated is None:
                logfire.warn(
                    "Comment deleted before update", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment message updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(
        self,
        comment_id: CommentId,
        caller: CallerIdentity,
        post_id: PostId | None = None,
    ) -> CommentId:
        """Delete a comment owned by the caller.

        Replies are kept and show up as top-level comments afterwards.

        Args:
            comment_id: Comment ID
            caller: The requesting user
            post_id: Post the comment is expected on (optional)

        Returns:
            ID of the deleted comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(caller.user_id),
        ):
            comment = await self.get_existing_comment(comment_id, post_id)
            if not caller.owns(comment.author_id):
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(caller.user_id),
                )
                raise NotAuthorizedError(
                    "comment", str(comment_id), str(caller.user_id), action="delete"
                )

            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                logfire.warn(
                    "Comment deleted concurrently", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment deleted", comment_id=str(comment_id))
            return comment_id
