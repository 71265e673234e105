"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.error import NotFoundError
from discuss.domain.service import (
    AnnotatedComment,
    CommentService,
    PostService,
    UserService,
    require_message,
)
from discuss.domain.value import CommentId, PostId, UserId

from .comment_node import CommentNode


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    user_id: str  # Caller's user ID
    message: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentNode:
        """Execute create comment flow.

        Steps:
        1. Reject an empty message before touching the store
        2. Verify post exists
        3. Load the author (their name is stored on the comment)
        4. Create comment via comment service (validates parent if replying)

        Args:
            request: Create comment request

        Returns:
            The new comment, annotated with no likes and no children

        Raises:
            ValidationError: If message is empty or parent is on another post
            NotFoundError: If post, user or parent comment not found
        """
        message = require_message(request.message)
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        author = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author=author,
            message=message,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )

        return CommentNode.from_annotated(AnnotatedComment.from_comment(comment))
