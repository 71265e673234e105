"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService
from discuss.domain.value import CallerIdentity, CommentId, PostId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Caller's user ID
    message: str | None = None


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    id: str
    message: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing the message of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The comment ID and its new message

        Raises:
            ValidationError: If the message is empty
            NotFoundError: If comment not found on the post
            NotAuthorizedError: If the caller is not the author
        """
        comment = await self.comment_service.update_message(
            comment_id=CommentId(UUID(request.comment_id)),
            message=request.message,
            caller=CallerIdentity(user_id=UserId(UUID(request.user_id))),
            post_id=PostId(UUID(request.post_id)),
        )

        return UpdateCommentResponse(id=str(comment.id), message=comment.message)
