"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService
from discuss.domain.value import CallerIdentity, CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Caller's user ID


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment. Replies are kept."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment not found on the post
            NotAuthorizedError: If the caller is not the author
        """
        deleted_id = await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            caller=CallerIdentity(user_id=UserId(UUID(request.user_id))),
            post_id=PostId(UUID(request.post_id)),
        )
        return DeleteCommentResponse(id=str(deleted_id))
