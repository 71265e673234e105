"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import LikeService, UserService
from discuss.domain.value import CallerIdentity, CommentId, PostId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Caller's user ID


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(self, like_service: LikeService, user_service: UserService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
            user_service: User domain service
        """
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            Whether the caller likes the comment after the toggle

        Raises:
            NotFoundError: If the caller is not a known user, or comment not
                found on the post
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        liked = await self.like_service.toggle_like(
            comment_id=CommentId(UUID(request.comment_id)),
            caller=CallerIdentity(user_id=user.id),
            post_id=PostId(UUID(request.post_id)),
        )
        return ToggleLikeResponse(liked=liked)
