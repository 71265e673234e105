"""Like routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from discuss.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.domain.service import IdentityService
from discuss.interface.api.routes.identity import require_user_id

router = APIRouter(prefix="/posts", tags=["likes"], route_class=DishkaRoute)


@router.post(
    "/{post_id}/comments/{comment_id}/toggle-like",
    response_model=ToggleLikeResponse,
)
async def toggle_like(
    post_id: UUID,
    comment_id: UUID,
    request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    identity_service: FromDishka[IdentityService],
) -> ToggleLikeResponse:
    """Like a comment, or remove the caller's like if already there.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: Incoming request (identity cookie)
        toggle_like_use_case: Toggle like use case from DI
        identity_service: Caller resolution (injected)

    Returns:
        Whether the caller likes the comment now

    Raises:
        HTTPException: If the caller is anonymous or unknown, or comment not found
    """
    user_id = require_user_id(request, identity_service, "like comments")

    try:
        use_case_request = ToggleLikeRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=user_id,
        )
        return await toggle_like_use_case.execute(use_case_request)
    except NotFoundError as e:
        if e.resource == "User":
            logfire.warn("Like by unknown caller", user_id=user_id)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unknown user",
            )
        logfire.warn("Like on missing comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except Exception as e:
        logfire.error("Unexpected error toggling like", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to toggle like",
        )
