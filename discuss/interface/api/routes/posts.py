"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status

from discuss.application.usecase.post import (
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostListItem,
)
from discuss.domain.error import NotFoundError
from discuss.domain.service import IdentityService
from discuss.interface.api.routes.identity import optional_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=list[PostListItem])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostListItem]:
    """List posts, newest first.

    Returns:
        ID and title of every post
    """
    try:
        result = await list_posts_use_case.execute(ListPostsRequest())
        return result.posts
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    request: Request,
    get_post_use_case: FromDishka[GetPostUseCase],
    identity_service: FromDishka[IdentityService],
) -> Response:
    """Get a post with its comment thread.

    Works anonymously; ``liked_by_me`` is then false everywhere.

    Args:
        post_id: Post UUID
        request: Incoming request (identity cookie)
        get_post_use_case: Get post use case from DI
        identity_service: Caller resolution (injected)

    Returns:
        Post with comments nested newest first, encoded without recursion
        so reply chains of any depth render

    Raises:
        HTTPException: If post not found
    """
    try:
        use_case_request = GetPostRequest(
            post_id=str(post_id),
            user_id=optional_user_id(request, identity_service),
        )
        result = await get_post_use_case.execute(use_case_request)
        return Response(content=result.to_json(), media_type="application/json")
    except NotFoundError as e:
        logfire.warn("Post not found", post_id=str(post_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except Exception as e:
        logfire.error("Unexpected error getting post", post_id=str(post_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get post",
        )
