"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from discuss.application.usecase.comment import (
    CommentNode,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from discuss.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from discuss.domain.service import IdentityService
from discuss.interface.api.routes.identity import require_user_id

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    The message is checked by the domain so that an empty one yields 400,
    not a schema error.
    """

    message: str | None = None
    parent_id: UUID | None = None  # Parent comment ID for replies


@router.post(
    "/{post_id}/comments",
    response_model=CommentNode,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> CommentNode:
    """Create a comment on a post or reply to another comment.

    Requires a caller.

    Args:
        post_id: Post UUID
        body: Comment creation data
        request: Incoming request (identity cookie)
        create_comment_use_case: Create comment use case from DI
        identity_service: Caller resolution (injected)

    Returns:
        Created comment, with no likes and no replies yet

    Raises:
        HTTPException: If the caller is anonymous or unknown, post/parent not
            found or validation fails
    """
    user_id = require_user_id(request, identity_service, "create comments")

    try:
        use_case_request = CreateCommentRequest(
            post_id=str(post_id),
            user_id=user_id,
            message=body.message,
            parent_id=str(body.parent_id) if body.parent_id else None,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError as e:
        if e.resource == "User":
            # Cookie names a user that doesn't exist
            logfire.warn("Comment creation by unknown caller", user_id=user_id)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unknown user",
            )
        logfire.warn("Comment creation failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{e.resource} not found",
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    message: str | None = None


@router.put(
    "/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse
)
async def update_comment(
    post_id: UUID,
    comment_id: UUID,
    body: UpdateCommentAPIRequest,
    request: Request,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> UpdateCommentResponse:
    """Replace a comment's message.

    Only the comment author can edit.

    Raises:
        HTTPException: If anonymous, not the author, not found or empty message
    """
    user_id = require_user_id(request, identity_service, "edit comments")

    try:
        use_case_request = UpdateCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=user_id,
            message=body.message,
        )
        return await update_comment_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this comment",
        )
    except NotFoundError as e:
        logfire.warn("Attempt to edit missing comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except ValidationError as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update comment",
        )


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> DeleteCommentResponse:
    """Delete a comment. Its replies stay, shown at top level.

    Only the comment author can delete.

    Raises:
        HTTPException: If anonymous, not the author or not found
    """
    user_id = require_user_id(request, identity_service, "delete comments")

    try:
        use_case_request = DeleteCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=user_id,
        )
        return await delete_comment_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except NotFoundError as e:
        logfire.warn("Attempt to delete missing comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
