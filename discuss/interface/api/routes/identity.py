"""Caller resolution shared by the routes."""

from fastapi import HTTPException, Request, status

from discuss.domain.service import IdentityService


def optional_user_id(request: Request, identity_service: IdentityService) -> str | None:
    """Resolve the caller of a request, None when anonymous."""
    return identity_service.get_user_id(
        request.cookies.get(identity_service.cookie_name)
    )


def require_user_id(
    request: Request, identity_service: IdentityService, action: str
) -> str:
    """Resolve the caller of a request that mutates state.

    Raises:
        HTTPException: 401 if the request is anonymous
    """
    user_id = optional_user_id(request, identity_service)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
