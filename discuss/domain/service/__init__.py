"""Domain services."""

from .base import Service
from .comment_service import CommentService, require_message
from .identity_service import IdentityService
from .like_service import LikeService
from .post_service import PostService
from .thread_service import AnnotatedComment, ThreadAssembler, iter_thread
from .user_service import UserService

__all__ = [
    "AnnotatedComment",
    "CommentService",
    "IdentityService",
    "LikeService",
    "PostService",
    "Service",
    "ThreadAssembler",
    "UserService",
    "iter_thread",
    "require_message",
]
