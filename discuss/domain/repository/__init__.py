"""Repository interfaces for the Discuss domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.like import LikeRepository
from discuss.domain.repository.post import PostRepository
from discuss.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
]
