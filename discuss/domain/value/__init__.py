"""Domain value objects for Discuss."""

from discuss.domain.value.identifiers import CommentId, PostId, UserId
from discuss.domain.value.types import CallerIdentity, UserName

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "CallerIdentity",
    "UserName",
]
