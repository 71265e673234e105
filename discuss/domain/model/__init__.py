"""Domain model entities for Discuss."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.like import Like
from discuss.domain.model.post import Post
from discuss.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
]
