"""Like entity.

A like is the fact that a user likes a comment. It has no id of its own:
the pair (user_id, comment_id) is its identity and the store guarantees
at most one row per pair.
"""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import CommentId, UserId


class Like(DomainModel):
    """Like entity. Created or deleted, never updated."""

    user_id: UserId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=utcnow)
