"""Comment entity.

Comments form a tree per post through ``parent_id``. Nesting depth is
unbounded and the tree shape is reconstructed on every read; nothing
about it is stored besides the parent link.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import CommentId, PostId, UserId, UserName

MAX_MESSAGE_LENGTH = 10000


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Only ``message`` may change after creation. ``parent_id``,
    ``author_id`` and ``created_at`` are fixed, which is what makes the
    load-then-mutate ownership check safe without a lock.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_name: UserName
    message: str = Field(min_length=1, max_length=MAX_MESSAGE_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utcnow)
