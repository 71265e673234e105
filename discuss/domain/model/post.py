"""Post entity.

Posts are read-only as far as the discussion engine is concerned: they
own a thread of comments but are never edited or deleted here.
"""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import PostId


class Post(DomainModel):
    """Post entity."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    body: str = ""
    created_at: datetime = Field(default_factory=utcnow)
