"""User entity."""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import UserId, UserName


class User(DomainModel):
    """A person who can comment and like comments."""

    id: UserId
    name: UserName
    created_at: datetime = Field(default_factory=utcnow)
