"""Domain value objects for Discuss.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject, ValueObject
from discuss.domain.value.identifiers import UserId


class UserName(RootValueObject[str]):
    """Display name shown next to a user's comments."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Name must not be blank")
        if len(v) > 100:
            raise ValueError("Name must be at most 100 characters")
        return v


class CallerIdentity(ValueObject):
    """The user a request is attributed to.

    Supplied by the identity layer and passed explicitly into every
    operation that reads like state or mutates comments.
    """

    user_id: UserId

    def owns(self, author_id: UserId) -> bool:
        """Return True if this caller is the given author."""
        return self.user_id == author_id
