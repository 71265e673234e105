"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import logfire

from discuss.domain.model import Comment, Post, User
from discuss.domain.value import CommentId, PostId, UserId, UserName

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def at(seconds: int) -> datetime:
    """Timestamp ``seconds`` after a fixed base time."""
    return BASE_TIME + timedelta(seconds=seconds)


def make_user(name: str = "Mauro", user_id: UUID | None = None) -> User:
    """Build a user with a fresh ID unless one is given."""
    return User(id=UserId(user_id or uuid4()), name=UserName(name), created_at=at(0))


def make_post(title: str = "Test Post", created_at: datetime | None = None) -> Post:
    """Build a post with a fresh ID."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        body="Post body",
        created_at=created_at or at(0),
    )


def make_comment(
    post: Post,
    author: User,
    message: str = "Test comment",
    parent: Comment | None = None,
    created_at: datetime | None = None,
    comment_id: UUID | None = None,
) -> Comment:
    """Build a comment on a post, optionally as a reply."""
    return Comment(
        id=CommentId(comment_id or uuid4()),
        post_id=post.id,
        author_id=author.id,
        author_name=author.name,
        message=message,
        parent_id=parent.id if parent else None,
        created_at=created_at or at(0),
    )
