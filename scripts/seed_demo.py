#!/usr/bin/env python3
"""Seed a demo user, a couple of posts and a short thread.

Run after migrations. The demo user gets a fixed ID; point
AUTH__DEFAULT_USER_ID at it to act as that user without a cookie.
"""

import asyncio
import sys
from datetime import timedelta
from uuid import UUID, uuid4

import logfire

from discuss.config import Settings
from discuss.domain.model import Comment, Post, User
from discuss.domain.model.common import utcnow
from discuss.domain.value import CommentId, PostId, UserId, UserName
from discuss.persistence.database import create_engine, create_session_factory
from discuss.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from discuss.util.observability import configure_logfire

DEMO_USER_ID = UserId(UUID("6f1c0c8e-3b0e-4b5e-9d4a-6a4a0f2f7d11"))
DEMO_USER_NAME = "Mauro"


async def seed(settings: Settings) -> None:
    """Insert the demo rows in one transaction, skipping if already seeded."""
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    try:
        async with session_factory() as session, session.begin():
            users = PostgresUserRepository(session)
            posts = PostgresPostRepository(session)
            comments = PostgresCommentRepository(session)

            if await users.find_by_id(DEMO_USER_ID):
                logfire.info("Demo data already present", user_id=str(DEMO_USER_ID))
                return

            now = utcnow()
            demo = await users.save(
                User(id=DEMO_USER_ID, name=UserName(DEMO_USER_NAME), created_at=now)
            )
            other = await users.save(
                User(id=UserId(uuid4()), name=UserName("Ada"), created_at=now)
            )

            await posts.save(
                Post(
                    id=PostId(uuid4()),
                    title="Release notes",
                    body="What changed this week.",
                    created_at=now - timedelta(days=1),
                )
            )
            post = await posts.save(
                Post(
                    id=PostId(uuid4()),
                    title="Welcome to Discuss",
                    body="Say hello below.",
                    created_at=now,
                )
            )

            first = await comments.save(
                Comment(
                    id=CommentId(uuid4()),
                    post_id=post.id,
                    author_id=other.id,
                    author_name=other.name,
                    message="First!",
                    created_at=now + timedelta(seconds=10),
                )
            )
            await comments.save(
                Comment(
                    id=CommentId(uuid4()),
                    post_id=post.id,
                    author_id=demo.id,
                    author_name=demo.name,
                    message="Welcome aboard.",
                    parent_id=first.id,
                    created_at=now + timedelta(seconds=20),
                )
            )

            logfire.info(
                "Demo data seeded", user_id=str(demo.id), post_id=str(post.id)
            )
    finally:
        await engine.dispose()


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        asyncio.run(seed(settings))
        return 0
    except Exception as e:
        logfire.error(
            "Seeding demo data failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
