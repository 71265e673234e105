"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Post
from discuss.domain.repository import PostRepository
from discuss.domain.value import PostId
from discuss.persistence.error import translate_store_errors
from discuss.persistence.mappers import post_to_dict, row_to_post
from discuss.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        async with translate_store_errors("find post"):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(self) -> List[Post]:
        """List posts, newest first."""
        async with translate_store_errors("list posts"):
            stmt = select(posts_table).order_by(
                desc(posts_table.c.created_at), desc(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_post(row._asdict()) for row in rows]

    async def save(self, post: Post) -> Post:
        """Create a post."""
        async with translate_store_errors("create post"):
            await self.session.execute(insert(posts_table).values(**post_to_dict(post)))
            await self.session.flush()
        return post
