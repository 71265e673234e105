"""PostgreSQL implementation of Like repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Like
from discuss.domain.repository import LikeRepository
from discuss.domain.value import CommentId, UserId
from discuss.persistence.error import translate_store_errors
from discuss.persistence.mappers import like_to_dict, row_to_like
from discuss.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Like]:
        """Find a user's like on a comment."""
        async with translate_store_errors("find like"):
            stmt = select(likes_table).where(
                and_(
                    likes_table.c.user_id == user_id,
                    likes_table.c.comment_id == comment_id,
                )
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Like]:
        """Find a user's likes on any of the given comments."""
        if not comment_ids:
            return []

        async with translate_store_errors("list likes"):
            stmt = select(likes_table).where(
                and_(
                    likes_table.c.user_id == user_id,
                    likes_table.c.comment_id.in_(comment_ids),
                )
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_like(row._asdict()) for row in rows]

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes per comment in a single grouped query."""
        if not comment_ids:
            return {}

        async with translate_store_errors("count likes"):
            stmt = (
                select(likes_table.c.comment_id, func.count().label("like_count"))
                .where(likes_table.c.comment_id.in_(comment_ids))
                .group_by(likes_table.c.comment_id)
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return {CommentId(row.comment_id): row.like_count for row in rows}

    async def save(self, like: Like) -> Like:
        """Create a like.

        The insert runs in a SAVEPOINT so a unique violation only rolls
        back this statement and the surrounding transaction stays usable.
        """
        async with translate_store_errors("create like"):
            async with self.session.begin_nested():
                stmt = insert(likes_table).values(**like_to_dict(like))
                await self.session.execute(stmt)
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment."""
        async with translate_store_errors("delete like"):
            stmt = delete(likes_table).where(
                and_(
                    likes_table.c.user_id == user_id,
                    likes_table.c.comment_id == comment_id,
                )
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0
