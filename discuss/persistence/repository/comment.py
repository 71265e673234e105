"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, PostId
from discuss.persistence.error import translate_store_errors
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        async with translate_store_errors("find comment"):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, unordered."""
        async with translate_store_errors("list comments"):
            stmt = select(comments_table).where(comments_table.c.post_id == post_id)
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def save(self, comment: Comment) -> Comment:
        """Create a comment."""
        async with translate_store_errors("create comment"):
            stmt = insert(comments_table).values(**comment_to_dict(comment))
            await self.session.execute(stmt)
            await self.session.flush()
        return comment

    async def update_message(
        self, comment_id: CommentId, message: str
    ) -> Optional[Comment]:
        """Replace the message, returning the updated row if it still exists."""
        async with translate_store_errors("update comment"):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(message=message)
                .returning(*comments_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Likes cascade away and replies lose their parent at the FK level.
        """
        async with translate_store_errors("delete comment"):
            stmt = delete(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0
