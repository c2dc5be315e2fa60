"""PostgreSQL implementation of Comment repository."""

from typing import List, Sequence

from sqlalchemy import asc, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qafeed.domain.model import Comment
from qafeed.domain.repository.comment import CommentRepository
from qafeed.domain.value import PostId, UserId
from qafeed.persistence.database import storage_errors
from qafeed.persistence.mappers import row_to_comment
from qafeed.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in creation order."""
        return await self.find_by_posts([post_id])

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> List[Comment]:
        """Find comments for several posts (batch query)."""
        if not post_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id.in_(post_ids))
            .order_by(asc(comments_table.c.created_at), asc(comments_table.c.id))
        )
        with storage_errors("comment_repository.find_by_posts"):
            result = await self.session.execute(stmt)
            return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def create(self, post_id: PostId, author_id: UserId, content: str) -> Comment:
        """Insert a comment and return it with its assigned ID."""
        stmt = (
            insert(comments_table)
            .values(post_id=post_id, author_id=author_id, content=content)
            .returning(comments_table)
        )
        with storage_errors("comment_repository.create"):
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
        return row_to_comment(dict(row))

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        with storage_errors("comment_repository.delete_by_post"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
