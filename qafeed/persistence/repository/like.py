"""PostgreSQL implementation of Like repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qafeed.domain.model import Like
from qafeed.domain.repository.like import LikeRepository
from qafeed.domain.value import PostId, UserId
from qafeed.persistence.database import storage_errors
from qafeed.persistence.mappers import like_to_dict, row_to_like
from qafeed.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.post_id == post_id,
            )
        )
        with storage_errors("like_repository.find_by_user_and_post"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_like(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Like]:
        """Find all likes on a post."""
        stmt = select(likes_table).where(likes_table.c.post_id == post_id)
        with storage_errors("like_repository.find_by_post"):
            result = await self.session.execute(stmt)
            return [row_to_like(dict(row)) for row in result.mappings().all()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = select(func.count()).where(likes_table.c.post_id == post_id)
        with storage_errors("like_repository.count_by_post"):
            result = await self.session.execute(stmt)
            return result.scalar_one()

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes on several posts (batch query).

        Posts without likes are absent from the result.
        """
        if not post_ids:
            return {}

        stmt = (
            select(likes_table.c.post_id, func.count().label("like_count"))
            .where(likes_table.c.post_id.in_(post_ids))
            .group_by(likes_table.c.post_id)
        )
        with storage_errors("like_repository.count_by_posts"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return {PostId(row.post_id): row.like_count for row in rows}

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Like]:
        """Find a user's likes on several posts (batch query)."""
        if not post_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.post_id.in_(post_ids),
            )
        )
        with storage_errors("like_repository.find_by_user_and_posts"):
            result = await self.session.execute(stmt)
            return [row_to_like(dict(row)) for row in result.mappings().all()]

    async def save(self, like: Like) -> Like:
        """Insert a like.

        The insert runs in a savepoint so a duplicate leaves the
        surrounding transaction usable.

        Raises:
            IntegrityError: If the user already liked the post
        """
        stmt = insert(likes_table).values(**like_to_dict(like))
        with storage_errors("like_repository.save"):
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        return like

    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's like on a post."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.post_id == post_id,
            )
        )
        with storage_errors("like_repository.delete"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post."""
        stmt = delete(likes_table).where(likes_table.c.post_id == post_id)
        with storage_errors("like_repository.delete_by_post"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
