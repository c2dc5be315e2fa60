"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qafeed.domain.model import Post
from qafeed.domain.repository.post import PostRepository
from qafeed.domain.value import PostId, UserId
from qafeed.persistence.database import storage_errors
from qafeed.persistence.mappers import row_to_post
from qafeed.persistence.tables import likes_table, posts_table


def _newest_first(stmt: Select, limit: Optional[int], offset: int) -> Select:
    stmt = stmt.order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
    if offset:
        stmt = stmt.offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)
    return stmt


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch(self, stmt: Select, operation: str) -> List[Post]:
        with storage_errors(operation):
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            with storage_errors("post_repository.find_by_id"):
                result = await self.session.execute(stmt)
                row = result.mappings().first()

            if not row:
                logfire.warn("Post not found", post_id=post_id)
                return None

            return row_to_post(dict(row))

    async def find_all(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Find all posts, newest first."""
        stmt = _newest_first(select(posts_table), limit, offset)
        return await self._fetch(stmt, "post_repository.find_all")

    async def find_by_author(
        self,
        author_id: UserId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author."""
        stmt = _newest_first(
            select(posts_table).where(posts_table.c.author_id == author_id),
            limit,
            offset,
        )
        return await self._fetch(stmt, "post_repository.find_by_author")

    async def find_liked_by_user(
        self,
        user_id: UserId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Find the posts a user has liked, joined through the likes table."""
        stmt = _newest_first(
            select(posts_table)
            .select_from(
                posts_table.join(likes_table, posts_table.c.id == likes_table.c.post_id)
            )
            .where(likes_table.c.user_id == user_id),
            limit,
            offset,
        )
        return await self._fetch(stmt, "post_repository.find_liked_by_user")

    async def create(self, author_id: UserId, question: str, answer: str) -> Post:
        """Insert a post and return it with its assigned ID."""
        with logfire.span("post_repository.create", author_id=author_id):
            stmt = (
                insert(posts_table)
                .values(author_id=author_id, question=question, answer=answer)
                .returning(posts_table)
            )
            with storage_errors("post_repository.create"):
                result = await self.session.execute(stmt)
                row = result.mappings().one()
                await self.session.flush()

            post = row_to_post(dict(row))
            logfire.info("Inserted new post", post_id=post.id, author_id=author_id)
            return post

    async def update(self, post_id: PostId, changes: dict[str, str]) -> Optional[Post]:
        """Merge changes into a post and bump updated_at."""
        with logfire.span(
            "post_repository.update", post_id=post_id, fields=sorted(changes)
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**changes, updated_at=func.now())
                .returning(posts_table)
            )
            with storage_errors("post_repository.update"):
                result = await self.session.execute(stmt)
                row = result.mappings().first()
                await self.session.flush()

            return row_to_post(dict(row)) if row else None

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post. Comments and likes cascade in the database."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        with storage_errors("post_repository.delete"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
