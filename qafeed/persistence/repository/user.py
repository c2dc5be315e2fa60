"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qafeed.domain.model import User
from qafeed.domain.repository import UserRepository
from qafeed.domain.value import UserId
from qafeed.persistence.database import storage_errors
from qafeed.persistence.mappers import row_to_user, user_to_dict
from qafeed.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Lookups run in a savepoint: a failed identity lookup is tolerated by
    callers, so it must not poison the request transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        with storage_errors("user_repository.find_by_id"):
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query.

        Args:
            user_ids: User IDs to look up

        Returns:
            The users that exist; missing IDs are simply absent
        """
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        with storage_errors("user_repository.find_by_ids"):
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                rows = result.mappings().all()
        return [row_to_user(dict(row)) for row in rows]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        stmt = insert(users_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "display_name": stmt.excluded.display_name,
                "avatar_url": stmt.excluded.avatar_url,
            },
        )
        with storage_errors("user_repository.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return user
