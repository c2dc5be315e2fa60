"""In-memory user repository for testing."""

from typing import Optional, Sequence

from qafeed.domain.model import User
from qafeed.domain.repository.user import UserRepository
from qafeed.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        return [
            user
            for user_id in dict.fromkeys(user_ids)
            if (user := self.store.users.get(user_id)) is not None
        ]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self.store.users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        """Remove a user (test helper for dangling references)."""
        self.store.users.pop(user_id, None)
