"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qafeed.domain.model.user import User
from qafeed.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user lookups. Account management lives
    outside this service; ``save`` exists for seeding and tests.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID (batch query).

        Args:
            user_ids: User IDs to look up

        Returns:
            The users that exist; missing IDs are simply absent
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
