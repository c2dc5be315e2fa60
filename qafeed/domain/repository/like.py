"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qafeed.domain.model.like import Like
from qafeed.domain.value import PostId, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    A like is keyed by (user_id, post_id); implementations must reject a
    second like for the same pair.
    """

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        """Find a user's like on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Like]:
        """Find all likes on a post.

        Args:
            post_id: The post's ID

        Returns:
            List of likes on the post
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post.

        Args:
            post_id: The post's ID

        Returns:
            Number of likes
        """
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes on several posts (batch query).

        Args:
            post_ids: Post IDs to count likes for

        Returns:
            Mapping of post ID to like count; posts without likes may be absent
        """
        pass

    @abstractmethod
    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Like]:
        """Find a user's likes on several posts (batch query).

        Args:
            user_id: The user's ID
            post_ids: Post IDs to check

        Returns:
            The user's likes among the given posts
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes the post
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's like on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post.

        Args:
            post_id: The post's ID

        Returns:
            Number of likes deleted
        """
        pass
