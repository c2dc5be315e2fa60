"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from qafeed.domain.model.comment import Comment
from qafeed.domain.value import PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments for a post are returned in creation order (oldest first,
    ``id`` ascending to break ties).
    """

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post.

        Args:
            post_id: The post ID

        Returns:
            List of comments in creation order
        """
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: Sequence[PostId]) -> List[Comment]:
        """Find comments for several posts (batch query).

        Args:
            post_ids: Post IDs to fetch comments for

        Returns:
            Comments for all given posts, in creation order
        """
        pass

    @abstractmethod
    async def create(self, post_id: PostId, author_id: UserId, content: str) -> Comment:
        """Create a comment, assigning its ID and timestamp.

        Args:
            post_id: The post being commented on
            author_id: The commenter's user ID
            content: Comment text

        Returns:
            The created comment
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments deleted
        """
        pass
