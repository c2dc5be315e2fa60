"""Post repository interface.

This is the post query gateway: the selection semantics of each query are
part of the domain contract, the storage mechanics are not.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from qafeed.domain.model.post import Post
from qafeed.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    All list queries return posts newest first (``created_at`` descending,
    ``id`` descending to break ties) so pages stay stable.

    Implementations return ``None``/``False`` for a missing post and raise
    ``StorageError`` for every other failure.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Find all posts.

        Args:
            limit: Maximum number of posts to return (None for no limit)
            offset: Number of posts to skip

        Returns:
            List of posts, newest first
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author.

        Args:
            author_id: The author's user ID
            limit: Maximum number of posts to return (None for no limit)
            offset: Number of posts to skip

        Returns:
            List of posts by the author, newest first
        """
        pass

    @abstractmethod
    async def find_liked_by_user(
        self,
        user_id: UserId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Find exactly the posts that have a like from the given user.

        Args:
            user_id: The user whose likes select the posts
            limit: Maximum number of posts to return (None for no limit)
            offset: Number of posts to skip

        Returns:
            List of liked posts, newest first
        """
        pass

    @abstractmethod
    async def create(self, author_id: UserId, question: str, answer: str) -> Post:
        """Create a post, assigning its ID and timestamps.

        Args:
            author_id: The author's user ID
            question: Question text
            answer: Answer text

        Returns:
            The created post
        """
        pass

    @abstractmethod
    async def update(
        self, post_id: PostId, changes: dict[str, str]
    ) -> Optional[Post]:
        """Merge a field map into a post and bump ``updated_at``.

        Args:
            post_id: ID of the post to update
            changes: Field name to new value; absent fields are untouched

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if it did not exist
        """
        pass
