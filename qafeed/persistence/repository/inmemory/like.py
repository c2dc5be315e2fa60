"""In-memory like repository for testing."""

from collections import Counter
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from qafeed.domain.model import Like
from qafeed.domain.repository.like import LikeRepository
from qafeed.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        return self.store.likes.get((user_id, post_id))

    async def find_by_post(self, post_id: PostId) -> list[Like]:
        """Find all likes on a post."""
        return [like for like in self.store.likes.values() if like.post_id == post_id]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return sum(1 for like in self.store.likes.values() if like.post_id == post_id)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes on several posts."""
        wanted = set(post_ids)
        counts = Counter(
            like.post_id for like in self.store.likes.values() if like.post_id in wanted
        )
        return dict(counts)

    async def find_by_user_and_posts(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> list[Like]:
        """Find a user's likes on several posts."""
        return [
            like
            for post_id in dict.fromkeys(post_ids)
            if (like := self.store.likes.get((user_id, post_id))) is not None
        ]

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If like already exists (duplicate)
        """
        key = (like.user_id, like.post_id)
        if key in self.store.likes:
            raise IntegrityError("Duplicate like", None, Exception())

        self.store.likes[key] = like
        return like

    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's like on a post."""
        return self.store.likes.pop((user_id, post_id), None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every like on a post."""
        doomed = [key for key in self.store.likes if key[1] == post_id]
        for key in doomed:
            del self.store.likes[key]
        return len(doomed)
