"""In-memory comment repository for testing."""

from typing import Sequence

from qafeed.domain.model import Comment
from qafeed.domain.model.common import utc_now
from qafeed.domain.repository.comment import CommentRepository
from qafeed.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post in creation order."""
        return await self.find_by_posts([post_id])

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> list[Comment]:
        """Find comments for several posts in creation order."""
        wanted = set(post_ids)
        comments = [c for c in self.store.comments.values() if c.post_id in wanted]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def create(self, post_id: PostId, author_id: UserId, content: str) -> Comment:
        """Create a comment with the next sequential ID."""
        comment = Comment(
            id=self.store.next_comment_id(),
            post_id=post_id,
            author_id=author_id,
            content=content,
            created_at=utc_now(),
        )
        self.store.comments[comment.id] = comment
        return comment

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        doomed = [cid for cid, c in self.store.comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self.store.comments[comment_id]
        return len(doomed)
