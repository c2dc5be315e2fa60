"""In-memory post repository for testing."""

from typing import Optional

from qafeed.domain.model import Post
from qafeed.domain.model.common import utc_now
from qafeed.domain.repository.post import PostRepository
from qafeed.domain.value import PostId, UserId

from .store import InMemoryStore


def _newest_first(posts: list[Post]) -> list[Post]:
    return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)


def _paginate(posts: list[Post], limit: Optional[int], offset: int) -> list[Post]:
    if limit is None:
        return posts[offset:]
    return posts[offset : offset + limit]


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self.store.posts.get(post_id)

    async def find_all(
        self,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Post]:
        """Find all posts, newest first."""
        posts = _newest_first(list(self.store.posts.values()))
        return _paginate(posts, limit, offset)

    async def find_by_author(
        self,
        author_id: UserId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts by a specific author."""
        posts = [p for p in self.store.posts.values() if p.author_id == author_id]
        return _paginate(_newest_first(posts), limit, offset)

    async def find_liked_by_user(
        self,
        user_id: UserId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Post]:
        """Find the posts a user has liked."""
        liked_ids = {post_id for uid, post_id in self.store.likes if uid == user_id}
        posts = [p for p in self.store.posts.values() if p.id in liked_ids]
        return _paginate(_newest_first(posts), limit, offset)

    async def create(self, author_id: UserId, question: str, answer: str) -> Post:
        """Create a post with the next sequential ID."""
        now = utc_now()
        post = Post(
            id=self.store.next_post_id(),
            author_id=author_id,
            question=question,
            answer=answer,
            created_at=now,
            updated_at=now,
        )
        self.store.posts[post.id] = post
        return post

    async def save(self, post: Post) -> Post:
        """Insert or replace a post as given (test seeding)."""
        self.store.posts[post.id] = post
        return post

    async def update(self, post_id: PostId, changes: dict[str, str]) -> Optional[Post]:
        """Merge changes into a post."""
        post = self.store.posts.get(post_id)
        if post is None:
            return None

        # Round-trip through validation so the blank-text invariant holds
        updated = Post.model_validate(
            {**post.model_dump(), **changes, "updated_at": utc_now()}
        )
        self.store.posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and cascade to its comments and likes."""
        if self.store.posts.pop(post_id, None) is None:
            return False
        self.store.cascade_post_delete(post_id)
        return True
