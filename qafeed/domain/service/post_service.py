"""Post domain service."""

import logfire

from qafeed.domain.error import NotFoundError, ValidationError
from qafeed.domain.model import Post
from qafeed.domain.repository import PostRepository
from qafeed.domain.value import PostChanges, PostId, UserId

from .base import Service

_FIELD_LABELS = {"question": "Question", "answer": "Answer"}


class PostService(Service):
    """Domain service for post queries and writes."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(self, limit: int | None = None, offset: int = 0) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            posts = await self.post_repository.find_all(limit=limit, offset=offset)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_posts_by_author(
        self, author_id: UserId, limit: int | None = None, offset: int = 0
    ) -> list[Post]:
        """List an author's posts, newest first."""
        with logfire.span(
            "post_service.list_posts_by_author",
            author_id=author_id,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )
            logfire.info("Author posts listed", author_id=author_id, count=len(posts))
            return posts

    async def list_posts_liked_by(
        self, user_id: UserId, limit: int | None = None, offset: int = 0
    ) -> list[Post]:
        """List the posts a user has liked, newest first."""
        with logfire.span(
            "post_service.list_posts_liked_by",
            user_id=user_id,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_liked_by_user(
                user_id, limit=limit, offset=offset
            )
            logfire.info("Liked posts listed", user_id=user_id, count=len(posts))
            return posts

    async def create_post(self, author_id: UserId, question: str, answer: str) -> Post:
        """Create a post.

        Args:
            author_id: Author user ID
            question: Question text
            answer: Answer text

        Returns:
            Created post

        Raises:
            ValidationError: If the question or answer is blank
        """
        with logfire.span("post_service.create_post", author_id=author_id):
            self._require_text("question", question)
            self._require_text("answer", answer)

            post = await self.post_repository.create(author_id, question, answer)
            logfire.info("Post created", post_id=post.id, author_id=author_id)
            return post

    async def update_post(self, post_id: PostId, changes: PostChanges) -> Post:
        """Apply a partial update to a post.

        Only fields present in ``changes`` are validated and written.

        Args:
            post_id: Post ID
            changes: Fields to change

        Returns:
            Updated post

        Raises:
            ValidationError: If a present field is blank
            NotFoundError: If the post doesn't exist
        """
        fields = changes.fields()
        with logfire.span(
            "post_service.update_post", post_id=post_id, fields=sorted(fields)
        ):
            for name, value in fields.items():
                self._require_text(name, value)

            if changes.is_empty:
                logfire.info("Empty post update", post_id=post_id)
                return await self.get_post_by_id(post_id)

            updated = await self.post_repository.update(post_id, fields)
            if updated is None:
                logfire.warn("Post not found for update", post_id=post_id)
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post updated", post_id=post_id, fields=sorted(fields))
            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                logfire.warn("Post not found for delete", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=post_id)

    @staticmethod
    def _require_text(field: str, value: str | None) -> None:
        if value is None or not value.strip():
            label = _FIELD_LABELS.get(field, field.capitalize())
            raise ValidationError(f"{label} cannot be blank", field=field)
