"""Comment domain service."""

from collections.abc import Sequence

import logfire

from qafeed.domain.error import ValidationError
from qafeed.domain.model import Comment, ResolvedComment
from qafeed.domain.repository import CommentRepository
from qafeed.domain.value import PostId, UserId

from .base import Service
from .identity_service import IdentityService


class CommentService(Service):
    """Domain service for comment operations.

    Comments come back in storage retrieval order, which repositories
    define as creation order. Commenter names that don't resolve become
    "Unknown"; failing to fetch the comments at all raises.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        identity_service: IdentityService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            identity_service: Identity resolution service
        """
        self.comment_repository = comment_repository
        self.identity_service = identity_service

    async def resolve_comments(self, post_id: PostId) -> list[ResolvedComment]:
        """Get a post's comments with commenter names resolved.

        Args:
            post_id: Post ID

        Returns:
            Resolved comments in creation order

        Raises:
            StorageError: If the comments can't be retrieved
        """
        with logfire.span("comment_service.resolve_comments", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            resolved = await self._resolve(comments)
            return resolved.get(post_id, [])

    async def resolve_comments_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[ResolvedComment]]:
        """Get resolved comments for several posts in one pass.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of every given post ID to its resolved comments

        Raises:
            StorageError: If the comments can't be retrieved
        """
        if not post_ids:
            return {}

        with logfire.span(
            "comment_service.resolve_comments_for_posts", post_count=len(post_ids)
        ):
            comments = await self.comment_repository.find_by_posts(post_ids)
            resolved = await self._resolve(comments)
            logfire.info(
                "Comments resolved for posts",
                post_count=len(post_ids),
                comment_count=len(comments),
            )
            return {post_id: resolved.get(post_id, []) for post_id in post_ids}

    async def _resolve(
        self, comments: Sequence[Comment]
    ) -> dict[PostId, list[ResolvedComment]]:
        identities = await self.identity_service.resolve_many(
            comment.author_id for comment in comments
        )

        resolved: dict[PostId, list[ResolvedComment]] = {}
        for comment in comments:
            identity = self.identity_service.pick(identities, comment.author_id)
            resolved.setdefault(comment.post_id, []).append(
                ResolvedComment(
                    author_id=comment.author_id,
                    display_name=identity.display_name,
                    content=comment.content,
                )
            )
        return resolved

    async def create_comment(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Create a comment on a post.

        The caller is responsible for checking the post exists.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text

        Returns:
            Created comment

        Raises:
            ValidationError: If the content is blank
        """
        with logfire.span(
            "comment_service.create_comment", post_id=post_id, author_id=author_id
        ):
            if not content.strip():
                logfire.warn("Blank comment rejected", post_id=post_id)
                raise ValidationError("Comment cannot be blank", field="content")

            comment = await self.comment_repository.create(post_id, author_id, content)
            logfire.info("Comment created", comment_id=comment.id, post_id=post_id)
            return comment

    async def delete_comments_for_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: Post ID

        Returns:
            Number of comments deleted
        """
        with logfire.span("comment_service.delete_comments_for_post", post_id=post_id):
            deleted = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Comments deleted for post", post_id=post_id, count=deleted)
            return deleted
