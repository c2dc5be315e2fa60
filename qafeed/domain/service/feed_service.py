"""Feed composition service."""

from collections.abc import Sequence

import logfire

from qafeed.config import FeedSettings
from qafeed.domain.model import FeedView, Post, ResolvedComment, format_timestamp
from qafeed.domain.value import Identity, LikeSummary, UserId

from .base import Service
from .comment_service import CommentService
from .identity_service import IdentityService
from .like_service import LikeService


class FeedService(Service):
    """Composes raw posts into feed views for a viewer.

    Single posts and lists go through the same path, so every list item is
    as fully resolved as a detail view. Posts are resolved in chunks of
    ``batch_size``; each chunk costs one lookup per kind (authors,
    comments, commenters, like counts, viewer likes) instead of one per
    post.

    A batch is all-or-nothing: the first storage failure aborts it and no
    partial list is returned. Unresolvable authors and commenters are
    rendered as "Unknown" and never fail the batch.
    """

    def __init__(
        self,
        identity_service: IdentityService,
        comment_service: CommentService,
        like_service: LikeService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize feed service.

        Args:
            identity_service: Identity resolution service
            comment_service: Comment domain service
            like_service: Like domain service
            feed_settings: Feed configuration (batch size)
        """
        self.identity_service = identity_service
        self.comment_service = comment_service
        self.like_service = like_service
        self.batch_size = feed_settings.batch_size

    async def compose(self, post: Post, viewer_id: UserId) -> FeedView:
        """Compose a single post.

        Args:
            post: Raw post
            viewer_id: ID of the user the feed is rendered for

        Returns:
            Feed view

        Raises:
            StorageError: If comments or likes can't be retrieved
        """
        views = await self.compose_many([post], viewer_id)
        return views[0]

    async def compose_many(
        self, posts: Sequence[Post], viewer_id: UserId
    ) -> list[FeedView]:
        """Compose a list of posts, preserving input order.

        Args:
            posts: Raw posts
            viewer_id: ID of the user the feed is rendered for

        Returns:
            Feed views in the same order as ``posts``

        Raises:
            StorageError: If comments or likes can't be retrieved for any post
        """
        with logfire.span(
            "feed_service.compose_many", post_count=len(posts), viewer_id=viewer_id
        ):
            views: list[FeedView] = []
            for start in range(0, len(posts), self.batch_size):
                chunk = posts[start : start + self.batch_size]
                views.extend(await self._compose_chunk(chunk, viewer_id))

            logfire.info("Feed composed", post_count=len(views), viewer_id=viewer_id)
            return views

    async def _compose_chunk(
        self, posts: Sequence[Post], viewer_id: UserId
    ) -> list[FeedView]:
        post_ids = [post.id for post in posts]

        authors = await self.identity_service.resolve_many(
            post.author_id for post in posts
        )
        comments = await self.comment_service.resolve_comments_for_posts(post_ids)
        likes = await self.like_service.aggregate_many(post_ids, viewer_id)

        return [
            self._build_view(
                post,
                author=self.identity_service.pick(authors, post.author_id),
                comments=comments.get(post.id, []),
                likes=likes.get(post.id, LikeSummary()),
            )
            for post in posts
        ]

    @staticmethod
    def _build_view(
        post: Post,
        author: Identity,
        comments: list[ResolvedComment],
        likes: LikeSummary,
    ) -> FeedView:
        return FeedView(
            id=post.id,
            question=post.question,
            answer=post.answer,
            author_id=post.author_id,
            author=author,
            comments=comments,
            like_count=likes.count,
            liked=likes.liked,
            created_at=format_timestamp(post.created_at),
        )
