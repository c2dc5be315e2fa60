"""List posts use case."""

from typing import Any

from pydantic import BaseModel, Field

from qafeed.application.usecase.base import BaseUseCase
from qafeed.config import FeedSettings
from qafeed.domain.model import FeedView
from qafeed.domain.service import FeedService, PostService
from qafeed.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request.

    With no filter every post is listed. ``author_id`` restricts to one
    author's posts and ``liked_by_id`` to the posts a user has liked.
    """

    viewer_id: int  # Current user ID (from token)
    author_id: int | None = None
    liked_by_id: int | None = None
    limit: int | None = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)

    def model_post_init(self, __context: Any) -> None:
        """Validate that at most one filter is provided."""
        if self.author_id is not None and self.liked_by_id is not None:
            raise ValueError("Provide either author_id or liked_by_id, not both")


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[FeedView]
    limit: int
    offset: int


class ListPostsUseCase(BaseUseCase):
    """Use case for listing composed posts, newest first."""

    def __init__(
        self,
        post_service: PostService,
        feed_service: FeedService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            feed_service: Feed composition service
            feed_settings: Page size defaults and limits
        """
        self.post_service = post_service
        self.feed_service = feed_service
        self.feed_settings = feed_settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Every listed post is composed exactly like a single post view. If
        any post fails to compose, the whole listing fails.

        Args:
            request: Filter, pagination and viewer

        Returns:
            Page of composed posts

        Raises:
            StorageError: If storage fails while listing or composing
        """
        limit = min(
            request.limit or self.feed_settings.default_page_size,
            self.feed_settings.max_page_size,
        )

        if request.author_id is not None:
            posts = await self.post_service.list_posts_by_author(
                UserId(request.author_id), limit=limit, offset=request.offset
            )
        elif request.liked_by_id is not None:
            posts = await self.post_service.list_posts_liked_by(
                UserId(request.liked_by_id), limit=limit, offset=request.offset
            )
        else:
            posts = await self.post_service.list_posts(limit=limit, offset=request.offset)

        views = await self.feed_service.compose_many(posts, UserId(request.viewer_id))
        return ListPostsResponse(posts=views, limit=limit, offset=request.offset)
