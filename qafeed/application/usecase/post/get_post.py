"""Get post use case."""

from pydantic import BaseModel

from qafeed.application.usecase.base import BaseUseCase
from qafeed.domain.model import FeedView
from qafeed.domain.service import FeedService, PostService
from qafeed.domain.value import PostId, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int
    viewer_id: int  # Current user ID (from token)


class GetPostResponse(BaseModel):
    """Get post response."""

    post: FeedView


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving a single composed post."""

    def __init__(self, post_service: PostService, feed_service: FeedService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            feed_service: Feed composition service
        """
        self.post_service = post_service
        self.feed_service = feed_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Post ID and viewer ID

        Returns:
            The post composed for the viewer

        Raises:
            NotFoundError: If the post doesn't exist
            StorageError: If storage fails while composing
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        view = await self.feed_service.compose(post, UserId(request.viewer_id))
        return GetPostResponse(post=view)
