"""Like post use case."""

from pydantic import BaseModel

from qafeed.application.usecase.base import BaseUseCase
from qafeed.domain.service import LikeService, PostService
from qafeed.domain.value import PostId, UserId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: int
    user_id: int  # User ID from authenticated user


class LikePostResponse(BaseModel):
    """Like post response."""

    post_id: int
    like_count: int
    liked: bool


class LikePostUseCase(BaseUseCase):
    """Use case for liking a post."""

    def __init__(self, like_service: LikeService, post_service: PostService) -> None:
        """Initialize like post use case.

        Args:
            like_service: Like domain service
            post_service: Post domain service
        """
        self.like_service = like_service
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like post flow.

        Args:
            request: Like post request

        Returns:
            The post's like summary after the like

        Raises:
            NotFoundError: If the post doesn't exist
            BusinessRuleViolationError: If the user already likes the post
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id)

        await self.post_service.get_post_by_id(post_id)
        await self.like_service.like_post(post_id, user_id)

        summary = await self.like_service.aggregate(post_id, user_id)
        return LikePostResponse(
            post_id=post_id, like_count=summary.count, liked=summary.liked
        )
