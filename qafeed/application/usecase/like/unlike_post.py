"""Unlike post use case."""

from pydantic import BaseModel

from qafeed.application.usecase.base import BaseUseCase
from qafeed.domain.service import LikeService, PostService
from qafeed.domain.value import PostId, UserId


class UnlikePostRequest(BaseModel):
    """Unlike post request."""

    post_id: int
    user_id: int  # User ID from authenticated user


class UnlikePostResponse(BaseModel):
    """Unlike post response."""

    post_id: int
    like_count: int
    liked: bool
    removed: bool  # False when there was no like to remove


class UnlikePostUseCase(BaseUseCase):
    """Use case for removing a like from a post."""

    def __init__(self, like_service: LikeService, post_service: PostService) -> None:
        """Initialize unlike post use case.

        Args:
            like_service: Like domain service
            post_service: Post domain service
        """
        self.like_service = like_service
        self.post_service = post_service

    async def execute(self, request: UnlikePostRequest) -> UnlikePostResponse:
        """Execute unlike post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id)

        await self.post_service.get_post_by_id(post_id)
        removed = await self.like_service.unlike_post(post_id, user_id)

        summary = await self.like_service.aggregate(post_id, user_id)
        return UnlikePostResponse(
            post_id=post_id,
            like_count=summary.count,
            liked=summary.liked,
            removed=removed,
        )
