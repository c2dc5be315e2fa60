"""Create post use case."""

from pydantic import BaseModel

from qafeed.application.usecase.base import BaseUseCase
from qafeed.domain.model import FeedView
from qafeed.domain.service import FeedService, PostService
from qafeed.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    question: str
    answer: str
    author_id: int  # User ID from authenticated user


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: FeedView


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, feed_service: FeedService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            feed_service: Feed composition service
        """
        self.post_service = post_service
        self.feed_service = feed_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Question, answer and author

        Returns:
            The new post composed for its author

        Raises:
            ValidationError: If the question or answer is blank
        """
        author_id = UserId(request.author_id)
        post = await self.post_service.create_post(
            author_id=author_id,
            question=request.question,
            answer=request.answer,
        )
        view = await self.feed_service.compose(post, author_id)
        return CreatePostResponse(post=view)
