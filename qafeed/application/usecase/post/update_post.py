"""Update post use case."""

from pydantic import BaseModel

from qafeed.application.usecase.base import BaseUseCase
from qafeed.domain.model import FeedView
from qafeed.domain.service import AuthorizationService, FeedService, PostService
from qafeed.domain.value import MutationAction, PostChanges, PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    ``changes`` only carries the fields the client sent.
    """

    post_id: int
    user_id: int  # Current user ID (must be author)
    changes: PostChanges


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: FeedView


class UpdatePostUseCase(BaseUseCase):
    """Use case for partially updating a post's question or answer."""

    def __init__(
        self,
        post_service: PostService,
        authorization_service: AuthorizationService,
        feed_service: FeedService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            authorization_service: Mutation authorizer
            feed_service: Feed composition service
        """
        self.post_service = post_service
        self.authorization_service = authorization_service
        self.feed_service = feed_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Checks run in order: existence, ownership, field validation.

        Args:
            request: Post ID, requesting user and changed fields

        Returns:
            Updated post composed for the requesting user

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If a changed field is blank
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id)

        post = await self.post_service.get_post_by_id(post_id)
        self.authorization_service.ensure_authorized(
            post, user_id, MutationAction.UPDATE
        )

        updated_post = await self.post_service.update_post(post_id, request.changes)
        view = await self.feed_service.compose(updated_post, user_id)
        return UpdatePostResponse(post=view)
