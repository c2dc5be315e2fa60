"""Delete post use case."""

import logfire
from pydantic import BaseModel

from qafeed.application.usecase.base import BaseUseCase
from qafeed.domain.service import (
    AuthorizationService,
    CommentService,
    LikeService,
    PostService,
)
from qafeed.domain.value import MutationAction, PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    user_id: int  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: int
    comments_deleted: int
    likes_deleted: int


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post together with its comments and likes."""

    def __init__(
        self,
        post_service: PostService,
        authorization_service: AuthorizationService,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            authorization_service: Mutation authorizer
            comment_service: Comment domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.authorization_service = authorization_service
        self.comment_service = comment_service
        self.like_service = like_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Args:
            request: Post ID and requesting user

        Returns:
            What was removed

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If user doesn't own the post
        """
        post_id = PostId(request.post_id)
        user_id = UserId(request.user_id)

        post = await self.post_service.get_post_by_id(post_id)
        self.authorization_service.ensure_authorized(
            post, user_id, MutationAction.DELETE
        )

        with logfire.span("delete_post", post_id=post_id, user_id=user_id):
            comments_deleted = await self.comment_service.delete_comments_for_post(
                post_id
            )
            likes_deleted = await self.like_service.delete_likes_for_post(post_id)
            await self.post_service.delete_post(post_id)

        return DeletePostResponse(
            post_id=post_id,
            comments_deleted=comments_deleted,
            likes_deleted=likes_deleted,
        )
