"""Create comment use case."""

from pydantic import BaseModel

from qafeed.application.usecase.base import BaseUseCase
from qafeed.domain.model import format_timestamp
from qafeed.domain.service import CommentService, IdentityService, PostService
from qafeed.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    content: str
    author_id: int  # User ID from authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: int
    post_id: int
    author_id: int
    display_name: str
    content: str
    created_at: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            identity_service: Identity resolution service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.identity_service = identity_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify post exists via post service
        2. Create comment via comment service (validates content)
        3. Resolve the author's display name for the response

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            NotFoundError: If the post doesn't exist
            ValidationError: If the content is blank
        """
        post_id = PostId(request.post_id)
        author_id = UserId(request.author_id)

        await self.post_service.get_post_by_id(post_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=author_id,
            content=request.content,
        )
        author = await self.identity_service.resolve_or_unknown(author_id)

        return CreateCommentResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            display_name=author.display_name,
            content=comment.content,
            created_at=format_timestamp(comment.created_at),
        )
