"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel, Field

from qafeed.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from qafeed.domain.error import DomainError
from qafeed.domain.service import JWTService
from qafeed.interface.api.auth import renew_token, require_viewer
from qafeed.interface.error import to_http_exception, unexpected_error

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(max_length=10000)


class CreateCommentAPIResponse(CreateCommentResponse):
    """Created comment plus the renewed token."""

    token: str


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    response: Response,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentAPIResponse:
    """Comment on a post.

    Requires authentication.

    Args:
        post_id: Post ID
        request: Comment content
        response: Outgoing response (for the renewed cookie)
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header (fallback)

    Returns:
        Created comment

    Raises:
        HTTPException: 401 if not authenticated, 404 if post not found,
            400 if content is blank
    """
    author_id = require_viewer(jwt_service, auth_token, authorization)

    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id, content=request.content, author_id=author_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "create comment")
    except Exception as e:
        raise unexpected_error(e, "create comment")

    return CreateCommentAPIResponse(
        **result.model_dump(), token=renew_token(jwt_service, author_id, response)
    )
