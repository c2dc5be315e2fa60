"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response

from qafeed.application.usecase.like import (
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
    UnlikePostRequest,
    UnlikePostResponse,
    UnlikePostUseCase,
)
from qafeed.domain.error import DomainError
from qafeed.domain.service import JWTService
from qafeed.interface.api.auth import renew_token, require_viewer
from qafeed.interface.error import to_http_exception, unexpected_error

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


class LikePostAPIResponse(LikePostResponse):
    """Like summary plus the renewed token."""

    token: str


class UnlikePostAPIResponse(UnlikePostResponse):
    """Like summary plus the renewed token."""

    token: str


@router.post("/posts/{post_id}/likes", response_model=LikePostAPIResponse)
async def like_post(
    post_id: int,
    response: Response,
    like_post_use_case: FromDishka[LikePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LikePostAPIResponse:
    """Like a post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if post not found,
            409 if already liked
    """
    user_id = require_viewer(jwt_service, auth_token, authorization)

    try:
        result = await like_post_use_case.execute(
            LikePostRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "like post")
    except Exception as e:
        raise unexpected_error(e, "like post")

    return LikePostAPIResponse(
        **result.model_dump(), token=renew_token(jwt_service, user_id, response)
    )


@router.delete("/posts/{post_id}/likes", response_model=UnlikePostAPIResponse)
async def unlike_post(
    post_id: int,
    response: Response,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UnlikePostAPIResponse:
    """Remove the viewer's like from a post.

    Removing a like that doesn't exist is not an error; ``removed`` is
    False in that case.

    Raises:
        HTTPException: 401 if not authenticated, 404 if post not found
    """
    user_id = require_viewer(jwt_service, auth_token, authorization)

    try:
        result = await unlike_post_use_case.execute(
            UnlikePostRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "unlike post")
    except Exception as e:
        raise unexpected_error(e, "unlike post")

    return UnlikePostAPIResponse(
        **result.model_dump(), token=renew_token(jwt_service, user_id, response)
    )
