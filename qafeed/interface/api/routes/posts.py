"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Response, status
from pydantic import BaseModel, Field

from qafeed.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from qafeed.domain.error import DomainError
from qafeed.domain.model import FeedView
from qafeed.domain.service import JWTService
from qafeed.domain.value import PostChanges, UserId
from qafeed.interface.api.auth import renew_token, require_viewer
from qafeed.interface.error import to_http_exception, unexpected_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIResponse(BaseModel):
    """A single composed post plus the renewed token."""

    post: FeedView
    token: str


class PostListAPIResponse(BaseModel):
    """A page of composed posts plus the renewed token."""

    posts: list[FeedView]
    limit: int
    offset: int
    token: str


class DeletePostAPIResponse(BaseModel):
    """Delete confirmation plus the renewed token."""

    post_id: int
    comments_deleted: int
    likes_deleted: int
    token: str


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    question: str = Field(max_length=10000)
    answer: str = Field(max_length=10000)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post.

    Omitted fields are left unchanged.
    """

    question: str | None = Field(default=None, max_length=10000)
    answer: str | None = Field(default=None, max_length=10000)


async def _list_posts(
    list_posts_use_case: ListPostsUseCase,
    jwt_service: JWTService,
    response: Response,
    viewer_id: UserId,
    limit: int | None,
    offset: int,
    author_id: int | None = None,
    liked_by_id: int | None = None,
) -> PostListAPIResponse:
    try:
        request = ListPostsRequest(
            viewer_id=viewer_id,
            author_id=author_id,
            liked_by_id=liked_by_id,
            limit=limit,
            offset=offset,
        )
    except ValueError as e:
        logfire.warn("List posts validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    try:
        result = await list_posts_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "list posts")
    except Exception as e:
        raise unexpected_error(e, "list posts")

    return PostListAPIResponse(
        posts=result.posts,
        limit=result.limit,
        offset=result.offset,
        token=renew_token(jwt_service, viewer_id, response),
    )


@router.get("", response_model=PostListAPIResponse)
async def list_posts(
    response: Response,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostListAPIResponse:
    """List every post, newest first, fully composed for the viewer.

    Args:
        response: Outgoing response (for the renewed cookie)
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service from DI
        limit: Maximum number of posts to return
        offset: Number of posts to skip
        auth_token: JWT token from cookie
        authorization: Bearer token header (fallback)

    Returns:
        Page of composed posts

    Raises:
        HTTPException: 401 if not authenticated, 500 if storage fails
    """
    viewer_id = require_viewer(jwt_service, auth_token, authorization)
    return await _list_posts(
        list_posts_use_case, jwt_service, response, viewer_id, limit, offset
    )


@router.get("/me", response_model=PostListAPIResponse)
async def list_my_posts(
    response: Response,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostListAPIResponse:
    """List the viewer's own posts."""
    viewer_id = require_viewer(jwt_service, auth_token, authorization)
    return await _list_posts(
        list_posts_use_case,
        jwt_service,
        response,
        viewer_id,
        limit,
        offset,
        author_id=viewer_id,
    )


@router.get("/user/{user_id}", response_model=PostListAPIResponse)
async def list_user_posts(
    user_id: int,
    response: Response,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostListAPIResponse:
    """List the posts written by a user."""
    viewer_id = require_viewer(jwt_service, auth_token, authorization)
    return await _list_posts(
        list_posts_use_case,
        jwt_service,
        response,
        viewer_id,
        limit,
        offset,
        author_id=user_id,
    )


@router.get("/liked/{user_id}", response_model=PostListAPIResponse)
async def list_liked_posts(
    user_id: int,
    response: Response,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostListAPIResponse:
    """List the posts a user has liked.

    The posts are composed for the viewer, so ``liked`` reflects the
    viewer's likes, not ``user_id``'s.
    """
    viewer_id = require_viewer(jwt_service, auth_token, authorization)
    return await _list_posts(
        list_posts_use_case,
        jwt_service,
        response,
        viewer_id,
        limit,
        offset,
        liked_by_id=user_id,
    )


@router.get("/{post_id}", response_model=PostAPIResponse)
async def get_post(
    post_id: int,
    response: Response,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostAPIResponse:
    """Get a post by ID.

    Args:
        post_id: Post ID
        response: Outgoing response (for the renewed cookie)
        get_post_use_case: Get post use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header (fallback)

    Returns:
        The composed post

    Raises:
        HTTPException: 401 if not authenticated, 404 if post not found
    """
    viewer_id = require_viewer(jwt_service, auth_token, authorization)

    try:
        result = await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, viewer_id=viewer_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "fetch post")
    except Exception as e:
        raise unexpected_error(e, "fetch post")

    return PostAPIResponse(
        post=result.post, token=renew_token(jwt_service, viewer_id, response)
    )


@router.post("", response_model=PostAPIResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    response: Response,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostAPIResponse:
    """Create a new post.

    Requires authentication.

    Args:
        request: Question and answer
        response: Outgoing response (for the renewed cookie)
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header (fallback)

    Returns:
        Created post, composed for its author

    Raises:
        HTTPException: 401 if not authenticated, 400 if question or answer is blank
    """
    author_id = require_viewer(jwt_service, auth_token, authorization)

    try:
        result = await create_post_use_case.execute(
            CreatePostRequest(
                question=request.question,
                answer=request.answer,
                author_id=author_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "create post")
    except Exception as e:
        raise unexpected_error(e, "create post")

    return PostAPIResponse(
        post=result.post, token=renew_token(jwt_service, author_id, response)
    )


@router.patch("/{post_id}", response_model=PostAPIResponse)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    response: Response,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostAPIResponse:
    """Partially update a post's question and/or answer.

    Only the post author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 404 if post not found,
            403 if not the author, 400 if a sent field is blank
    """
    user_id = require_viewer(jwt_service, auth_token, authorization)
    changes = PostChanges(**request.model_dump(exclude_unset=True))

    try:
        result = await update_post_use_case.execute(
            UpdatePostRequest(post_id=post_id, user_id=user_id, changes=changes)
        )
    except DomainError as e:
        raise to_http_exception(e, "update post")
    except Exception as e:
        raise unexpected_error(e, "update post")

    return PostAPIResponse(
        post=result.post, token=renew_token(jwt_service, user_id, response)
    )


@router.delete("/{post_id}", response_model=DeletePostAPIResponse)
async def delete_post(
    post_id: int,
    response: Response,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeletePostAPIResponse:
    """Delete a post with its comments and likes.

    Only the post author can delete.

    Raises:
        HTTPException: 401 if not authenticated, 404 if post not found,
            403 if not the author
    """
    user_id = require_viewer(jwt_service, auth_token, authorization)

    try:
        result = await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "delete post")
    except Exception as e:
        raise unexpected_error(e, "delete post")

    return DeletePostAPIResponse(
        **result.model_dump(), token=renew_token(jwt_service, user_id, response)
    )
