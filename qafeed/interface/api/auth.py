"""Request credentials.

The feed core only sees a viewer ID. Routes turn the request credential
into that ID here and hand back a renewed token with every response.
"""

from fastapi import HTTPException, Response, status

from qafeed.domain.service import JWTService
from qafeed.domain.value import UserId

AUTH_COOKIE = "auth_token"


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def require_viewer(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None = None,
) -> UserId:
    """Resolve the authenticated user or reject the request.

    An explicit ``Authorization: Bearer`` header wins over the ``auth_token``
    cookie.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        authorization: Authorization header value

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: 401 if the credential is missing or invalid
    """
    token = _bearer_token(authorization) or auth_token
    viewer_id = jwt_service.get_viewer_id(token)
    if viewer_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return viewer_id


def renew_token(jwt_service: JWTService, user_id: UserId, response: Response) -> str:
    """Issue a fresh token and refresh the auth cookie.

    Args:
        jwt_service: JWT service
        user_id: Authenticated user ID
        response: Outgoing response to set the cookie on

    Returns:
        The new token, for the response body
    """
    token = jwt_service.create_token(user_id)
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        samesite="lax",
        path="/",
        max_age=jwt_service.cookie_max_age,
    )
    return token
