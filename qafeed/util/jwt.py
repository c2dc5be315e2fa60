"""JWT token utilities.

Tokens carry the user ID in the registered ``sub`` claim, as a string,
plus ``iat`` and ``exp``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from qafeed.config import AuthSettings

_REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenPayload(BaseModel):
    """Decoded JWT claims."""

    user_id: int = Field(alias="sub")
    issued_at: datetime = Field(alias="iat")
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: int, settings: AuthSettings) -> str:
    """Issue a signed token for a user.

    Args:
        user_id: User ID
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(hours=settings.jwt_expiry_hours),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and decode its claims.

    Raises:
        JWTError: If the token is expired, badly signed, or has no numeric subject
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": _REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except PydanticValidationError as e:
        raise JWTError("Invalid token subject") from e
