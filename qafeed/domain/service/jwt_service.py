"""JWT token domain service."""

import logfire

from qafeed.config import AuthSettings
from qafeed.domain.value import UserId
from qafeed.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks the credential that identifies a viewer.

    The feed core only consumes a viewer ID. Routes use this service to
    turn the request credential into that ID and to hand back a renewed
    token with each response.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    @property
    def cookie_max_age(self) -> int:
        """Lifetime of the auth cookie in seconds, matching token expiry."""
        return self.auth_settings.jwt_expiry_hours * 3600

    def create_token(self, user_id: UserId) -> str:
        """Issue a fresh token for a user."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            payload = verify_token(token, self.auth_settings)
            logfire.debug("JWT token verified", user_id=payload.user_id)
            return payload

    def get_viewer_id(self, token: str | None) -> UserId | None:
        """Resolve the viewer behind a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if the token is valid, None if it is missing or invalid
        """
        if not token:
            return None

        try:
            return UserId(self.verify_token(token).user_id)
        except JWTError as e:
            logfire.warn("Rejected credential", error=str(e))
            return None
