"""Domain layer DI providers."""

from dishka import Scope, provide

from qafeed.config import AuthSettings, FeedSettings
from qafeed.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from qafeed.domain.service import (
    AuthorizationService,
    CommentService,
    FeedService,
    IdentityService,
    JWTService,
    LikeService,
    PostService,
)
from qafeed.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(self, user_repository: UserRepository) -> IdentityService:
        """Provide identity resolution service."""
        return IdentityService(user_repository=user_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        identity_service: IdentityService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            identity_service=identity_service,
        )

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)

    @provide
    def get_feed_service(
        self,
        identity_service: IdentityService,
        comment_service: CommentService,
        like_service: LikeService,
        feed_settings: FeedSettings,
    ) -> FeedService:
        """Provide feed composition service."""
        return FeedService(
            identity_service=identity_service,
            comment_service=comment_service,
            like_service=like_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_authorization_service(self) -> AuthorizationService:
        """Provide mutation authorization service."""
        return AuthorizationService()

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)
