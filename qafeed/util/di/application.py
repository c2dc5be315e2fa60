"""Application layer DI providers."""

from dishka import Scope, provide

from qafeed.application.usecase.comment import CreateCommentUseCase
from qafeed.application.usecase.like import LikePostUseCase, UnlikePostUseCase
from qafeed.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from qafeed.config import FeedSettings
from qafeed.domain.service import (
    AuthorizationService,
    CommentService,
    FeedService,
    IdentityService,
    LikeService,
    PostService,
)
from qafeed.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, feed_service: FeedService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        feed_service: FeedService,
        feed_settings: FeedSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            feed_service=feed_service,
            feed_settings=feed_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, feed_service: FeedService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        authorization_service: AuthorizationService,
        feed_service: FeedService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            authorization_service=authorization_service,
            feed_service=feed_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        authorization_service: AuthorizationService,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            authorization_service=authorization_service,
            comment_service=comment_service,
            like_service=like_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        identity_service: IdentityService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            identity_service=identity_service,
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(
        self, like_service: LikeService, post_service: PostService
    ) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(like_service=like_service, post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_post_use_case(
        self, like_service: LikeService, post_service: PostService
    ) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(like_service=like_service, post_service=post_service)
