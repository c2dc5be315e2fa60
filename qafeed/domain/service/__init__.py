"""Domain services."""

from .authorization_service import AuthorizationService
from .base import Service
from .comment_service import CommentService
from .feed_service import FeedService
from .identity_service import IdentityService
from .jwt_service import JWTService
from .like_service import LikeService
from .post_service import PostService

__all__ = [
    "AuthorizationService",
    "CommentService",
    "FeedService",
    "IdentityService",
    "JWTService",
    "LikeService",
    "PostService",
    "Service",
]
