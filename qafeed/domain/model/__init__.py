"""Domain model entities for the feed."""

from qafeed.domain.model.comment import Comment
from qafeed.domain.model.feed import FeedView, ResolvedComment, format_timestamp
from qafeed.domain.model.like import Like
from qafeed.domain.model.post import Post
from qafeed.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
    "FeedView",
    "ResolvedComment",
    "format_timestamp",
]
