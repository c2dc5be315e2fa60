"""Comment entity."""

from datetime import datetime

from pydantic import Field

from qafeed.domain.model.common import DomainModel, utc_now
from qafeed.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post.

    The post reference never changes; comments are not edited or deleted
    individually, only together with their post.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now)
