"""Like entity.

A like is identified by the (user, post) pair; there is at most one per
pair and its presence is the whole signal.
"""

from datetime import datetime

from pydantic import Field

from qafeed.domain.model.common import DomainModel, utc_now
from qafeed.domain.value import PostId, UserId


class Like(DomainModel):
    """A user's like on a post."""

    user_id: UserId
    post_id: PostId
    created_at: datetime = Field(default_factory=utc_now)
