"""Feed view models.

These are computed per request from a post and its related records and
are never persisted.
"""

from datetime import datetime, timezone

from pydantic import Field

from qafeed.domain.model.common import DomainModel
from qafeed.domain.value import Identity, PostId, UserId


def format_timestamp(value: datetime) -> str:
    """Render a datetime as RFC 3339 with an explicit offset.

    Naive datetimes are taken to be UTC. UTC renders with a ``Z`` suffix,
    e.g. ``2024-05-01T10:00:00Z``.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    rendered = value.isoformat(timespec="seconds")
    if rendered.endswith("+00:00"):
        rendered = rendered[: -len("+00:00")] + "Z"
    return rendered


class ResolvedComment(DomainModel):
    """Comment with its author's display name resolved."""

    author_id: UserId
    display_name: str
    content: str


class FeedView(DomainModel):
    """Fully denormalized post as seen by one viewer."""

    id: PostId
    question: str
    answer: str
    author_id: UserId
    author: Identity
    comments: list[ResolvedComment] = Field(default_factory=list)
    like_count: int = Field(default=0, ge=0)
    liked: bool = False
    created_at: str
