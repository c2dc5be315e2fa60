"""Domain value objects for the feed."""

from qafeed.domain.value.identifiers import CommentId, PostId, UserId
from qafeed.domain.value.types import (
    UNKNOWN_DISPLAY_NAME,
    AuthorizationDecision,
    Identity,
    LikeSummary,
    MutationAction,
    PostChanges,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "UNKNOWN_DISPLAY_NAME",
    "AuthorizationDecision",
    "Identity",
    "LikeSummary",
    "MutationAction",
    "PostChanges",
]
