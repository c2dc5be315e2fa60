"""Domain value objects for the feed.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from qafeed.domain.value.common import ValueObject
from qafeed.domain.value.identifiers import UserId

UNKNOWN_DISPLAY_NAME = "Unknown"


class MutationAction(str, Enum):
    """Mutating operations gated by ownership."""

    UPDATE = "update"
    DELETE = "delete"


class AuthorizationDecision(str, Enum):
    """Outcome of a mutation authorization check."""

    ALLOW = "allow"
    DENY = "deny"

    @property
    def allowed(self) -> bool:
        return self is AuthorizationDecision.ALLOW


class Identity(ValueObject):
    """Public projection of a user: the only user data the feed reads."""

    id: UserId
    display_name: str
    avatar_url: str | None = None

    @classmethod
    def unknown(cls, user_id: UserId) -> "Identity":
        """Sentinel identity for a user that no longer resolves."""
        return cls(id=user_id, display_name=UNKNOWN_DISPLAY_NAME, avatar_url=None)


class LikeSummary(ValueObject):
    """Like count for a post plus whether the viewer is among the likers."""

    count: int = 0
    liked: bool = False


class PostChanges(ValueObject):
    """Partial update for a post.

    Only fields explicitly set are applied; omitted fields are left
    untouched. Use ``fields()`` rather than ``model_dump()`` to read them.
    """

    question: str | None = None
    answer: str | None = None

    def fields(self) -> dict[str, str | None]:
        """Return only the fields present in the update."""
        return self.model_dump(exclude_unset=True)

    @property
    def is_empty(self) -> bool:
        return not self.model_fields_set
