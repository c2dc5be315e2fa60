"""User entity.

The feed never writes users; it only reads their public identity.
"""

from datetime import datetime

from pydantic import Field

from qafeed.domain.model.common import DomainModel, utc_now
from qafeed.domain.value import Identity, UserId


class User(DomainModel):
    """Registered user."""

    id: UserId
    display_name: str = Field(min_length=1, max_length=255)
    avatar_url: str | None = None
    created_at: datetime = Field(default_factory=utc_now)

    def to_identity(self) -> Identity:
        """Project the user onto its public identity."""
        return Identity(
            id=self.id, display_name=self.display_name, avatar_url=self.avatar_url
        )
