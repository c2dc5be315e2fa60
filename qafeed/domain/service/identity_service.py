"""Identity resolution service."""

from collections.abc import Iterable

import logfire

from qafeed.domain.error import StorageError
from qafeed.domain.repository import UserRepository
from qafeed.domain.value import Identity, UserId

from .base import Service


class IdentityService(Service):
    """Resolves user IDs to public identities.

    Identities only ever decorate secondary actors (post authors,
    commenters), so a lookup that fails for any reason is a resolution
    gap: callers fall back to ``Identity.unknown`` and the request goes on.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize identity service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve(self, user_id: UserId) -> Identity | None:
        """Resolve a single user ID.

        Args:
            user_id: User ID

        Returns:
            Identity if the user exists, None if it is missing or the
            lookup failed
        """
        with logfire.span("identity_service.resolve", user_id=user_id):
            try:
                user = await self.user_repository.find_by_id(user_id)
            except StorageError as e:
                logfire.warn("Identity lookup failed", user_id=user_id, error=str(e))
                return None

            if user is None:
                logfire.warn("Identity not resolved", user_id=user_id)
                return None
            return user.to_identity()

    async def resolve_or_unknown(self, user_id: UserId) -> Identity:
        """Resolve a user ID, substituting the Unknown sentinel on a miss."""
        identity = await self.resolve(user_id)
        return identity if identity is not None else Identity.unknown(user_id)

    async def resolve_many(self, user_ids: Iterable[UserId]) -> dict[UserId, Identity]:
        """Resolve many user IDs in one lookup.

        Args:
            user_ids: User IDs (duplicates are fine)

        Returns:
            Mapping of user ID to identity; unresolved IDs are absent, and
            the mapping is empty if the lookup failed
        """
        unique_ids = sorted(set(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("identity_service.resolve_many", count=len(unique_ids)):
            try:
                users = await self.user_repository.find_by_ids(unique_ids)
            except StorageError as e:
                logfire.warn(
                    "Identity batch lookup failed", user_ids=unique_ids, error=str(e)
                )
                return {}

            identities = {user.id: user.to_identity() for user in users}

            missing = [uid for uid in unique_ids if uid not in identities]
            if missing:
                logfire.warn("Identities not resolved", user_ids=missing)

            return identities

    @staticmethod
    def pick(identities: dict[UserId, Identity], user_id: UserId) -> Identity:
        """Look up an identity from a batch result, falling back to Unknown."""
        return identities.get(user_id) or Identity.unknown(user_id)
