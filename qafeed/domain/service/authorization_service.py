"""Mutation authorization service."""

import logfire

from qafeed.domain.error import NotAuthorizedError
from qafeed.domain.model import Post
from qafeed.domain.value import AuthorizationDecision, MutationAction, UserId

from .base import Service


class AuthorizationService(Service):
    """Gates post mutations by ownership.

    The owner of a post may update or delete it; nobody else may. There
    are no roles and no overrides.
    """

    def authorize(
        self, post: Post, requestor_id: UserId, action: MutationAction
    ) -> AuthorizationDecision:
        """Decide whether a user may perform an action on a post.

        Args:
            post: Target post (already known to exist)
            requestor_id: ID of the user asking
            action: Requested mutation

        Returns:
            ALLOW if the requestor authored the post, DENY otherwise
        """
        if post.author_id == requestor_id:
            return AuthorizationDecision.ALLOW

        logfire.warn(
            "Mutation denied",
            post_id=post.id,
            author_id=post.author_id,
            requestor_id=requestor_id,
            action=action.value,
        )
        return AuthorizationDecision.DENY

    def ensure_authorized(
        self, post: Post, requestor_id: UserId, action: MutationAction
    ) -> None:
        """Raise unless the requestor may perform the action.

        Raises:
            NotAuthorizedError: If the requestor does not own the post
        """
        decision = self.authorize(post, requestor_id, action)
        if not decision.allowed:
            raise NotAuthorizedError("post", str(post.id), str(requestor_id), action.value)
