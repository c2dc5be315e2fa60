"""Unit tests for AuthorizationService."""

import pytest

from qafeed.domain.error import NotAuthorizedError, NotFoundError
from qafeed.domain.service import AuthorizationService
from qafeed.domain.value import AuthorizationDecision, MutationAction, UserId
from tests.factories import make_post


class TestAuthorize:
    """Tests for ownership-based authorization."""

    @pytest.mark.parametrize("action", list(MutationAction))
    def test_owner_is_allowed(self, action):
        """The author may update and delete."""
        service = AuthorizationService()
        post = make_post(1, 7)

        assert service.authorize(post, UserId(7), action) is AuthorizationDecision.ALLOW

    @pytest.mark.parametrize("action", list(MutationAction))
    def test_non_owner_is_denied(self, action):
        """Anybody else may not."""
        service = AuthorizationService()
        post = make_post(1, 7)

        assert service.authorize(post, UserId(9), action) is AuthorizationDecision.DENY

    def test_ensure_authorized_raises_forbidden(self):
        """Denial is a NotAuthorizedError, which is not a NotFoundError."""
        service = AuthorizationService()
        post = make_post(1, 7)

        with pytest.raises(NotAuthorizedError) as exc_info:
            service.ensure_authorized(post, UserId(9), MutationAction.DELETE)

        assert not isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.action == "delete"
        assert exc_info.value.user_id == "9"

    def test_ensure_authorized_passes_for_owner(self):
        """No error for the author."""
        service = AuthorizationService()

        service.ensure_authorized(make_post(1, 7), UserId(7), MutationAction.UPDATE)
