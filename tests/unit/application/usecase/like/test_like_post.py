"""Unit tests for LikePostUseCase and UnlikePostUseCase."""

import pytest

from qafeed.application.usecase.like import (
    LikePostRequest,
    LikePostUseCase,
    UnlikePostRequest,
    UnlikePostUseCase,
)
from qafeed.domain.error import BusinessRuleViolationError, NotFoundError
from qafeed.domain.repository import PostRepository
from tests.factories import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLikePost:
    """Tests for liking a post."""

    @pytest.mark.asyncio
    async def test_like_returns_summary(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(LikePostUseCase)
        await post_repo.save(make_post(1, 7))

        response = await use_case.execute(LikePostRequest(post_id=1, user_id=9))

        assert response.like_count == 1
        assert response.liked is True

    @pytest.mark.asyncio
    async def test_double_like_rejected(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(LikePostUseCase)
        await post_repo.save(make_post(1, 7))
        await use_case.execute(LikePostRequest(post_id=1, user_id=9))

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(LikePostRequest(post_id=1, user_id=9))

    @pytest.mark.asyncio
    async def test_like_missing_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(LikePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(LikePostRequest(post_id=404, user_id=9))


class TestUnlikePost:
    """Tests for removing a like."""

    @pytest.mark.asyncio
    async def test_unlike_after_like(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        like_use_case = await unit_env.get(LikePostUseCase)
        unlike_use_case = await unit_env.get(UnlikePostUseCase)
        await post_repo.save(make_post(1, 7))
        await like_use_case.execute(LikePostRequest(post_id=1, user_id=9))

        # Act
        response = await unlike_use_case.execute(
            UnlikePostRequest(post_id=1, user_id=9)
        )

        # Assert
        assert response.removed is True
        assert response.like_count == 0
        assert response.liked is False

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_not_an_error(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(UnlikePostUseCase)
        await post_repo.save(make_post(1, 7))

        response = await use_case.execute(UnlikePostRequest(post_id=1, user_id=9))

        assert response.removed is False
