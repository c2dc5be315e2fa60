"""Unit tests for GetPostUseCase."""

import pytest

from qafeed.application.usecase.post import GetPostRequest, GetPostUseCase
from qafeed.domain.error import NotFoundError
from qafeed.domain.model import Like
from qafeed.domain.repository import LikeRepository, PostRepository, UserRepository
from qafeed.domain.value import PostId, UserId
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetPost:
    """Tests for fetching one composed post."""

    @pytest.mark.asyncio
    async def test_returns_composed_post(self, unit_env):
        """The response carries the post as seen by the viewer."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        like_repo = await unit_env.get(LikeRepository)
        use_case = await unit_env.get(GetPostUseCase)

        await post_repo.save(make_post(1, 7))
        await user_repo.save(make_user(7, "alice"))
        await like_repo.save(Like(user_id=UserId(42), post_id=PostId(1)))

        # Act
        response = await use_case.execute(GetPostRequest(post_id=1, viewer_id=42))

        # Assert
        assert response.post.id == PostId(1)
        assert response.post.author.display_name == "alice"
        assert response.post.like_count == 1
        assert response.post.liked is True

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Unknown post IDs surface as NotFoundError."""
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=404, viewer_id=7))
