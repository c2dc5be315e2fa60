"""Unit tests for DeletePostUseCase."""

import pytest

from qafeed.application.usecase.post import DeletePostRequest, DeletePostUseCase
from qafeed.domain.error import NotAuthorizedError, NotFoundError
from qafeed.domain.model import Like
from qafeed.domain.repository import CommentRepository, LikeRepository, PostRepository
from qafeed.domain.value import PostId, UserId
from tests.factories import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeletePost:
    """Tests for the delete flow."""

    @pytest.mark.asyncio
    async def test_owner_delete_removes_comments_and_likes(self, unit_env):
        """The post goes, and so does everything hanging off it."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        use_case = await unit_env.get(DeletePostUseCase)

        await post_repo.save(make_post(1, 7))
        await comment_repo.create(PostId(1), UserId(9), "nice")
        await like_repo.save(Like(user_id=UserId(9), post_id=PostId(1)))

        # Act
        response = await use_case.execute(DeletePostRequest(post_id=1, user_id=7))

        # Assert
        assert response.comments_deleted == 1
        assert response.likes_deleted == 1
        assert await post_repo.find_by_id(PostId(1)) is None
        assert await comment_repo.find_by_post(PostId(1)) == []
        assert await like_repo.count_by_post(PostId(1)) == 0

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(DeletePostUseCase)
        await post_repo.save(make_post(1, 7))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(DeletePostRequest(post_id=1, user_id=9))

        assert await post_repo.find_by_id(PostId(1)) is not None

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeletePostRequest(post_id=404, user_id=7))
