"""Unit tests for CreatePostUseCase."""

import pytest

from qafeed.application.usecase.post import CreatePostRequest, CreatePostUseCase
from qafeed.domain.error import ValidationError
from qafeed.domain.repository import PostRepository, UserRepository
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for post creation."""

    @pytest.mark.asyncio
    async def test_creates_and_composes_for_author(self, unit_env):
        """A new post comes back composed, with no comments or likes."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(CreatePostUseCase)
        await user_repo.save(make_user(7, "alice"))

        # Act
        response = await use_case.execute(
            CreatePostRequest(question="Why?", answer="Because.", author_id=7)
        )

        # Assert
        assert response.post.author.display_name == "alice"
        assert response.post.comments == []
        assert response.post.like_count == 0
        assert response.post.liked is False
        assert response.post.created_at.endswith("Z")
        assert await post_repo.find_by_id(response.post.id) is not None

    @pytest.mark.asyncio
    async def test_blank_answer_rejected(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ValidationError, match="Answer cannot be blank"):
            await use_case.execute(
                CreatePostRequest(question="Why?", answer=" ", author_id=7)
            )
