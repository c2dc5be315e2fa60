"""Unit tests for UpdatePostUseCase."""

import pytest

from qafeed.application.usecase.post import UpdatePostRequest, UpdatePostUseCase
from qafeed.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from qafeed.domain.repository import PostRepository
from qafeed.domain.value import PostChanges, PostId
from tests.factories import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdatePost:
    """Tests for the update flow."""

    @pytest.mark.asyncio
    async def test_owner_can_update_answer(self, unit_env):
        """Owner's partial update succeeds and leaves the question alone."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(UpdatePostUseCase)
        await post_repo.save(make_post(1, 7, question="Q?", answer="A."))

        # Act
        response = await use_case.execute(
            UpdatePostRequest(post_id=1, user_id=7, changes=PostChanges(answer="new"))
        )

        # Assert
        assert response.post.answer == "new"
        assert response.post.question == "Q?"
        assert (await post_repo.find_by_id(PostId(1))).answer == "new"

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden(self, unit_env):
        """Someone else's post can't be edited, and isn't."""
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(UpdatePostUseCase)
        await post_repo.save(make_post(1, 7, answer="A."))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=1, user_id=9, changes=PostChanges(answer="hijack")
                )
            )

        assert (await post_repo.find_by_id(PostId(1))).answer == "A."

    @pytest.mark.asyncio
    async def test_forbidden_is_checked_before_validation(self, unit_env):
        """A non-owner sending a blank field is told Forbidden, not Invalid."""
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(UpdatePostUseCase)
        await post_repo.save(make_post(1, 7))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=1, user_id=9, changes=PostChanges(question="  ")
                )
            )

    @pytest.mark.asyncio
    async def test_blank_question_rejected_for_owner(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(UpdatePostUseCase)
        await post_repo.save(make_post(1, 7))

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=1, user_id=7, changes=PostChanges(question="   ")
                )
            )

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=404, user_id=7, changes=PostChanges(answer="x")
                )
            )
