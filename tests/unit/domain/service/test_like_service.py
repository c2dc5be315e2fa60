"""Unit tests for LikeService."""

import pytest

from qafeed.domain.error import BusinessRuleViolationError, StorageError
from qafeed.domain.service import LikeService
from qafeed.domain.value import LikeSummary, PostId, UserId
from qafeed.persistence.repository.inmemory import InMemoryLikeRepository, InMemoryStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class FailingLikeRepository(InMemoryLikeRepository):
    """Like repository whose counts always fail."""

    async def count_by_post(self, post_id):
        raise StorageError("like_repository.count_by_post")

    async def count_by_posts(self, post_ids):
        raise StorageError("like_repository.count_by_posts")


class TestAggregate:
    """Tests for like aggregation."""

    @pytest.mark.asyncio
    async def test_count_is_independent_of_viewer(self, unit_env):
        """Every viewer sees the same count; only ``liked`` differs."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        await like_service.like_post(PostId(1), UserId(7))
        await like_service.like_post(PostId(1), UserId(9))

        # Act
        for_liker = await like_service.aggregate(PostId(1), UserId(7))
        for_stranger = await like_service.aggregate(PostId(1), UserId(42))

        # Assert
        assert for_liker == LikeSummary(count=2, liked=True)
        assert for_stranger == LikeSummary(count=2, liked=False)

    @pytest.mark.asyncio
    async def test_post_without_likes(self, unit_env):
        """No likes is a zero count, not an error."""
        like_service = await unit_env.get(LikeService)

        summary = await like_service.aggregate(PostId(1), UserId(7))

        assert summary == LikeSummary(count=0, liked=False)

    @pytest.mark.asyncio
    async def test_aggregate_many_covers_every_post(self, unit_env):
        """Batch aggregation returns a summary for each requested post."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        await like_service.like_post(PostId(1), UserId(7))
        await like_service.like_post(PostId(2), UserId(9))

        # Act
        summaries = await like_service.aggregate_many(
            [PostId(1), PostId(2), PostId(3)], UserId(7)
        )

        # Assert
        assert summaries == {
            PostId(1): LikeSummary(count=1, liked=True),
            PostId(2): LikeSummary(count=1, liked=False),
            PostId(3): LikeSummary(count=0, liked=False),
        }

    @pytest.mark.asyncio
    async def test_retrieval_failure_propagates(self, unit_env):
        """Storage failures are fatal."""
        store = await unit_env.get(InMemoryStore)
        like_service = LikeService(like_repository=FailingLikeRepository(store))

        with pytest.raises(StorageError):
            await like_service.aggregate(PostId(1), UserId(7))

        with pytest.raises(StorageError):
            await like_service.aggregate_many([PostId(1)], UserId(7))


class TestLikeAndUnlike:
    """Tests for liking and unliking."""

    @pytest.mark.asyncio
    async def test_second_like_is_rejected(self, unit_env):
        """A user can like a post only once."""
        like_service = await unit_env.get(LikeService)
        await like_service.like_post(PostId(1), UserId(7))

        with pytest.raises(BusinessRuleViolationError, match="Already liked"):
            await like_service.like_post(PostId(1), UserId(7))

        summary = await like_service.aggregate(PostId(1), UserId(7))
        assert summary.count == 1

    @pytest.mark.asyncio
    async def test_unlike_reports_removal(self, unit_env):
        """Unlike returns whether a like was removed."""
        like_service = await unit_env.get(LikeService)
        await like_service.like_post(PostId(1), UserId(7))

        assert await like_service.unlike_post(PostId(1), UserId(7)) is True
        assert await like_service.unlike_post(PostId(1), UserId(7)) is False
        assert await like_service.aggregate(PostId(1), UserId(7)) == LikeSummary()

    @pytest.mark.asyncio
    async def test_delete_likes_for_post(self, unit_env):
        """All of a post's likes go; other posts keep theirs."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        await like_service.like_post(PostId(1), UserId(7))
        await like_service.like_post(PostId(1), UserId(9))
        await like_service.like_post(PostId(2), UserId(9))

        # Act
        deleted = await like_service.delete_likes_for_post(PostId(1))

        # Assert
        assert deleted == 2
        assert (await like_service.aggregate(PostId(1), UserId(9))).count == 0
        assert (await like_service.aggregate(PostId(2), UserId(9))).count == 1
