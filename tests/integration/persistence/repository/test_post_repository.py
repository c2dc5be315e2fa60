"""Integration tests for PostgresPostRepository.

Each test rolls back its request transaction, so nothing is left behind.
Authors and likers use random IDs to stay clear of existing rows.
"""

import random
from datetime import timedelta

import pytest
import pytest_asyncio
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qafeed.domain.model import Like, Post
from qafeed.domain.repository import LikeRepository, PostRepository
from qafeed.domain.value import PostId, UserId
from qafeed.persistence.tables import posts_table
from tests.factories import BASE_TIME
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _random_user_id() -> UserId:
    return UserId(random.randint(1_000_000, 2_000_000_000))


@pytest_asyncio.fixture
async def session(integration_env):
    """Request session, rolled back after the test."""
    session = await integration_env.get(AsyncSession)
    yield session
    await session.rollback()


async def _insert_old_post(session: AsyncSession, author_id: UserId) -> PostId:
    """Insert a post dated well before anything created in the test."""
    created_at = BASE_TIME - timedelta(days=1)
    result = await session.execute(
        insert(posts_table)
        .values(
            author_id=author_id,
            question="Old question?",
            answer="Old answer.",
            created_at=created_at,
            updated_at=created_at,
        )
        .returning(posts_table.c.id)
    )
    return PostId(result.scalar_one())


class TestPostRepositoryIntegration:
    """Selection and ordering of the post queries."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, integration_env, session):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author_id = _random_user_id()

        # Act
        created = await post_repo.create(author_id, "Why?", "Because.")
        found = await post_repo.find_by_id(created.id)

        # Assert
        assert isinstance(created, Post)
        assert created.id > 0
        assert created.created_at.tzinfo is not None
        assert found == created

    @pytest.mark.asyncio
    async def test_find_by_author_newest_first_with_id_tie_break(
        self, integration_env, session
    ):
        """Posts created in one transaction share NOW(), so id breaks the tie."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author_id = _random_user_id()
        old_id = await _insert_old_post(session, author_id)
        first = await post_repo.create(author_id, "First?", "A.")
        second = await post_repo.create(author_id, "Second?", "B.")
        await post_repo.create(_random_user_id(), "Someone else?", "C.")

        # Act
        posts = await post_repo.find_by_author(author_id)
        page = await post_repo.find_by_author(author_id, limit=1, offset=1)

        # Assert
        assert first.created_at == second.created_at
        assert [p.id for p in posts] == [second.id, first.id, old_id]
        assert [p.id for p in page] == [first.id]

    @pytest.mark.asyncio
    async def test_find_liked_by_user_selects_exactly_liked_posts(
        self, integration_env, session
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        like_repo = await integration_env.get(LikeRepository)
        author_id = _random_user_id()
        liker_id = _random_user_id()
        other_id = _random_user_id()

        old_id = await _insert_old_post(session, author_id)
        liked = await post_repo.create(author_id, "Liked?", "Yes.")
        not_liked = await post_repo.create(author_id, "Not liked?", "No.")
        await like_repo.save(Like(user_id=liker_id, post_id=old_id))
        await like_repo.save(Like(user_id=liker_id, post_id=liked.id))
        await like_repo.save(Like(user_id=other_id, post_id=not_liked.id))

        # Act
        posts = await post_repo.find_liked_by_user(liker_id)

        # Assert
        assert [p.id for p in posts] == [liked.id, old_id]
        assert await post_repo.find_liked_by_user(_random_user_id()) == []

    @pytest.mark.asyncio
    async def test_update_bumps_updated_at_only_for_given_fields(
        self, integration_env, session
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        old_id = await _insert_old_post(session, _random_user_id())

        # Act
        updated = await post_repo.update(old_id, {"answer": "New answer."})

        # Assert
        assert updated is not None
        assert updated.question == "Old question?"
        assert updated.answer == "New answer."
        assert updated.updated_at > updated.created_at

    @pytest.mark.asyncio
    async def test_delete_cascades_to_likes(self, integration_env, session):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        like_repo = await integration_env.get(LikeRepository)
        post = await post_repo.create(_random_user_id(), "Q?", "A.")
        await like_repo.save(Like(user_id=_random_user_id(), post_id=post.id))

        # Act
        deleted = await post_repo.delete(post.id)

        # Assert
        assert deleted is True
        assert await post_repo.find_by_id(post.id) is None
        assert await like_repo.count_by_post(post.id) == 0
        assert await post_repo.delete(post.id) is False
