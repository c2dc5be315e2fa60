"""Like domain service."""

from collections.abc import Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from qafeed.domain.error import BusinessRuleViolationError
from qafeed.domain.model import Like
from qafeed.domain.repository import LikeRepository
from qafeed.domain.value import LikeSummary, PostId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for like operations and aggregation."""

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def aggregate(self, post_id: PostId, viewer_id: UserId) -> LikeSummary:
        """Count a post's likes and check whether the viewer is a liker.

        Args:
            post_id: Post ID
            viewer_id: ID of the user the feed is rendered for

        Returns:
            Like summary

        Raises:
            StorageError: If likes can't be retrieved
        """
        with logfire.span("like_service.aggregate", post_id=post_id, viewer_id=viewer_id):
            count = await self.like_repository.count_by_post(post_id)
            own_like = await self.like_repository.find_by_user_and_post(
                viewer_id, post_id
            )
            return LikeSummary(count=count, liked=own_like is not None)

    async def aggregate_many(
        self, post_ids: Sequence[PostId], viewer_id: UserId
    ) -> dict[PostId, LikeSummary]:
        """Aggregate likes for several posts in one pass.

        Args:
            post_ids: Post IDs
            viewer_id: ID of the user the feed is rendered for

        Returns:
            Mapping of every given post ID to its like summary

        Raises:
            StorageError: If likes can't be retrieved
        """
        if not post_ids:
            return {}

        with logfire.span(
            "like_service.aggregate_many", post_count=len(post_ids), viewer_id=viewer_id
        ):
            counts = await self.like_repository.count_by_posts(post_ids)
            # Batch query to avoid N+1
            own_likes = await self.like_repository.find_by_user_and_posts(
                viewer_id, post_ids
            )
            liked_ids = {like.post_id for like in own_likes}

            return {
                post_id: LikeSummary(
                    count=counts.get(post_id, 0), liked=post_id in liked_ids
                )
                for post_id in post_ids
            }

    async def like_post(self, post_id: PostId, user_id: UserId) -> Like:
        """Like a post.

        The caller is responsible for checking the post exists.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Created like

        Raises:
            BusinessRuleViolationError: If the user already likes the post
        """
        with logfire.span("like_service.like_post", post_id=post_id, user_id=user_id):
            try:
                like = await self.like_repository.save(
                    Like(user_id=user_id, post_id=post_id)
                )
            except IntegrityError:
                logfire.warn("Duplicate like attempt", post_id=post_id, user_id=user_id)
                raise BusinessRuleViolationError("Already liked this post")

            logfire.info("Post liked", post_id=post_id, user_id=user_id)
            return like

    async def unlike_post(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like from a post.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            True if a like was removed, False if there was none
        """
        with logfire.span("like_service.unlike_post", post_id=post_id, user_id=user_id):
            removed = await self.like_repository.delete(user_id, post_id)
            if removed:
                logfire.info("Post unliked", post_id=post_id, user_id=user_id)
            else:
                logfire.info("No like to remove", post_id=post_id, user_id=user_id)
            return removed

    async def delete_likes_for_post(self, post_id: PostId) -> int:
        """Delete every like on a post.

        Args:
            post_id: Post ID

        Returns:
            Number of likes deleted
        """
        with logfire.span("like_service.delete_likes_for_post", post_id=post_id):
            deleted = await self.like_repository.delete_by_post(post_id)
            logfire.info("Likes deleted for post", post_id=post_id, count=deleted)
            return deleted
