"""PostgreSQL repository implementations."""

from qafeed.persistence.repository.comment import PostgresCommentRepository
from qafeed.persistence.repository.like import PostgresLikeRepository
from qafeed.persistence.repository.post import PostgresPostRepository
from qafeed.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
