"""Repository interfaces for the feed domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from qafeed.domain.repository.comment import CommentRepository
from qafeed.domain.repository.like import LikeRepository
from qafeed.domain.repository.post import PostRepository
from qafeed.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
]
