"""Shared state for the in-memory repositories.

Repositories built on the same store see each other's rows, the way
tables in one database do: liked-post queries read likes, and deleting a
post cascades to its comments and likes.
"""

from dataclasses import dataclass, field

from qafeed.domain.model import Comment, Like, Post, User
from qafeed.domain.value import CommentId, PostId, UserId


@dataclass
class InMemoryStore:
    """Tables for in-memory persistence."""

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    likes: dict[tuple[UserId, PostId], Like] = field(default_factory=dict)

    def next_post_id(self) -> PostId:
        # Seeded rows may carry explicit IDs, so continue after the highest
        return PostId(max(self.posts, default=0) + 1)

    def next_comment_id(self) -> CommentId:
        return CommentId(max(self.comments, default=0) + 1)

    def cascade_post_delete(self, post_id: PostId) -> None:
        """Drop comments and likes that reference a deleted post."""
        self.comments = {
            cid: c for cid, c in self.comments.items() if c.post_id != post_id
        }
        self.likes = {key: like for key, like in self.likes.items() if key[1] != post_id}
