"""Strongly typed identifiers for feed entities.

Identifiers are storage-assigned integers. NewType keeps a PostId from
being passed where a UserId is expected.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
