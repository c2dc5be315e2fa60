"""Post aggregate root.

A post is a question/answer pair written by one user. Comments and likes
hang off it and go away with it.
"""

from datetime import datetime

from pydantic import Field, field_validator

from qafeed.domain.model.common import DomainModel, utc_now
from qafeed.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Question and answer must contain something other than whitespace,
    both on creation and after every update.
    """

    id: PostId
    author_id: UserId
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("question", "answer")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject values that are empty after trimming."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v
