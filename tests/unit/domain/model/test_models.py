"""Unit tests for domain models and value objects."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from qafeed.domain.model import Post, format_timestamp
from qafeed.domain.value import Identity, PostChanges, PostId, UserId


class TestFormatTimestamp:
    """Tests for RFC 3339 rendering."""

    def test_utc_uses_z_suffix(self):
        value = datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)

        assert format_timestamp(value) == "2024-05-01T10:00:00Z"

    def test_naive_is_treated_as_utc(self):
        assert format_timestamp(datetime(2024, 5, 1, 10, 0, 0)) == "2024-05-01T10:00:00Z"

    def test_other_offsets_are_kept(self):
        value = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))

        assert format_timestamp(value) == "2024-05-01T12:00:00+02:00"

    def test_sub_second_precision_is_dropped(self):
        value = datetime(2024, 5, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)

        assert format_timestamp(value) == "2024-05-01T10:00:00Z"


class TestPost:
    """Tests for the Post invariant."""

    @pytest.mark.parametrize("field", ["question", "answer"])
    def test_blank_text_is_invalid(self, field):
        """Whitespace-only text never makes a valid post."""
        values = {"question": "Q?", "answer": "A.", field: "  \n "}

        with pytest.raises(PydanticValidationError):
            Post(id=PostId(1), author_id=UserId(7), **values)

    def test_post_is_immutable(self):
        post = Post(id=PostId(1), author_id=UserId(7), question="Q?", answer="A.")

        with pytest.raises(PydanticValidationError):
            post.question = "changed"


class TestPostChanges:
    """Tests for partial update tracking."""

    def test_only_sent_fields_are_reported(self):
        changes = PostChanges(answer="new")

        assert changes.fields() == {"answer": "new"}
        assert not changes.is_empty

    def test_explicit_none_counts_as_sent(self):
        assert PostChanges(question=None).fields() == {"question": None}

    def test_no_fields(self):
        assert PostChanges().is_empty
        assert PostChanges().fields() == {}


class TestIdentity:
    def test_unknown_sentinel(self):
        assert Identity.unknown(UserId(5)) == Identity(
            id=UserId(5), display_name="Unknown", avatar_url=None
        )
