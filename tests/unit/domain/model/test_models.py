"""Unit tests for domain models."""

from datetime import datetime, timedelta, timezone

import pydantic
import pytest

from guess.domain.model import TimeConstraint, Vote
from guess.domain.value import ConstraintId, ConstraintKind, VoteId
from tests.conftest import at


class TestVote:
    @pytest.mark.parametrize("value", [-1, 1001])
    def test_value_out_of_range_is_rejected(self, value):
        with pytest.raises(pydantic.ValidationError):
            Vote(id=VoteId(1), value=value)

    def test_vote_is_immutable(self):
        vote = Vote(id=VoteId(1), value=10)

        with pytest.raises(pydantic.ValidationError):
            vote.value = 20

    def test_created_at_defaults_to_aware_utc(self):
        vote = Vote(id=VoteId(1), value=10)

        assert vote.created_at.utcoffset() == timedelta(0)


class TestTimeConstraint:
    def test_covers_is_inclusive(self):
        constraint = TimeConstraint(
            id=ConstraintId(1),
            start_time=at(10),
            end_time=at(12),
            kind=ConstraintKind.INCLUDE,
        )

        assert constraint.covers(at(10)) is True
        assert constraint.covers(at(11)) is True
        assert constraint.covers(at(12)) is True
        assert constraint.covers(at(9, 59, 59)) is False
        assert constraint.covers(at(12, 0, 1)) is False

    def test_kind_parses_from_string(self):
        constraint = TimeConstraint(
            id=ConstraintId(1),
            start_time=at(10),
            end_time=at(12),
            kind="exclude",
        )

        assert constraint.kind == ConstraintKind.EXCLUDE
        assert constraint.enabled is True

    def test_naive_bounds_are_read_as_utc(self):
        constraint = TimeConstraint(
            id=ConstraintId(1),
            start_time=datetime(2024, 5, 1, 10),
            end_time=datetime(2024, 5, 1, 12),
            kind=ConstraintKind.INCLUDE,
        )

        assert constraint.start_time == at(10)
        assert constraint.covers(at(11)) is True

    def test_offset_bounds_are_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        constraint = TimeConstraint(
            id=ConstraintId(1),
            start_time=datetime(2024, 5, 1, 12, tzinfo=plus_two),
            end_time=datetime(2024, 5, 1, 14, tzinfo=plus_two),
            kind=ConstraintKind.INCLUDE,
        )

        assert constraint.start_time.tzinfo == timezone.utc
        assert constraint.start_time == at(10)
