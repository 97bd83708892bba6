"""Unit tests for ConstraintService."""

from datetime import datetime

import pytest

from guess.domain.error import NotFoundError
from guess.domain.repository import ConstraintRepository
from guess.domain.service import ConstraintService
from guess.domain.value import ConstraintId, ConstraintKind
from tests.conftest import at
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateConstraint:
    """Tests for create_constraint."""

    @pytest.mark.asyncio
    async def test_create_constraint(self, unit_env):
        # Arrange
        constraint_service = await unit_env.get(ConstraintService)
        constraint_repo = await unit_env.get(ConstraintRepository)

        # Act
        constraint = await constraint_service.create_constraint(
            start_time=at(10),
            end_time=at(12),
            kind=ConstraintKind.EXCLUDE,
            note="Spam wave",
        )

        # Assert
        saved = await constraint_repo.find_by_id(constraint.id)
        assert saved == constraint
        assert saved.enabled is True
        assert saved.kind == ConstraintKind.EXCLUDE
        assert saved.note == "Spam wave"

    @pytest.mark.asyncio
    async def test_blank_note_is_stored_as_none(self, unit_env):
        constraint_service = await unit_env.get(ConstraintService)

        constraint = await constraint_service.create_constraint(
            start_time=at(10),
            end_time=at(12),
            kind=ConstraintKind.INCLUDE,
            note="",
        )

        assert constraint.note is None

    @pytest.mark.asyncio
    async def test_inverted_range_is_stored(self, unit_env):
        """Inverted ranges are kept as given."""
        constraint_service = await unit_env.get(ConstraintService)

        constraint = await constraint_service.create_constraint(
            start_time=at(12),
            end_time=at(10),
            kind=ConstraintKind.INCLUDE,
        )

        assert constraint.start_time == at(12)
        assert constraint.covers(at(11)) is False

    @pytest.mark.asyncio
    async def test_naive_bounds_are_stored_as_utc(self, unit_env):
        constraint_service = await unit_env.get(ConstraintService)
        constraint_repo = await unit_env.get(ConstraintRepository)

        constraint = await constraint_service.create_constraint(
            start_time=datetime(2024, 5, 1, 10),
            end_time=datetime(2024, 5, 1, 12),
            kind=ConstraintKind.EXCLUDE,
        )

        saved = await constraint_repo.find_by_id(constraint.id)
        assert saved.start_time == at(10)
        assert saved.end_time == at(12)
        assert saved.covers(at(11)) is True


class TestListConstraints:
    """Tests for list_constraints."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        constraint_service = await unit_env.get(ConstraintService)

        first = await constraint_service.create_constraint(
            start_time=at(1), end_time=at(2), kind=ConstraintKind.INCLUDE
        )
        second = await constraint_service.create_constraint(
            start_time=at(3), end_time=at(4), kind=ConstraintKind.EXCLUDE
        )

        constraints = await constraint_service.list_constraints()

        assert [c.id for c in constraints] == [second.id, first.id]


class TestToggleConstraint:
    """Tests for toggle_constraint."""

    @pytest.mark.asyncio
    async def test_toggle_flips_enabled(self, unit_env):
        constraint_service = await unit_env.get(ConstraintService)
        constraint = await constraint_service.create_constraint(
            start_time=at(1), end_time=at(2), kind=ConstraintKind.INCLUDE
        )

        disabled = await constraint_service.toggle_constraint(constraint.id)
        enabled = await constraint_service.toggle_constraint(constraint.id)

        assert disabled.enabled is False
        assert enabled.enabled is True

    @pytest.mark.asyncio
    async def test_toggle_missing_raises(self, unit_env):
        constraint_service = await unit_env.get(ConstraintService)

        with pytest.raises(NotFoundError):
            await constraint_service.toggle_constraint(ConstraintId(404))


class TestDeleteConstraint:
    """Tests for delete_constraint."""

    @pytest.mark.asyncio
    async def test_delete_removes_constraint(self, unit_env):
        constraint_service = await unit_env.get(ConstraintService)
        constraint_repo = await unit_env.get(ConstraintRepository)
        constraint = await constraint_service.create_constraint(
            start_time=at(1), end_time=at(2), kind=ConstraintKind.EXCLUDE
        )

        await constraint_service.delete_constraint(constraint.id)

        assert await constraint_repo.find_by_id(constraint.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, unit_env):
        constraint_service = await unit_env.get(ConstraintService)

        with pytest.raises(NotFoundError, match="Constraint not found: 404"):
            await constraint_service.delete_constraint(ConstraintId(404))
