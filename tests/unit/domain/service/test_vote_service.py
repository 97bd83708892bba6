"""Unit tests for VoteService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from guess.config import RateLimitSettings
from guess.domain.error import NotFoundError, RateLimitExceededError, ValidationError
from guess.domain.repository import VoteRepository
from guess.domain.service import VoteService
from guess.domain.value import PlayerId, VoteId
from guess.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import at
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def make_service(
    max_votes_per_ip: int = 2, max_votes_per_player: int = 1
) -> tuple[VoteService, InMemoryVoteRepository]:
    repo = InMemoryVoteRepository()
    rate_limits = RateLimitSettings(
        window_seconds=3600,
        max_votes_per_ip=max_votes_per_ip,
        max_votes_per_player=max_votes_per_player,
    )
    return VoteService(vote_repository=repo, rate_limits=rate_limits), repo


class TestValidateValue:
    """Tests for validate_value."""

    @pytest.mark.parametrize("value", [0, 1, 500, 999, 1000])
    def test_accepts_values_in_range(self, value):
        assert VoteService.validate_value(value) == value

    @pytest.mark.parametrize("value", [-1, 1001, 5000])
    def test_rejects_values_out_of_range(self, value):
        with pytest.raises(ValidationError, match="between 0 and 1000"):
            VoteService.validate_value(value)


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_cast_vote_persists_vote(self, unit_env):
        """Casting should store the vote with its metadata."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        player_id = PlayerId(uuid4())

        # Act
        vote = await vote_service.cast_vote(
            value=42,
            ip_address="203.0.113.9",
            location="Lisbon, Lisbon, Portugal",
            player_id=player_id,
        )

        # Assert
        saved = await vote_repo.find_by_id(vote.id)
        assert saved == vote
        assert saved.value == 42
        assert saved.player_id == player_id
        assert saved.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_cast_vote_rejects_out_of_range(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)

        with pytest.raises(ValidationError):
            await vote_service.cast_vote(value=1001)

        assert await vote_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_ids_are_assigned_in_order(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        first = await vote_service.cast_vote(value=1)
        second = await vote_service.cast_vote(value=2)

        assert second.id > first.id


class TestRateLimits:
    """Tests for check_rate_limits."""

    @pytest.mark.asyncio
    async def test_ip_limit_rejects_extra_vote(self):
        """The (N+1)th vote from one address inside the window is refused."""
        service, repo = make_service(max_votes_per_ip=2, max_votes_per_player=0)
        now = at(12)
        await repo.create(value=1, created_at=now - timedelta(minutes=5), ip_address="198.51.100.7")

        await service.check_rate_limits("198.51.100.7", None, now=now)
        await repo.create(value=2, created_at=now - timedelta(minutes=1), ip_address="198.51.100.7")

        with pytest.raises(RateLimitExceededError) as exc_info:
            await service.check_rate_limits("198.51.100.7", None, now=now)

        assert exc_info.value.scope == "address"
        assert exc_info.value.limit == 2

    @pytest.mark.asyncio
    async def test_player_limit_rejects_extra_vote(self):
        service, repo = make_service(max_votes_per_ip=0, max_votes_per_player=1)
        player_id = PlayerId(uuid4())
        now = at(12)
        await repo.create(value=1, created_at=now - timedelta(minutes=5), player_id=player_id)

        with pytest.raises(RateLimitExceededError) as exc_info:
            await service.check_rate_limits(None, player_id, now=now)

        assert exc_info.value.scope == "player"

    @pytest.mark.asyncio
    async def test_votes_outside_window_are_not_counted(self):
        service, repo = make_service(max_votes_per_ip=1, max_votes_per_player=1)
        player_id = PlayerId(uuid4())
        now = at(12)
        await repo.create(
            value=1,
            created_at=now - timedelta(hours=2),
            ip_address="198.51.100.7",
            player_id=player_id,
        )

        # No exception: the old vote has left the window
        await service.check_rate_limits("198.51.100.7", player_id, now=now)

    @pytest.mark.asyncio
    async def test_other_clients_are_not_affected(self):
        service, repo = make_service(max_votes_per_ip=1, max_votes_per_player=1)
        now = at(12)
        await repo.create(
            value=1,
            created_at=now,
            ip_address="198.51.100.7",
            player_id=PlayerId(uuid4()),
        )

        await service.check_rate_limits("198.51.100.8", PlayerId(uuid4()), now=now)

    @pytest.mark.asyncio
    async def test_zero_limit_disables_check(self):
        service, repo = make_service(max_votes_per_ip=0, max_votes_per_player=0)
        player_id = PlayerId(uuid4())
        now = at(12)
        for _ in range(5):
            await repo.create(
                value=1, created_at=now, ip_address="198.51.100.7", player_id=player_id
            )

        await service.check_rate_limits("198.51.100.7", player_id, now=now)


class TestDeleteVote:
    """Tests for delete_vote."""

    @pytest.mark.asyncio
    async def test_delete_existing_vote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        vote = await vote_service.cast_vote(value=10)

        await vote_service.delete_vote(vote.id)

        assert await vote_repo.find_by_id(vote.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_vote_raises(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.delete_vote(VoteId(404))


class TestGetRecentVotes:
    """Tests for get_recent_votes."""

    @pytest.mark.asyncio
    async def test_newest_first(self):
        service, repo = make_service()
        for hour in (9, 15, 12):
            await repo.create(value=hour, created_at=at(hour))

        votes = await service.get_recent_votes(limit=2)

        assert [v.value for v in votes] == [15, 12]
