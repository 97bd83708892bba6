"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase, RecentVote
from .delete_vote import DeleteVoteRequest, DeleteVoteResponse, DeleteVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "RecentVote",
    "DeleteVoteRequest",
    "DeleteVoteResponse",
    "DeleteVoteUseCase",
]
