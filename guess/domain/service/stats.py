"""Game statistics over eligible votes.

The target is half the average of all eligible values. Every vote at the
minimum distance from the target wins, so ties produce several winners.
"""

from collections.abc import Sequence

from guess.domain.model import Vote
from guess.domain.value import GameStats, VoteId


def compute_game_stats(
    eligible_votes: Sequence[Vote], target_vote_id: VoteId | None = None
) -> GameStats:
    """Reduce eligible votes to average, target and winner status.

    Args:
        eligible_votes: Votes that passed the eligibility filter
        target_vote_id: Vote whose winner status is reported

    Returns:
        Game statistics. With no eligible votes, average and target are
        None, is_winner is False and total_votes is 0.
    """
    if not eligible_votes:
        return GameStats()

    total_votes = len(eligible_votes)
    average = sum(v.value for v in eligible_votes) / total_votes
    target = average / 2

    distances = [(v.id, abs(v.value - target)) for v in eligible_votes]
    min_distance = min(d for _, d in distances)
    winner_ids = [vote_id for vote_id, d in distances if d == min_distance]

    return GameStats(
        average=average,
        target=target,
        is_winner=target_vote_id is not None and target_vote_id in winner_ids,
        total_votes=total_votes,
        winner_ids=winner_ids,
    )
