"""Vote eligibility under admin time constraints.

A vote counts toward the game when:
- no enabled include constraint exists, or its timestamp lies in at least
  one enabled include range, and
- its timestamp lies in no enabled exclude range.

Exclude wins when both kinds cover the same instant. Ranges are inclusive
on both ends and disabled constraints are ignored.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from guess.domain.model import TimeConstraint, Vote
from guess.domain.value import ConstraintKind


def partition_constraints(
    constraints: Iterable[TimeConstraint],
) -> tuple[list[TimeConstraint], list[TimeConstraint]]:
    """Split enabled constraints into includes and excludes.

    Args:
        constraints: All constraints, enabled or not

    Returns:
        Tuple of (includes, excludes)
    """
    includes: list[TimeConstraint] = []
    excludes: list[TimeConstraint] = []
    for constraint in constraints:
        if not constraint.enabled:
            continue
        if constraint.kind == ConstraintKind.INCLUDE:
            includes.append(constraint)
        else:
            excludes.append(constraint)
    return includes, excludes


def _is_eligible(
    timestamp: datetime,
    includes: Sequence[TimeConstraint],
    excludes: Sequence[TimeConstraint],
) -> bool:
    if includes and not any(c.covers(timestamp) for c in includes):
        return False
    return not any(c.covers(timestamp) for c in excludes)


def is_eligible(timestamp: datetime, constraints: Iterable[TimeConstraint]) -> bool:
    """Check whether a vote cast at ``timestamp`` would count.

    Args:
        timestamp: Vote creation time
        constraints: All constraints, enabled or not

    Returns:
        True if the timestamp passes the active constraints
    """
    includes, excludes = partition_constraints(constraints)
    return _is_eligible(timestamp, includes, excludes)


def filter_eligible_votes(
    votes: Iterable[Vote], constraints: Iterable[TimeConstraint]
) -> list[Vote]:
    """Return the votes that count toward the game.

    Input order is preserved.

    Args:
        votes: All recorded votes
        constraints: All constraints, enabled or not

    Returns:
        Eligible votes
    """
    includes, excludes = partition_constraints(constraints)
    return [v for v in votes if _is_eligible(v.created_at, includes, excludes)]
