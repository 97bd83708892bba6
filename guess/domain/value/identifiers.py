"""Strongly typed identifiers for game entities.

Vote and constraint ids are integers assigned by the store in insertion
order. Player ids are UUIDs minted by the API and kept in a cookie.
"""

from typing import NewType
from uuid import UUID

VoteId = NewType("VoteId", int)
ConstraintId = NewType("ConstraintId", int)
PlayerId = NewType("PlayerId", UUID)
