"""Shared types for match rating updates."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

Team = Sequence[int]


class Outcome(str, Enum):
    """Result of a match from the point of view of one party."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class TeamSizePolicy(str, Enum):
    """How team matches with uneven member counts are rated."""

    ALLOW = "allow"
    REJECT = "reject"
    SCALE = "scale"


def outcome_for_party(party_index: int, winner_index: int, party_count: int) -> Outcome:
    """Translate a winner index into the outcome seen by one party.

    A winner index equal to ``party_count`` means every party drew.
    """
    if winner_index == party_count:
        return Outcome.DRAW
    if winner_index == party_index:
        return Outcome.WIN
    return Outcome.LOSS


def truncated_average(values: Sequence[int]) -> int:
    """Integer mean of ``values`` truncated toward zero."""
    total = sum(values)
    count = len(values)
    if total < 0:
        return -(-total // count)
    return total // count


__all__ = ["Outcome", "Team", "TeamSizePolicy", "outcome_for_party", "truncated_average"]
