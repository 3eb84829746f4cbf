"""Split a team-level Elo increment across the members of the team."""

from __future__ import annotations

import logging
from typing import Sequence

from elo.exceptions import InvalidPartiesError

logger = logging.getLogger(__name__)


def _proportional_share(numerator: int, denominator: int, total_increment: int) -> int:
    # floor when gaining, ceil when losing
    if total_increment >= 0:
        return (numerator * total_increment) // denominator
    return -((-numerator * total_increment) // denominator)


def redistribute_increment(total_increment: int, ratings: Sequence[int]) -> list[int]:
    """Return per-member increments that sum exactly to ``total_increment``.

    Members are ordered ascending by rating for a gain and descending for a
    loss, so sorted position 0 always takes the smallest provisional change.
    Position ``i`` then receives the share of the rating mirrored across the
    order (``len - 1 - i``) on a gain, or its own rating on a loss. Shares are
    floored on a gain and ceiled on a loss; the units lost to rounding are
    handed out round-robin from position 0. Results come back in input order.
    """
    if not ratings:
        raise InvalidPartiesError("Cannot redistribute an increment across an empty team")

    gained = total_increment >= 0
    ordered = sorted(
        ((rating, index) for index, rating in enumerate(ratings)),
        key=lambda item: item[0],
        reverse=not gained,
    )
    ordered_ratings = [rating for rating, _ in ordered]
    rating_sum = sum(ordered_ratings)
    count = len(ordered_ratings)

    increments = [0] * count
    remainder = total_increment
    for position in range(count):
        if rating_sum == 0:
            numerator, denominator = 1, count
        else:
            source = count - 1 - position if gained else position
            numerator, denominator = ordered_ratings[source], rating_sum
        share = _proportional_share(numerator, denominator, total_increment)
        increments[position] = share
        remainder -= share

    position = 0
    while remainder != 0:
        step = 1 if gained else -1
        increments[position % count] += step
        remainder -= step
        position += 1

    result = [0] * count
    for (_, original_index), increment in zip(ordered, increments):
        result[original_index] = increment

    logger.debug(
        "Redistributed increment=%d ratings=%s shares=%s", total_increment, list(ratings), result
    )
    return result


def apply_team_increment(total_increment: int, ratings: Sequence[int]) -> list[int]:
    """Return the team's new ratings after redistributing ``total_increment``."""
    shares = redistribute_increment(total_increment, ratings)
    return [rating + share for rating, share in zip(ratings, shares)]


__all__ = ["apply_team_increment", "redistribute_increment"]
