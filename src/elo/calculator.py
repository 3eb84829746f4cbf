"""Elo rating updates for pairwise, free-for-all and team matches."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from elo.common import Team, TeamSizePolicy, outcome_for_party, truncated_average
from elo.exceptions import InvalidOutcomeError, InvalidPartiesError, TeamLengthMismatchError
from elo.k_factor import ConstantKFactor
from elo.protocol import KFactorCalculator, SValueCalculator
from elo.redistribution import apply_team_increment
from elo.s_value import LinearSValue

logger = logging.getLogger(__name__)

DEFAULT_D_VALUE = 400.0

# Pairwise outcome codes: 0 = A wins, 1 = B wins, 2 = draw.
PAIRWISE_OUTCOMES = (0, 1, 2)


@dataclass(frozen=True)
class EloParameters:
    d_value: float = DEFAULT_D_VALUE
    k_factor: KFactorCalculator = field(default_factory=ConstantKFactor)
    s_value: SValueCalculator = field(default_factory=LinearSValue)
    team_size_policy: TeamSizePolicy = TeamSizePolicy.ALLOW

    def __post_init__(self) -> None:
        if self.d_value <= 0.0:
            raise ValueError(f"d_value must be > 0, got {self.d_value}")


def _round_half_away_from_zero(value: float, precision: int) -> float:
    if precision == 0:
        return value
    scale = 10.0 ** precision
    scaled = value * scale
    return math.trunc(scaled + math.copysign(0.5, scaled)) / scale


def calculate_expected_score(
    rating: float,
    opponent_rating: float,
    d_value: float = DEFAULT_D_VALUE,
    precision: int = 0,
) -> float:
    """Compute the Elo expected score for one side.

    ``precision`` rounds to that many decimals (half away from zero); 0 keeps
    the raw value.
    """
    expected = 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / d_value))
    return _round_half_away_from_zero(expected, precision)


class EloCalculator:
    """Stateless Elo calculator over caller-supplied integer ratings."""

    def __init__(self, params: EloParameters | None = None) -> None:
        self.params = params or EloParameters()

    def expected_score(self, rating_a: int, rating_b: int, precision: int = 0) -> float:
        return calculate_expected_score(
            rating=rating_a,
            opponent_rating=rating_b,
            d_value=self.params.d_value,
            precision=precision,
        )

    def increment(
        self,
        rating: int,
        reference_rating: int,
        party_count: int,
        achieved_score: float,
        *,
        modifier: float = 1.0,
        reference_modifier: float = 1.0,
    ) -> int:
        """Signed rating change for one party against a reference rating.

        The K-factor term is truncated toward zero and multiplied by the number
        of opponents. ``modifier``/``reference_modifier`` scale the two ratings
        fed to the expected score only; the K-factor always sees ``rating``.
        """
        scaled_rating = rating if modifier == 1.0 else math.trunc(rating * modifier)
        scaled_reference = (
            reference_rating
            if reference_modifier == 1.0
            else math.trunc(reference_rating * reference_modifier)
        )
        expected = calculate_expected_score(
            rating=scaled_rating,
            opponent_rating=scaled_reference,
            d_value=self.params.d_value,
        )
        k_factor = self.params.k_factor.k_factor(rating)
        delta = math.trunc(k_factor * (achieved_score - expected)) * (party_count - 1)
        logger.debug(
            "rating=%d reference=%d expected=%.6f score=%.4f k=%.2f increment=%d",
            rating,
            reference_rating,
            expected,
            achieved_score,
            k_factor,
            delta,
        )
        return delta

    def pairwise_update(self, rating_a: int, rating_b: int, outcome: int) -> tuple[int, int]:
        """New ratings for a two-party match.

        ``outcome`` is 0 when A wins, 1 when B wins and 2 for a draw.
        """
        if outcome not in PAIRWISE_OUTCOMES:
            raise InvalidOutcomeError(
                f"outcome={outcome} is invalid, must be 0, 1 or 2", outcome=outcome
            )

        s_value = self.params.s_value
        score_a = s_value.s_value(2, outcome_for_party(0, outcome, 2))
        score_b = s_value.s_value(2, outcome_for_party(1, outcome, 2))

        new_a = rating_a + self.increment(rating_a, rating_b, 2, score_a)
        new_b = rating_b + self.increment(rating_b, rating_a, 2, score_b)
        return new_a, new_b

    def multi_party_update(self, ratings: Sequence[int], winner_index: int) -> list[int]:
        """New ratings for a free-for-all match.

        Each party is rated against the average of everyone else.
        ``winner_index == len(ratings)`` is a draw among all parties.
        """
        party_count = len(ratings)
        if party_count < 2:
            raise InvalidPartiesError(
                f"A free-for-all needs at least 2 parties, got {party_count}",
                outcome=winner_index,
            )
        self._validate_winner_index(winner_index, party_count)

        new_ratings: list[int] = []
        for index, rating in enumerate(ratings):
            reference = truncated_average([*ratings[:index], *ratings[index + 1 :]])
            score = self.params.s_value.s_value(
                party_count,
                outcome_for_party(index, winner_index, party_count),
            )
            new_ratings.append(rating + self.increment(rating, reference, party_count, score))
        return new_ratings

    def team_update(self, teams: Sequence[Team], winner_index: int) -> list[list[int]]:
        """New member ratings for a match between two or more teams.

        Every team is reduced to the average of its members and rated against
        the average of the other teams. The team increment is then split across
        members by ``apply_team_increment``.
        """
        team_count = len(teams)
        if team_count < 2:
            raise InvalidPartiesError(
                f"A team match needs at least 2 teams, got {team_count}",
                outcome=winner_index,
            )
        for team_index, team in enumerate(teams):
            if not team:
                raise InvalidPartiesError(
                    f"team_index={team_index} has no members",
                    outcome=winner_index,
                )
        self._validate_winner_index(winner_index, team_count)

        team_sizes = [len(team) for team in teams]
        if self.params.team_size_policy == TeamSizePolicy.REJECT and len(set(team_sizes)) > 1:
            raise TeamLengthMismatchError(
                f"Team sizes differ: {team_sizes}",
                team_sizes=team_sizes,
            )

        aggregates = [truncated_average(team) for team in teams]
        new_teams: list[list[int]] = []
        for team_index, team in enumerate(teams):
            reference = truncated_average(
                [*aggregates[:team_index], *aggregates[team_index + 1 :]]
            )
            modifier, reference_modifier = self._size_modifiers(team_index, team_sizes)
            score = self.params.s_value.s_value(
                team_count,
                outcome_for_party(team_index, winner_index, team_count),
            )
            team_increment = self.increment(
                aggregates[team_index],
                reference,
                team_count,
                score,
                modifier=modifier,
                reference_modifier=reference_modifier,
            )
            new_teams.append(apply_team_increment(team_increment, team))
        return new_teams

    def _size_modifiers(self, team_index: int, team_sizes: list[int]) -> tuple[float, float]:
        if self.params.team_size_policy != TeamSizePolicy.SCALE:
            return 1.0, 1.0

        other_sizes = [*team_sizes[:team_index], *team_sizes[team_index + 1 :]]
        other_mean = sum(other_sizes) / len(other_sizes)
        own_size = team_sizes[team_index]
        return own_size / other_mean, other_mean / own_size

    @staticmethod
    def _validate_winner_index(winner_index: int, party_count: int) -> None:
        if winner_index < 0 or winner_index > party_count:
            raise InvalidOutcomeError(
                f"winner_index={winner_index} is invalid, must be between 0 and {party_count}",
                outcome=winner_index,
            )


def create_calculator(
    d_value: float,
    s_value: SValueCalculator,
    k_factor: KFactorCalculator,
    *,
    team_size_policy: TeamSizePolicy = TeamSizePolicy.ALLOW,
) -> EloCalculator:
    """Create a calculator from explicit policies."""
    return EloCalculator(
        EloParameters(
            d_value=d_value,
            k_factor=k_factor,
            s_value=s_value,
            team_size_policy=team_size_policy,
        )
    )


def create_default_calculator() -> EloCalculator:
    """D-value 400, linear S-values and a constant K-factor of 32."""
    return EloCalculator(EloParameters())


__all__ = [
    "DEFAULT_D_VALUE",
    "EloCalculator",
    "EloParameters",
    "PAIRWISE_OUTCOMES",
    "calculate_expected_score",
    "create_calculator",
    "create_default_calculator",
]
