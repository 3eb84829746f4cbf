"""S-value policies."""

from __future__ import annotations

from dataclasses import dataclass

from elo.common import Outcome
from elo.protocol import SValueCalculator


@dataclass(frozen=True)
class LinearSValue:
    """1 for a win, 0 for a loss, an even share of the point for a draw."""

    def s_value(self, party_count: int, outcome: Outcome) -> float:
        if outcome == Outcome.WIN:
            return 1.0
        if outcome == Outcome.LOSS:
            return 0.0
        return 1.0 / party_count


def build_s_value(name: str) -> SValueCalculator:
    """Create an S-value policy from its config name."""
    if name.strip().lower() == "linear":
        return LinearSValue()
    raise ValueError(f"Unknown s_value policy {name!r}. Available: linear")


__all__ = ["LinearSValue", "build_s_value"]
