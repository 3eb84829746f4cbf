"""Protocols for pluggable Elo policies."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from elo.common import Outcome


@runtime_checkable
class KFactorCalculator(Protocol):
    """Maps a rating to the maximum adjustment one match can apply."""

    def k_factor(self, rating: int) -> float: ...


@runtime_checkable
class SValueCalculator(Protocol):
    """Maps an outcome to the achieved score used in the update formula."""

    def s_value(self, party_count: int, outcome: Outcome) -> float: ...


__all__ = ["KFactorCalculator", "SValueCalculator"]
