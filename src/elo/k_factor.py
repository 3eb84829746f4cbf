"""K-factor policies."""

from __future__ import annotations

from dataclasses import dataclass

from elo.protocol import KFactorCalculator

DEFAULT_K_FACTOR = 32.0


@dataclass(frozen=True)
class ConstantKFactor:
    """Same K-factor for every rating."""

    k: float = DEFAULT_K_FACTOR

    def k_factor(self, rating: int) -> float:
        return self.k


@dataclass(frozen=True)
class USCFKFactor:
    """Rating-tiered K-factor used by the USCF."""

    def k_factor(self, rating: int) -> float:
        if rating < 2100:
            return 32.0
        if rating <= 2400:
            return 24.0
        return 16.0


@dataclass(frozen=True)
class FIDESimplifiedKFactor:
    """Rating-tiered K-factor loosely following FIDE brackets."""

    def k_factor(self, rating: int) -> float:
        if rating < 2300:
            return 40.0
        if rating <= 2400:
            return 20.0
        return 10.0


def build_k_factor(name: str, value: float | None = None) -> KFactorCalculator:
    """Create a K-factor policy from its config name."""
    key = name.strip().lower()
    if key == "constant":
        return ConstantKFactor(DEFAULT_K_FACTOR if value is None else float(value))
    if key == "uscf":
        return USCFKFactor()
    if key == "fide_simplified":
        return FIDESimplifiedKFactor()
    raise ValueError(
        f"Unknown k_factor policy {name!r}. Available: constant, fide_simplified, uscf"
    )


__all__ = [
    "DEFAULT_K_FACTOR",
    "ConstantKFactor",
    "FIDESimplifiedKFactor",
    "USCFKFactor",
    "build_k_factor",
]
