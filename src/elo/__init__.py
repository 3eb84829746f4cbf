"""Elo calculation modules."""

from elo.calculator import (
    DEFAULT_D_VALUE,
    EloCalculator,
    EloParameters,
    calculate_expected_score,
    create_calculator,
    create_default_calculator,
)
from elo.common import Outcome, TeamSizePolicy
from elo.config import EloSystemConfig, load_elo_system_configs
from elo.exceptions import (
    EloError,
    InvalidOutcomeError,
    InvalidPartiesError,
    TeamLengthMismatchError,
)
from elo.k_factor import ConstantKFactor, FIDESimplifiedKFactor, USCFKFactor, build_k_factor
from elo.protocol import KFactorCalculator, SValueCalculator
from elo.redistribution import apply_team_increment, redistribute_increment
from elo.s_value import LinearSValue, build_s_value

__all__ = [
    "DEFAULT_D_VALUE",
    "ConstantKFactor",
    "EloCalculator",
    "EloError",
    "EloParameters",
    "EloSystemConfig",
    "FIDESimplifiedKFactor",
    "InvalidOutcomeError",
    "InvalidPartiesError",
    "KFactorCalculator",
    "LinearSValue",
    "Outcome",
    "SValueCalculator",
    "TeamLengthMismatchError",
    "TeamSizePolicy",
    "USCFKFactor",
    "apply_team_increment",
    "build_k_factor",
    "build_s_value",
    "calculate_expected_score",
    "create_calculator",
    "create_default_calculator",
    "load_elo_system_configs",
    "redistribute_increment",
]
