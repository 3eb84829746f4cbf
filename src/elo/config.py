"""Load Elo system definitions from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from elo.calculator import DEFAULT_D_VALUE, EloCalculator, EloParameters
from elo.common import TeamSizePolicy
from elo.config_base import BaseSystemConfig, load_system_configs
from elo.k_factor import DEFAULT_K_FACTOR, build_k_factor
from elo.s_value import build_s_value

DEFAULT_PRECISION = 2
DEFAULT_CONFIG_DIR = Path(str(resources.files("elo").joinpath("configs")))


@dataclass(frozen=True)
class EloSystemConfig(BaseSystemConfig):
    """Configuration for one named Elo calculator."""

    d_value: float
    k_factor: str
    k_value: float
    s_value: str
    team_size_policy: TeamSizePolicy
    precision: int

    def parameters(self) -> EloParameters:
        return EloParameters(
            d_value=self.d_value,
            k_factor=build_k_factor(self.k_factor, self.k_value),
            s_value=build_s_value(self.s_value),
            team_size_policy=self.team_size_policy,
        )

    def create_calculator(self) -> EloCalculator:
        return EloCalculator(self.parameters())

    def as_config_json(self) -> dict[str, Any]:
        return {
            "d_value": self.d_value,
            "k_factor": self.k_factor,
            "k_value": self.k_value,
            "s_value": self.s_value,
            "team_size_policy": self.team_size_policy.value,
            "precision": self.precision,
        }


def load_elo_system_configs(config_dir: Path) -> list[EloSystemConfig]:
    """Load and validate all Elo system TOML config files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_elo_system_config,
        duplicate_name_label="elo",
    )


def _parse_elo_system_config(raw: dict[str, Any], file_path: Path) -> EloSystemConfig:
    system_raw = raw.get("system", {})
    elo_raw = raw.get("elo", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    team_size_value = str(elo_raw.get("team_size_policy", TeamSizePolicy.ALLOW.value)).lower()
    try:
        team_size_policy = TeamSizePolicy(team_size_value)
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in TeamSizePolicy)
        raise ValueError(
            f"{file_path}: [elo].team_size_policy must be one of {choices}"
        ) from exc

    config = EloSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        d_value=float(elo_raw.get("d_value", DEFAULT_D_VALUE)),
        k_factor=str(elo_raw.get("k_factor", "constant")).strip().lower(),
        k_value=float(elo_raw.get("k_value", DEFAULT_K_FACTOR)),
        s_value=str(elo_raw.get("s_value", "linear")).strip().lower(),
        team_size_policy=team_size_policy,
        precision=int(elo_raw.get("precision", DEFAULT_PRECISION)),
    )
    _validate_config(file_path=file_path, config=config)
    return config


def _validate_config(*, file_path: Path, config: EloSystemConfig) -> None:
    if config.d_value <= 0.0:
        raise ValueError(f"{file_path}: [elo].d_value must be > 0")
    if config.k_value <= 0.0:
        raise ValueError(f"{file_path}: [elo].k_value must be > 0")
    if config.precision < 0:
        raise ValueError(f"{file_path}: [elo].precision must be >= 0")
    try:
        config.parameters()
    except ValueError as exc:
        raise ValueError(f"{file_path}: {exc}") from exc


__all__ = ["DEFAULT_CONFIG_DIR", "EloSystemConfig", "load_elo_system_configs"]
