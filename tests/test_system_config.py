"""Tests for TOML-based Elo system config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from elo.common import TeamSizePolicy
from elo.config import DEFAULT_CONFIG_DIR, load_elo_system_configs
from elo.config_base import find_system_config
from elo.k_factor import ConstantKFactor, FIDESimplifiedKFactor, USCFKFactor
from elo.s_value import LinearSValue


def test_load_elo_system_configs_from_directory(tmp_path: Path) -> None:
    config_path = tmp_path / "default.toml"
    config_path.write_text(
        """
[system]
name = "system_a"
description = "A test system"

[elo]
d_value = 420.0
k_factor = "constant"
k_value = 24.0
s_value = "linear"
team_size_policy = "reject"
precision = 3
""".strip()
    )

    configs = load_elo_system_configs(tmp_path)
    assert len(configs) == 1

    system = configs[0]
    assert system.name == "system_a"
    assert system.description == "A test system"
    assert system.file_path == config_path
    assert system.d_value == pytest.approx(420.0)
    assert system.k_value == pytest.approx(24.0)
    assert system.team_size_policy == TeamSizePolicy.REJECT
    assert system.precision == 3

    parameters = system.parameters()
    assert parameters.d_value == pytest.approx(420.0)
    assert parameters.k_factor == ConstantKFactor(24.0)
    assert parameters.s_value == LinearSValue()
    assert parameters.team_size_policy == TeamSizePolicy.REJECT

    assert system.as_config_json() == {
        "d_value": 420.0,
        "k_factor": "constant",
        "k_value": 24.0,
        "s_value": "linear",
        "team_size_policy": "reject",
        "precision": 3,
    }


def test_missing_elo_section_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "minimal.toml").write_text('[system]\nname = "minimal"\n')

    system = load_elo_system_configs(tmp_path)[0]
    assert system.description is None
    assert system.d_value == pytest.approx(400.0)
    assert system.k_factor == "constant"
    assert system.k_value == pytest.approx(32.0)
    assert system.team_size_policy == TeamSizePolicy.ALLOW
    assert system.precision == 2
    assert system.create_calculator().pairwise_update(1500, 1500, 0) == (1516, 1484)


def test_name_is_required(tmp_path: Path) -> None:
    (tmp_path / "bad.toml").write_text("[elo]\nk_value = 24.0\n")
    with pytest.raises(ValueError, match=r"\[system\].name is required"):
        load_elo_system_configs(tmp_path)


@pytest.mark.parametrize(
    ("elo_section", "message"),
    [
        ("d_value = 0.0", r"d_value must be > 0"),
        ("k_value = -1.0", r"k_value must be > 0"),
        ("precision = -1", r"precision must be >= 0"),
        ('k_factor = "glicko"', r"Unknown k_factor policy"),
        ('s_value = "margin"', r"Unknown s_value policy"),
        ('team_size_policy = "shrink"', r"team_size_policy must be one of"),
    ],
)
def test_invalid_values_are_rejected(tmp_path: Path, elo_section: str, message: str) -> None:
    (tmp_path / "bad.toml").write_text(f'[system]\nname = "bad"\n\n[elo]\n{elo_section}\n')
    with pytest.raises(ValueError, match=message):
        load_elo_system_configs(tmp_path)


def test_duplicate_names_are_rejected(tmp_path: Path) -> None:
    (tmp_path / "a.toml").write_text('[system]\nname = "same"\n')
    (tmp_path / "b.toml").write_text('[system]\nname = "same"\n')
    with pytest.raises(ValueError, match="Duplicate elo system names"):
        load_elo_system_configs(tmp_path)


def test_missing_directory_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_elo_system_configs(tmp_path / "missing")


def test_empty_directory_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="No .toml config files"):
        load_elo_system_configs(tmp_path)


def test_shipped_configs_load() -> None:
    systems = load_elo_system_configs(DEFAULT_CONFIG_DIR)
    assert [system.name for system in systems] == [
        "elo_default",
        "elo_fide_simplified",
        "elo_uscf",
    ]

    fide = find_system_config(systems, "elo_fide_simplified")
    assert isinstance(fide.parameters().k_factor, FIDESimplifiedKFactor)
    assert fide.team_size_policy == TeamSizePolicy.SCALE

    uscf = find_system_config(systems, "elo_uscf")
    assert isinstance(uscf.parameters().k_factor, USCFKFactor)
    assert uscf.create_calculator().pairwise_update(2200, 1900, 2) == (2192, 1911)


def test_default_config_dir_lives_inside_the_package() -> None:
    import elo

    package_dir = Path(elo.__file__).resolve().parent
    assert DEFAULT_CONFIG_DIR.resolve() == package_dir / "configs"
    assert sorted(path.name for path in DEFAULT_CONFIG_DIR.glob("*.toml")) == [
        "default.toml",
        "fide_simplified.toml",
        "uscf.toml",
    ]


def test_find_system_config_reports_available_names() -> None:
    systems = load_elo_system_configs(DEFAULT_CONFIG_DIR)
    with pytest.raises(KeyError, match="elo_default"):
        find_system_config(systems, "missing")
