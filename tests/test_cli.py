"""CLI command tests."""

from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from elo.cli import app
from elo.config import DEFAULT_CONFIG_DIR

runner = CliRunner()


def test_expected_uses_default_precision() -> None:
    result = runner.invoke(app, ["expected", "1000", "1500"])
    assert result.exit_code == 0
    assert "expected_score=0.05" in result.stdout


def test_expected_with_explicit_precision() -> None:
    result = runner.invoke(app, ["expected", "1000", "1500", "--precision", "3"])
    assert result.exit_code == 0
    assert "expected_score=0.053" in result.stdout


def test_pairwise() -> None:
    result = runner.invoke(app, ["pairwise", "1500", "1500", "--outcome", "0"])
    assert result.exit_code == 0
    assert "rating_a=1516 rating_b=1484" in result.stdout


def test_pairwise_invalid_outcome_is_a_usage_error() -> None:
    result = runner.invoke(app, ["pairwise", "1500", "1500", "--outcome", "3"])
    assert result.exit_code == 2


def test_pairwise_with_configured_system() -> None:
    result = runner.invoke(
        app,
        [
            "pairwise",
            "2200",
            "1900",
            "--outcome",
            "2",
            "--config-dir",
            str(DEFAULT_CONFIG_DIR),
            "--system-name",
            "elo_uscf",
        ],
    )
    assert result.exit_code == 0
    assert "rating_a=2192 rating_b=1911" in result.stdout


def test_unknown_system_name_is_a_usage_error() -> None:
    result = runner.invoke(
        app,
        [
            "pairwise",
            "1500",
            "1500",
            "--outcome",
            "0",
            "--config-dir",
            str(DEFAULT_CONFIG_DIR),
            "--system-name",
            "nope",
        ],
    )
    assert result.exit_code == 2


def test_multi() -> None:
    result = runner.invoke(app, ["multi", "1600", "1500", "1400", "--winner", "2"])
    assert result.exit_code == 0
    assert "ratings=1556,1468,1444" in result.stdout


def test_teams() -> None:
    result = runner.invoke(
        app,
        ["teams", "--team", "1500,1800", "--team", "1400,1600", "--winner", "0"],
    )
    assert result.exit_code == 0
    assert "team_0=1505,1804" in result.stdout
    assert "team_1=1396,1595" in result.stdout


def test_teams_rejects_non_integer_ratings() -> None:
    result = runner.invoke(
        app,
        ["teams", "--team", "1500,abc", "--team", "1400,1600", "--winner", "0"],
    )
    assert result.exit_code == 2


def test_system_name_resolves_against_packaged_configs() -> None:
    result = runner.invoke(app, ["expected", "1000", "1500", "--system-name", "elo_uscf"])
    assert result.exit_code == 0
    assert "expected_score=0.053" in result.stdout


def test_verbose_logs_selected_system_parameters(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="elo.cli")
    result = runner.invoke(
        app,
        ["--verbose", "pairwise", "1500", "1500", "--outcome", "0", "--system-name", "elo_uscf"],
    )
    assert result.exit_code == 0
    assert "system=elo_uscf" in caplog.text
    assert "'k_factor': 'uscf'" in caplog.text
    assert "'team_size_policy': 'reject'" in caplog.text
