"""Command-line entry points for rating single matches."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from elo.calculator import EloCalculator, create_default_calculator
from elo.config import DEFAULT_CONFIG_DIR, DEFAULT_PRECISION, load_elo_system_configs
from elo.config_base import find_system_config
from elo.exceptions import EloError

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Compute Elo rating updates for a single match.",
)

ConfigDirOption = Annotated[
    Path,
    typer.Option("--config-dir", help="Directory holding Elo system TOML files."),
]
SystemNameOption = Annotated[
    Optional[str],
    typer.Option(
        "--system-name",
        help="Elo system name from [system].name. Uses the default calculator when omitted.",
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log expected scores and increments."),
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_calculator(config_dir: Path, system_name: str | None) -> tuple[EloCalculator, int]:
    if system_name is None:
        return create_default_calculator(), DEFAULT_PRECISION

    try:
        system = find_system_config(load_elo_system_configs(config_dir), system_name)
    except (OSError, KeyError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--system-name") from exc
    logger.debug("system=%s parameters=%s", system.name, system.as_config_json())
    return system.create_calculator(), system.precision


def _parse_team(raw: str) -> list[int]:
    try:
        return [int(value) for value in raw.split(",") if value.strip()]
    except ValueError as exc:
        raise typer.BadParameter(
            f"team {raw!r} must be comma-separated integers", param_hint="--team"
        ) from exc


def _format_ratings(ratings: list[int]) -> str:
    return ",".join(str(rating) for rating in ratings)


@app.command("expected")
def expected_score(
    rating_a: Annotated[int, typer.Argument(help="Rating of party A.")],
    rating_b: Annotated[int, typer.Argument(help="Rating of party B.")],
    precision: Annotated[
        Optional[int],
        typer.Option("--precision", help="Decimals to round to. 0 prints the raw value."),
    ] = None,
    config_dir: ConfigDirOption = DEFAULT_CONFIG_DIR,
    system_name: SystemNameOption = None,
) -> None:
    """Print the expected score of A against B."""
    calculator, system_precision = _load_calculator(config_dir, system_name)
    if precision is not None and precision < 0:
        raise typer.BadParameter("--precision must be >= 0")
    digits = system_precision if precision is None else precision
    typer.echo(f"expected_score={calculator.expected_score(rating_a, rating_b, digits)}")


@app.command("pairwise")
def pairwise(
    rating_a: Annotated[int, typer.Argument(help="Rating of party A.")],
    rating_b: Annotated[int, typer.Argument(help="Rating of party B.")],
    outcome: Annotated[
        int,
        typer.Option("--outcome", help="0 when A wins, 1 when B wins, 2 for a draw."),
    ],
    config_dir: ConfigDirOption = DEFAULT_CONFIG_DIR,
    system_name: SystemNameOption = None,
) -> None:
    """Rate a two-party match."""
    calculator, _ = _load_calculator(config_dir, system_name)
    try:
        new_a, new_b = calculator.pairwise_update(rating_a, rating_b, outcome)
    except EloError as exc:
        raise typer.BadParameter(str(exc), param_hint="--outcome") from exc
    typer.echo(f"rating_a={new_a} rating_b={new_b}")


@app.command("multi")
def multi_party(
    ratings: Annotated[list[int], typer.Argument(help="Ratings of every party.")],
    winner: Annotated[
        int,
        typer.Option("--winner", help="Index of the winner. The party count means a draw."),
    ],
    config_dir: ConfigDirOption = DEFAULT_CONFIG_DIR,
    system_name: SystemNameOption = None,
) -> None:
    """Rate a free-for-all match."""
    calculator, _ = _load_calculator(config_dir, system_name)
    try:
        new_ratings = calculator.multi_party_update(ratings, winner)
    except EloError as exc:
        raise typer.BadParameter(str(exc), param_hint="--winner") from exc
    typer.echo(f"ratings={_format_ratings(new_ratings)}")


@app.command("teams")
def teams(
    team: Annotated[
        list[str],
        typer.Option("--team", help="Comma-separated member ratings. Repeat once per team."),
    ],
    winner: Annotated[
        int,
        typer.Option("--winner", help="Index of the winning team. The team count means a draw."),
    ],
    config_dir: ConfigDirOption = DEFAULT_CONFIG_DIR,
    system_name: SystemNameOption = None,
) -> None:
    """Rate a match between teams."""
    calculator, _ = _load_calculator(config_dir, system_name)
    parsed = [_parse_team(raw) for raw in team]
    try:
        new_teams = calculator.team_update(parsed, winner)
    except EloError as exc:
        raise typer.BadParameter(str(exc)) from exc
    for index, new_team in enumerate(new_teams):
        typer.echo(f"team_{index}={_format_ratings(new_team)}")


if __name__ == "__main__":
    app()
