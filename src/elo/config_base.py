"""Shared config-loading utilities for rating systems."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar
import tomllib


@dataclass(frozen=True)
class BaseSystemConfig:
    """Metadata shared across all rating-system configs."""

    name: str
    description: str | None
    file_path: Path

    def as_config_json(self) -> dict[str, Any]:
        raise NotImplementedError


T = TypeVar("T", bound=BaseSystemConfig)


def _config_files(config_dir: Path) -> list[Path]:
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    files = sorted(config_dir.glob("*.toml"))
    if not files:
        raise ValueError(f"No .toml config files found in: {config_dir}")
    return files


def load_system_configs(
    config_dir: Path,
    parser: Callable[[dict[str, Any], Path], T],
    *,
    duplicate_name_label: str = "rating",
) -> list[T]:
    """Parse every TOML file in ``config_dir``, in file-name order.

    System names must be unique within the directory.
    """
    systems: list[T] = []
    for file_path in _config_files(config_dir):
        with file_path.open("rb") as file:
            systems.append(parser(tomllib.load(file), file_path))

    name_counts = Counter(system.name for system in systems)
    duplicates = sorted(name for name, count in name_counts.items() if count > 1)
    if duplicates:
        raise ValueError(
            f"Duplicate {duplicate_name_label} system names found in {config_dir}: {duplicates}"
        )
    return systems


def find_system_config(systems: list[T], name: str) -> T:
    """Pick one loaded system by name."""
    by_name = {system.name: system for system in systems}
    try:
        return by_name[name]
    except KeyError as exc:
        available = ", ".join(sorted(by_name))
        raise KeyError(f"No system named {name!r}. Available: {available}") from exc


__all__ = ["BaseSystemConfig", "find_system_config", "load_system_configs"]
