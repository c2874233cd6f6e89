"""Loading configuration from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from release_plan.config.models import StrategyConfig
from release_plan.exceptions import ConfigNotFoundError, ConfigValidationError

TOOL_TABLE = "release-plan"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or any of its parents.

    Args:
        start: Directory to search from (defaults to cwd)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_release_plan_config(data: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.release-plan]`` table, or an empty dict."""
    return data.get("tool", {}).get(TOOL_TABLE, {})


def load_config(path: Path | None = None) -> StrategyConfig:
    """Load and validate the strategy configuration.

    Args:
        path: pyproject.toml file or a directory to search from

    Returns:
        Validated configuration (defaults if the table is absent)

    Raises:
        ConfigNotFoundError: If pyproject.toml cannot be found
        ConfigValidationError: If the configuration is invalid
    """
    if path is not None and path.is_file():
        pyproject_path = path
    else:
        pyproject_path = find_pyproject_toml(path)

    raw = extract_release_plan_config(load_pyproject_toml(pyproject_path))
    try:
        return StrategyConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_TABLE}] in {pyproject_path}:\n{e}") from e
