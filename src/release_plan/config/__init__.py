"""Configuration management for release-plan."""

from __future__ import annotations

from release_plan.config.loader import load_config
from release_plan.config.models import (
    ExtraFile,
    PlainExtraFile,
    RepositoryConfig,
    StrategyConfig,
    StructuredExtraFile,
    VersioningConfig,
)

__all__ = [
    "ExtraFile",
    "PlainExtraFile",
    "RepositoryConfig",
    "StrategyConfig",
    "StructuredExtraFile",
    "VersioningConfig",
    "load_config",
]
