"""Release strategies."""

from __future__ import annotations

from release_plan.strategies.base import BuildUpdatesOptions, ReleaseStrategy, add_path
from release_plan.strategies.java_yoshi import JavaYoshiStrategy

__all__ = [
    "BuildUpdatesOptions",
    "JavaYoshiStrategy",
    "ReleaseStrategy",
    "add_path",
]
