"""release-plan: version bumps and release edit plans for multi-artifact projects."""

from __future__ import annotations

from release_plan.plan import ReleasePlan, build_release_plan
from release_plan.strategies import BuildUpdatesOptions, JavaYoshiStrategy, ReleaseStrategy
from release_plan.update import Update

__version__ = "0.1.0"

__all__ = [
    "BuildUpdatesOptions",
    "JavaYoshiStrategy",
    "ReleasePlan",
    "ReleaseStrategy",
    "Update",
    "__version__",
    "build_release_plan",
]
