"""Core business logic for release-plan.

This module contains the fundamental building blocks:
- Version parsing and bumping
- Structured commits, normalization and the 1.0.0 promotion override
- Artifact stability classification
- Pluggable versioning strategies
"""

from __future__ import annotations

from release_plan.core.artifacts import is_stable_artifact
from release_plan.core.commits import (
    FAKE_COMMIT,
    ConventionalCommit,
    Note,
    ensure_non_empty,
    is_promotion_commit,
    is_promotion_note,
    strip_promotion_notes,
)
from release_plan.core.version import BumpType, Version, VersionsMap, parse_version
from release_plan.core.versioning import (
    DefaultVersioningStrategy,
    JavaSnapshotStrategy,
    VersioningStrategy,
    calculate_bump,
)

__all__ = [
    "BumpType",
    "FAKE_COMMIT",
    "ConventionalCommit",
    "DefaultVersioningStrategy",
    "JavaSnapshotStrategy",
    "Note",
    "Version",
    "VersioningStrategy",
    "VersionsMap",
    "calculate_bump",
    "ensure_non_empty",
    "is_promotion_commit",
    "is_promotion_note",
    "is_stable_artifact",
    "parse_version",
    "strip_promotion_notes",
]
