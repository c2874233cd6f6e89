"""Release cycle orchestration.

Runs one release cycle against a strategy: normalize commits, decide
between a snapshot and a final release, bump the versions map and build
the list of file edits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from release_plan.core.versioning import JavaSnapshotStrategy
from release_plan.exceptions import ReleasePlanError
from release_plan.strategies.base import BuildUpdatesOptions

if TYPE_CHECKING:
    from collections.abc import Sequence

    from release_plan.core.commits import ConventionalCommit
    from release_plan.core.version import Version, VersionsMap
    from release_plan.core.versioning import VersioningStrategy
    from release_plan.strategies.base import ReleaseStrategy
    from release_plan.update import Update

logger = structlog.get_logger(__name__)


@dataclass
class ReleasePlan:
    """Outcome of a release cycle."""

    new_version: Version
    versions_map: VersionsMap
    is_snapshot: bool
    updates: list[Update] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [update.path for update in self.updates]


async def _snapshot_versions(
    versions_map: VersionsMap,
    commits: Sequence[ConventionalCommit],
    snapshot_strategy: VersioningStrategy,
) -> VersionsMap:
    for key, version in versions_map.items():
        if version is None:
            continue
        versions_map[key] = await snapshot_strategy.bump(version, commits)
    return versions_map


def _primary_version(
    versions_map: VersionsMap, primary_artifact: str | None, fallback: Version
) -> Version:
    if primary_artifact is None:
        return next((v for v in versions_map.values() if v is not None), fallback)
    if primary_artifact not in versions_map:
        raise ReleasePlanError(f"Primary artifact '{primary_artifact}' is not in versions.txt")
    version = versions_map[primary_artifact]
    if version is None:
        raise ReleasePlanError(f"Primary artifact '{primary_artifact}' has no version")
    return version


async def build_release_plan(
    strategy: ReleaseStrategy,
    commits: Sequence[ConventionalCommit],
    changelog_entry: str = "",
    *,
    primary_artifact: str | None = None,
    snapshot_strategy: VersioningStrategy | None = None,
) -> ReleasePlan:
    """Compute the next versions and the edits that apply them.

    Args:
        strategy: Release strategy for the module being released
        commits: Commits since the last release, already parsed
        changelog_entry: Rendered changelog text for this release
        primary_artifact: Artifact whose version names the release
            (defaults to the first manifest entry)
        snapshot_strategy: Versioning used for snapshot releases

    Returns:
        The release plan

    Raises:
        MissingRequiredFileError: If the versions manifest is missing
        ReleasePlanError: If ``primary_artifact`` is not in the manifest
    """
    commits = await strategy.post_process_commits(commits)
    is_snapshot = await strategy.needs_snapshot()
    versions_map = await strategy.build_versions_map()

    if is_snapshot:
        versions_map = await _snapshot_versions(
            versions_map, commits, snapshot_strategy or JavaSnapshotStrategy()
        )
    else:
        versions_map = await strategy.update_versions_map(versions_map, commits)

    new_version = _primary_version(
        versions_map, primary_artifact, strategy.initial_release_version()
    )
    updates = await strategy.build_updates(
        BuildUpdatesOptions(
            new_version=new_version,
            versions_map=versions_map,
            is_snapshot=is_snapshot,
            changelog_entry=changelog_entry,
        )
    )

    logger.info(
        "release_plan_built",
        version=str(new_version),
        snapshot=is_snapshot,
        artifacts=len(versions_map),
        updates=len(updates),
    )
    return ReleasePlan(
        new_version=new_version,
        versions_map=versions_map,
        is_snapshot=is_snapshot,
        updates=updates,
    )
