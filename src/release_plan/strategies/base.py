"""Release strategy interface.

A release strategy knows how one ecosystem lays out its version files.
Strategies are chosen at configuration time and composed with a hosting
backend, a manifest codec and a versioning strategy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from release_plan.core.commits import ConventionalCommit
    from release_plan.core.version import Version, VersionsMap
    from release_plan.update import Update


@dataclass(frozen=True)
class BuildUpdatesOptions:
    """Release context handed to :meth:`ReleaseStrategy.build_updates`."""

    new_version: Version
    versions_map: VersionsMap
    is_snapshot: bool = False
    changelog_entry: str = ""


@runtime_checkable
class ReleaseStrategy(Protocol):
    """Capabilities a release cycle needs from a strategy."""

    async def post_process_commits(
        self, commits: Sequence[ConventionalCommit]
    ) -> list[ConventionalCommit]: ...

    async def needs_snapshot(self) -> bool: ...

    async def build_versions_map(self) -> VersionsMap: ...

    async def update_versions_map(
        self, versions_map: VersionsMap, commits: Sequence[ConventionalCommit]
    ) -> VersionsMap: ...

    async def build_updates(self, options: BuildUpdatesOptions) -> list[Update]: ...

    def initial_release_version(self) -> Version: ...


def add_path(root: str | None, file: str) -> str:
    """Join a module root and a repository file path.

    >>> add_path(".", "/pom.xml")
    'pom.xml'
    >>> add_path("java-core/", "versions.txt")
    'java-core/versions.txt'
    """
    file = file.lstrip("/\\")
    if root is None or root == ".":
        return file
    return f"{root.rstrip('/')}/{file}"
