"""Planned file edits.

An :class:`Update` names a file and the updater that will rewrite it.
Updaters here are plain references: they carry the release context the
external edit-application system needs and do no text patching.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from release_plan.core.version import Version
    from release_plan.hosting import FileContents


def _frozen_versions(versions_map: Mapping[str, Version]) -> Mapping[str, Version]:
    return MappingProxyType(dict(versions_map))


@dataclass(frozen=True)
class VersionsManifestUpdater:
    """Rewrites entries of the versions manifest."""

    version: Version
    versions_map: Mapping[str, Version]

    def __post_init__(self) -> None:
        object.__setattr__(self, "versions_map", _frozen_versions(self.versions_map))


@dataclass(frozen=True)
class JavaUpdater:
    """Rewrites version markers in pom.xml, build.gradle and similar files."""

    version: Version
    versions_map: Mapping[str, Version]
    is_snapshot: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "versions_map", _frozen_versions(self.versions_map))


@dataclass(frozen=True)
class ChangelogUpdater:
    """Prepends a release entry to the changelog."""

    version: Version
    changelog_entry: str


Updater = VersionsManifestUpdater | JavaUpdater | ChangelogUpdater


@dataclass(frozen=True)
class Update:
    """A single planned file edit.

    Attributes:
        path: Repository-relative path of the file
        create_if_missing: Whether the file may be created
        updater: Reference to the updater that performs the edit
        cached_file_contents: Contents already fetched, if any
    """

    path: str
    create_if_missing: bool
    updater: Updater
    cached_file_contents: FileContents | None = field(default=None, compare=False)
