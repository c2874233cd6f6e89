"""Versioning strategies.

A versioning strategy turns a current version and the commits since the
last release into the next version. Release strategies receive one by
injection and treat it as opaque.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from release_plan.core.version import SNAPSHOT_QUALIFIER, BumpType, Version

if TYPE_CHECKING:
    from collections.abc import Sequence

    from release_plan.core.commits import ConventionalCommit

MINOR_TYPES = frozenset({"feat", "feature"})
RELEASE_AS_NOTE_TITLE = "RELEASE AS"


@runtime_checkable
class VersioningStrategy(Protocol):
    """Computes the next version from a set of commits."""

    async def bump(self, version: Version, commits: Sequence[ConventionalCommit]) -> Version:
        """Return the version that follows ``version`` given ``commits``."""
        ...


def calculate_bump(commits: Sequence[ConventionalCommit]) -> BumpType:
    """Determine the bump type from commits.

    Precedence: breaking > feat > anything else.

    Args:
        commits: Parsed commits

    Returns:
        Required bump type, NONE for an empty commit list
    """
    if not commits:
        return BumpType.NONE

    has_breaking = False
    has_feature = False
    for commit in commits:
        if commit.breaking or any(note.title.startswith("BREAKING") for note in commit.notes):
            has_breaking = True
        elif commit.type in MINOR_TYPES:
            has_feature = True

    if has_breaking:
        return BumpType.MAJOR
    if has_feature:
        return BumpType.MINOR
    return BumpType.PATCH


def find_release_as(commits: Sequence[ConventionalCommit]) -> Version | None:
    """Return the version requested by the first ``RELEASE AS`` note, if any.

    Raises:
        VersionParseError: If the note text is not a version
    """
    for commit in commits:
        for note in commit.notes:
            if note.title == RELEASE_AS_NOTE_TITLE:
                return Version.parse(note.text)
    return None


class DefaultVersioningStrategy:
    """Conventional-commit semver bumping.

    A ``RELEASE AS`` note overrides the computed version. On a snapshot
    version a patch-level change releases the snapshot as is (the
    ``-SNAPSHOT`` qualifier is dropped and the numbers stay); minor and
    major changes bump the numbers.
    """

    def __init__(
        self,
        *,
        bump_minor_pre_major: bool = False,
        bump_patch_for_minor_pre_major: bool = False,
    ) -> None:
        self.bump_minor_pre_major = bump_minor_pre_major
        self.bump_patch_for_minor_pre_major = bump_patch_for_minor_pre_major

    async def bump(self, version: Version, commits: Sequence[ConventionalCommit]) -> Version:
        release_as = find_release_as(commits)
        if release_as is not None:
            return release_as

        bump_type = calculate_bump(commits)
        if bump_type == BumpType.NONE:
            return version

        if version.major < 1:
            if bump_type == BumpType.MAJOR and self.bump_minor_pre_major:
                bump_type = BumpType.MINOR
            elif bump_type == BumpType.MINOR and self.bump_patch_for_minor_pre_major:
                bump_type = BumpType.PATCH

        if version.is_snapshot and bump_type == BumpType.PATCH:
            return version.with_prerelease(None)
        return version.bump(bump_type)


class JavaSnapshotStrategy:
    """Next development snapshot: ``X.Y.(Z+1)-SNAPSHOT``."""

    async def bump(self, version: Version, commits: Sequence[ConventionalCommit]) -> Version:
        if version.is_snapshot:
            return version
        return version.bump(BumpType.PATCH).with_prerelease(SNAPSHOT_QUALIFIER)
