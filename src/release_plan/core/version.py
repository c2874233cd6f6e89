"""Semantic version value type.

Versions are immutable. Bumping returns a new :class:`Version`; the
pre-release qualifier is used to carry Maven style ``-SNAPSHOT`` markers.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, replace
from enum import Enum

from release_plan.exceptions import VersionParseError

_VERSION_PATTERN = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z.\-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.\-]+))?$"
)

SNAPSHOT_QUALIFIER = "SNAPSHOT"


class BumpType(str, Enum):
    """Kind of version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


def _compare_prerelease(left: str | None, right: str | None) -> int:
    # A version without a qualifier has higher precedence than one with.
    if left == right:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1

    for a, b in zip(left.split("."), right.split("."), strict=False):
        if a == b:
            continue
        a_num, b_num = a.isdigit(), b.isdigit()
        if a_num and b_num:
            return -1 if int(a) < int(b) else 1
        if a_num != b_num:
            return -1 if a_num else 1
        return -1 if a < b else 1

    left_len, right_len = len(left.split(".")), len(right.split("."))
    return (left_len > right_len) - (left_len < right_len)


@functools.total_ordering
@dataclass(frozen=True)
class Version:
    """A semantic version: ``major.minor.patch[-prerelease][+build]``."""

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string.

        Args:
            text: Version text such as ``1.2.3`` or ``0.4.0-SNAPSHOT``

        Returns:
            Parsed version

        Raises:
            VersionParseError: If the text is not a valid version
        """
        match = _VERSION_PATTERN.match(text.strip())
        if not match:
            raise VersionParseError(f"Invalid version: {text!r}")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=match.group("prerelease"),
            build=match.group("build"),
        )

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        core = (self.major, self.minor, self.patch)
        other_core = (other.major, other.minor, other.patch)
        if core != other_core:
            return core < other_core
        return _compare_prerelease(self.prerelease, other.prerelease) < 0

    @property
    def is_snapshot(self) -> bool:
        """Whether the pre-release qualifier marks a snapshot build."""
        return bool(self.prerelease) and SNAPSHOT_QUALIFIER in self.prerelease.upper()

    def bump(self, bump_type: BumpType) -> Version:
        """Return the next version for ``bump_type``, dropping any qualifier."""
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if bump_type == BumpType.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        return self

    def with_prerelease(self, prerelease: str | None) -> Version:
        """Return a copy carrying ``prerelease`` (``None`` removes it)."""
        return replace(self, prerelease=prerelease, build=None)


VersionsMap = dict[str, Version]


def parse_version(text: str) -> Version:
    """Shorthand for :meth:`Version.parse`."""
    return Version.parse(text)
