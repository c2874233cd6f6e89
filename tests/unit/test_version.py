"""Tests for the Version value type."""

from __future__ import annotations

import pytest

from release_plan.core.version import BumpType, Version, parse_version
from release_plan.exceptions import VersionParseError


class TestVersionParse:
    """Tests for Version.parse()."""

    def test_parse_simple(self):
        """Parse major.minor.patch."""
        assert Version.parse("1.2.3") == Version(1, 2, 3)

    def test_parse_snapshot(self):
        """Parse a Maven snapshot qualifier."""
        version = Version.parse("0.3.1-SNAPSHOT")

        assert version == Version(0, 3, 1, prerelease="SNAPSHOT")
        assert version.is_snapshot

    def test_parse_build_metadata(self):
        """Build metadata is kept."""
        version = parse_version("1.0.0-beta.2+exp.sha.5114f85")

        assert version.prerelease == "beta.2"
        assert version.build == "exp.sha.5114f85"
        assert str(version) == "1.0.0-beta.2+exp.sha.5114f85"

    @pytest.mark.parametrize("text", ["", "1", "1.2", "v1.2.3", "1.2.3.4", "1.2.x"])
    def test_parse_invalid(self, text: str):
        """Malformed versions raise VersionParseError."""
        with pytest.raises(VersionParseError):
            Version.parse(text)

    def test_parse_error_is_value_error(self):
        """VersionParseError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Invalid version"):
            Version.parse("not-a-version")


class TestVersionOrdering:
    """Tests for Version comparison."""

    def test_numeric_ordering(self):
        """Numbers compare numerically, not lexically."""
        assert Version.parse("1.10.0") > Version.parse("1.9.0")

    def test_prerelease_before_release(self):
        """A pre-release sorts before its release."""
        assert Version.parse("1.0.0-SNAPSHOT") < Version.parse("1.0.0")

    def test_prerelease_identifiers(self):
        """Numeric identifiers sort before alphanumeric ones."""
        assert Version.parse("1.0.0-alpha") < Version.parse("1.0.0-alpha.1")
        assert Version.parse("1.0.0-alpha.1") < Version.parse("1.0.0-alpha.beta")
        assert Version.parse("1.0.0-beta.2") < Version.parse("1.0.0-beta.11")
        assert Version.parse("1.0.0-rc.1") < Version.parse("1.0.0")


class TestVersionBump:
    """Tests for Version.bump() and with_prerelease()."""

    @pytest.mark.parametrize(
        ("bump_type", "expected"),
        [
            (BumpType.MAJOR, "2.0.0"),
            (BumpType.MINOR, "1.3.0"),
            (BumpType.PATCH, "1.2.4"),
            (BumpType.NONE, "1.2.3"),
        ],
    )
    def test_bump(self, bump_type: BumpType, expected: str):
        """Each bump type resets the lower components."""
        assert str(Version(1, 2, 3).bump(bump_type)) == expected

    def test_with_prerelease(self):
        """Qualifiers can be added and removed."""
        version = Version(1, 2, 3).with_prerelease("SNAPSHOT")

        assert str(version) == "1.2.3-SNAPSHOT"
        assert str(version.with_prerelease(None)) == "1.2.3"

    def test_lowercase_snapshot(self):
        """Snapshot detection ignores case."""
        assert Version.parse("1.0.0-snapshot").is_snapshot
        assert not Version.parse("1.0.0-beta").is_snapshot
