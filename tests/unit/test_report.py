"""Tests for the release plan preview."""

from __future__ import annotations

from rich.console import Console

from release_plan.core.version import Version
from release_plan.plan import ReleasePlan
from release_plan.report import describe_updater, render_release_plan
from release_plan.update import ChangelogUpdater, JavaUpdater, Update, VersionsManifestUpdater


def _plan(*, is_snapshot: bool = False) -> ReleasePlan:
    version = Version(1, 3, 0)
    versions = {"google-cloud-core": version}
    return ReleasePlan(
        new_version=version,
        versions_map=versions,
        is_snapshot=is_snapshot,
        updates=[
            Update("versions.txt", False, VersionsManifestUpdater(version, versions)),
            Update("pom.xml", False, JavaUpdater(version, versions)),
            Update("CHANGELOG.md", True, ChangelogUpdater(version, "## 1.3.0")),
        ],
    )


class TestRenderReleasePlan:
    """Tests for render_release_plan()."""

    def test_lists_versions_and_edits(self):
        """Every artifact and planned path is shown."""
        console = Console(record=True, width=120)

        render_release_plan(_plan(), console)

        output = console.export_text()
        assert "RELEASE" in output
        assert "google-cloud-core" in output
        assert "1.3.0" in output
        assert "versions.txt" in output
        assert "pom.xml" in output
        assert "CHANGELOG.md" in output
        assert "created if missing" in output

    def test_snapshot_label(self):
        """Snapshot plans are labelled as such."""
        console = Console(record=True, width=120)

        render_release_plan(_plan(is_snapshot=True), console)

        assert "SNAPSHOT" in console.export_text()

    def test_describe_updater(self):
        """Updater references get readable labels."""
        version = Version(1, 0, 0)
        assert describe_updater(ChangelogUpdater(version, "")) == "changelog"
        assert describe_updater(JavaUpdater(version, {})) == "java build file"
