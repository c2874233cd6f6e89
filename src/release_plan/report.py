"""Console preview of a release plan."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.table import Table

from release_plan.update import ChangelogUpdater, JavaUpdater, VersionsManifestUpdater

if TYPE_CHECKING:
    from rich.console import Console

    from release_plan.plan import ReleasePlan
    from release_plan.update import Updater

_UPDATER_LABELS = {
    VersionsManifestUpdater: "versions manifest",
    JavaUpdater: "java build file",
    ChangelogUpdater: "changelog",
}


def describe_updater(updater: Updater) -> str:
    return _UPDATER_LABELS.get(type(updater), type(updater).__name__)


def render_release_plan(plan: ReleasePlan, console: Console) -> None:
    """Print the versions and planned edits of ``plan``.

    Args:
        plan: Release plan to show
        console: Console for output
    """
    kind = "[yellow]SNAPSHOT[/]" if plan.is_snapshot else "[green]RELEASE[/]"
    console.print(f"\n{kind} - Next version [green]{plan.new_version}[/]\n")

    table = Table(title="Artifact versions")
    table.add_column("Artifact", style="cyan")
    table.add_column("Version", style="green")
    for artifact, version in plan.versions_map.items():
        table.add_row(artifact, str(version))
    console.print(table)

    lines = []
    for update in plan.updates:
        created = " [dim](created if missing)[/]" if update.create_if_missing else ""
        lines.append(
            f"  • [cyan]{update.path}[/] - {describe_updater(update.updater)}{created}"
        )
    console.print(
        Panel(
            "[bold]Would make the following changes:[/]\n\n" + "\n".join(lines),
            title="[yellow]Release Plan[/]",
            border_style="yellow",
        )
    )
