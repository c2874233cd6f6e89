"""Versions manifest codec interface.

The manifest (``versions.txt``) maps each artifact key to its current
version. Reading and rewriting its text is the job of an external codec.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from release_plan.core.version import VersionsMap

VERSIONS_MANIFEST_FILE = "versions.txt"


@runtime_checkable
class VersionsManifestCodec(Protocol):
    """Parses a versions manifest."""

    def parse_versions(self, content: str) -> VersionsMap:
        """Return the artifact key to current version mapping."""
        ...

    def needs_snapshot(self, content: str) -> bool:
        """Whether the manifest calls for a snapshot release next."""
        ...
