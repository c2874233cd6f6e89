"""Source-hosting backend interface.

Release strategies never talk to GitHub (or any other forge) directly;
they receive an object implementing :class:`SourceHost`. Tests pass an
in-memory fake.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Repository:
    """A hosted repository."""

    owner: str
    repo: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class FileContents:
    """A file fetched from the hosting backend.

    Attributes:
        sha: Blob SHA of the file
        content: Raw (possibly encoded) content as returned by the backend
        parsed_content: Decoded text
        mode: Git file mode
    """

    sha: str
    content: str
    parsed_content: str
    mode: str = "100644"


@runtime_checkable
class SourceHost(Protocol):
    """Read access to files on a branch of the hosted repository."""

    async def get_file_contents_on_branch(self, path: str, branch: str) -> FileContents:
        """Fetch a file.

        Raises:
            RemoteFileNotFoundError: If ``path`` does not exist on ``branch``
        """
        ...

    async def find_files_by_filename_and_ref(
        self, filename: str, ref: str, prefix: str | None = None
    ) -> list[str]:
        """List paths named ``filename`` under ``prefix``, relative to ``prefix``."""
        ...
