"""Structured conventional commits and the promotion override.

Commits arrive already parsed. This module only normalizes the commit
list and recognizes the maintainer-authored ``RELEASE AS: 1.0.0`` note
that promotes stable artifacts to their first major release.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

PROMOTION_NOTE_TITLE = "RELEASE AS"
PROMOTION_NOTE_TEXT = "1.0.0"


@dataclass(frozen=True)
class Note:
    """A structured footer attached to a commit (e.g. ``BREAKING CHANGE``)."""

    title: str
    text: str


@dataclass(frozen=True)
class ConventionalCommit:
    """A commit already parsed into its conventional-commit parts.

    Attributes:
        sha: Commit SHA
        type: Commit type (feat, fix, ...)
        scope: Optional scope in parentheses
        breaking: Whether the commit is a breaking change
        message: Full commit message
        bare_message: Description without type and scope
        notes: Structured footers
        files: Paths touched by the commit
        references: Issue/PR references
    """

    sha: str
    type: str
    message: str
    bare_message: str = ""
    scope: str | None = None
    breaking: bool = False
    notes: tuple[Note, ...] = ()
    files: tuple[str, ...] = ()
    references: tuple[str, ...] = ()

    def replace_notes(self, notes: Iterable[Note]) -> ConventionalCommit:
        """Return a copy of this commit with ``notes`` instead."""
        return replace(self, notes=tuple(notes))


# Stand-in used when there are no commits so that a snapshot release is
# still computed.
FAKE_COMMIT = ConventionalCommit(
    sha="fake",
    type="fake",
    message="fake commit",
    bare_message="fake commit",
)


def ensure_non_empty(commits: Sequence[ConventionalCommit]) -> list[ConventionalCommit]:
    """Return ``commits`` or, if there are none, a single fake commit."""
    if not commits:
        return [FAKE_COMMIT]
    return list(commits)


def is_promotion_note(note: Note) -> bool:
    """Whether ``note`` is the ``RELEASE AS: 1.0.0`` override."""
    return note.title == PROMOTION_NOTE_TITLE and note.text == PROMOTION_NOTE_TEXT


def is_promotion_commit(commit: ConventionalCommit) -> bool:
    """Whether any of the commit's notes is the promotion override."""
    return any(is_promotion_note(note) for note in commit.notes)


def strip_promotion_notes(commit: ConventionalCommit) -> ConventionalCommit:
    """Drop promotion notes so bump strategies do not read them as RELEASE AS."""
    if not is_promotion_commit(commit):
        return commit
    return commit.replace_notes(note for note in commit.notes if not is_promotion_note(note))
