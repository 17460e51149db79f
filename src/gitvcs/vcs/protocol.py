"""VersionControlSystem protocol definition.

This protocol is what a host tool programs against when it keeps its
configuration under version control. :class:`~gitvcs.git.repository.
GitVersionControlSystem` satisfies it via structural typing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from gitvcs.git.repository import RevisionHistoryItem


@runtime_checkable
class VersionControlSystem(Protocol):
    """Version control operations over a working copy."""

    @property
    def implementation_name(self) -> str:
        """Short name of the backend (e.g. "Git")."""
        ...

    def test_connection(self, remote_url: str, working_copy_path: Path | str) -> None:
        """Check that the remote can be reached."""
        ...

    def checkout(
        self,
        remote_url: str,
        working_copy_path: Path | str,
        revision: str | None = None,
    ) -> str:
        """Create a working copy, optionally at a revision; return its revision."""
        ...

    def update(self, working_copy_path: Path | str, revision: str | None = None) -> str:
        """Update or switch the working copy; return its revision."""
        ...

    def commit(self, working_copy_path: Path | str, message: str) -> None:
        """Commit local changes and publish them to the remote."""
        ...

    def recursive_add(self, working_copy_path: Path | str) -> None:
        """Stage every change in the working copy."""
        ...

    def get_local_revision(self, working_copy_path: Path | str) -> str:
        """Return the working copy's revision."""
        ...

    def get_remote_revision(
        self, remote_url: str, working_copy_path: Path | str
    ) -> str:
        """Return the remote's current revision."""
        ...

    def get_remote_revision_history(
        self,
        remote_url: str,
        working_copy_path: Path | str,
        limit: int,
    ) -> list[RevisionHistoryItem]:
        """Return up to *limit* remote revisions, most recent first."""
        ...
