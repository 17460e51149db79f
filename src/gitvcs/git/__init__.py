"""Git operations over a working copy and its shadow copy, using GitPython.

Usage:
    ```python
    from gitvcs.git import GitVersionControlSystem

    vcs = GitVersionControlSystem()
    vcs.checkout("https://git.example.com/config.git", "/srv/config", "v1.0")
    vcs.recursive_add("/srv/config")
    vcs.commit("/srv/config", "Tune connection pool")
    ```
"""

from __future__ import annotations

from gitvcs.git.repository import (
    GitVersionControlSystem,
    RevisionHistoryItem,
    WorkingCopy,
)

__all__ = [
    "GitVersionControlSystem",
    "RevisionHistoryItem",
    "WorkingCopy",
]
