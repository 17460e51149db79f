"""Git-backed version control for deployment configuration.

Keeps a user-facing working copy and a hidden shadow copy of a remote Git
repository in step, with pluggable authentication selected from
configuration.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
