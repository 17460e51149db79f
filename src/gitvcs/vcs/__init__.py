"""VCS abstraction layer.

Provides the :class:`VersionControlSystem` protocol and factory functions
that assemble a Git-backed implementation from configuration.
"""

from __future__ import annotations

from gitvcs.vcs.factory import create_from_config, create_version_control_system
from gitvcs.vcs.protocol import VersionControlSystem

__all__ = [
    "VersionControlSystem",
    "create_from_config",
    "create_version_control_system",
]
