"""gitvcs exception hierarchy.

All exceptions can be imported from this package:
    from gitvcs.exceptions import ConfigError, VcsError
"""

from __future__ import annotations

from gitvcs.exceptions.base import GitVcsError
from gitvcs.exceptions.config import AuthenticationConfigError, ConfigError
from gitvcs.exceptions.vcs import VcsError

__all__ = [
    # Base
    "GitVcsError",
    # Configuration
    "AuthenticationConfigError",
    "ConfigError",
    # Version control
    "VcsError",
]
