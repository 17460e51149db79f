"""Version control system factory.

Builds a ready-to-use :class:`~gitvcs.vcs.protocol.VersionControlSystem`
from a configuration bundle, wiring in the authentication provider the
bundle selects.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from gitvcs.auth.factory import create_authentication_provider
from gitvcs.constants import DEFAULT_NETWORK_ATTEMPTS, DEFAULT_RETRY_WAIT_MAX
from gitvcs.git.repository import GitVersionControlSystem

if TYPE_CHECKING:
    from gitvcs.config import GitVcsConfig
    from gitvcs.vcs.protocol import VersionControlSystem


def create_version_control_system(
    properties: Mapping[str, str | None],
    *,
    network_attempts: int = DEFAULT_NETWORK_ATTEMPTS,
    retry_wait_max: float = DEFAULT_RETRY_WAIT_MAX,
) -> VersionControlSystem:
    """Create a VersionControlSystem for a configuration bundle.

    Args:
        properties: Configuration bundle (``vcs.*`` keys).
        network_attempts: Attempts per network operation (1 = no retry).
        retry_wait_max: Upper bound in seconds between attempts.

    Returns:
        A Git-backed :class:`VersionControlSystem`.

    Raises:
        AuthenticationConfigError: If the authentication settings are invalid.
    """
    return GitVersionControlSystem(
        create_authentication_provider(properties),
        network_attempts=network_attempts,
        retry_wait_max=retry_wait_max,
    )


def create_from_config(config: GitVcsConfig) -> VersionControlSystem:
    """Create a VersionControlSystem from loaded configuration."""
    return create_version_control_system(
        config.to_properties(),
        network_attempts=config.network.attempts,
        retry_wait_max=config.network.retry_wait_max,
    )
