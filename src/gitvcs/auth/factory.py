"""Authentication provider factory.

Reads the ``vcs.auth.impl`` key from a configuration bundle and builds the
matching :class:`~gitvcs.auth.provider.AuthenticationProvider`.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from gitvcs.auth.credentials import UsernamePasswordCredentialsProvider
from gitvcs.auth.provider import AuthenticationProvider
from gitvcs.auth.ssh import SshTransportConfigCallback
from gitvcs.constants import (
    VCS_AUTHENTICATION_IMPL_KEY,
    VCS_PASSWORD_KEY,
    VCS_SSH_KEYFILE_URL_KEY,
    VCS_SSH_PASSPHRASE_KEY,
    VCS_USERNAME_KEY,
)
from gitvcs.exceptions import AuthenticationConfigError
from gitvcs.logging import get_logger
from gitvcs.utils.files import to_path

__all__ = [
    "AuthenticationImpl",
    "create_authentication_provider",
]

logger = get_logger(__name__)

Properties = Mapping[str, str | None]


def _create_username_password(properties: Properties) -> AuthenticationProvider:
    return AuthenticationProvider(
        credentials_provider=UsernamePasswordCredentialsProvider(
            username=properties.get(VCS_USERNAME_KEY),
            password=properties.get(VCS_PASSWORD_KEY),
        )
    )


def _create_ssh(properties: Properties) -> AuthenticationProvider:
    return AuthenticationProvider(
        transport_config_callback=SshTransportConfigCallback(
            passphrase=properties.get(VCS_SSH_PASSPHRASE_KEY),
            key_file=to_path(properties.get(VCS_SSH_KEYFILE_URL_KEY)),
        )
    )


class AuthenticationImpl(str, Enum):
    """Recognised authentication strategies, keyed by configuration value."""

    USERNAME_PASSWORD = "UsernamePassword"
    SSH = "SSH"

    def create(self, properties: Properties) -> AuthenticationProvider:
        """Build the provider for this strategy.

        Args:
            properties: Configuration bundle.

        Returns:
            A provider carrying this strategy's capability.
        """
        return _BUILDERS[self](properties)


_BUILDERS = {
    AuthenticationImpl.USERNAME_PASSWORD: _create_username_password,
    AuthenticationImpl.SSH: _create_ssh,
}


def create_authentication_provider(
    properties: Properties,
) -> AuthenticationProvider | None:
    """Create an authentication provider from a configuration bundle.

    Args:
        properties: Configuration bundle (``vcs.*`` keys).

    Returns:
        The configured provider, or None when no strategy is selected so that
        public remotes can be used anonymously.

    Raises:
        AuthenticationConfigError: If the strategy is unknown or its inputs are
            malformed. The message names the configured strategy value.

    Example:
        ```python
        provider = create_authentication_provider(
            {"vcs.auth.impl": "SSH", "vcs.ssh.keyfile.url": "file:///keys/id"}
        )
        ```
    """
    impl_name = properties.get(VCS_AUTHENTICATION_IMPL_KEY)
    if not impl_name:
        logger.debug("authentication_not_configured")
        return None

    try:
        provider = AuthenticationImpl(impl_name).create(properties)
    except (ValueError, TypeError) as e:
        raise AuthenticationConfigError(
            f"Authentication provider may be misconfigured; '{impl_name}'",
            field=VCS_AUTHENTICATION_IMPL_KEY,
            value=impl_name,
        ) from e

    logger.debug("authentication_configured", impl=impl_name)
    return provider
