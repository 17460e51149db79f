"""Authentication provider: the capabilities handed to git commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass

from gitvcs.auth.credentials import UsernamePasswordCredentialsProvider
from gitvcs.auth.ssh import SshTransportConfigCallback

__all__ = ["AuthenticationProvider"]


@dataclass(frozen=True, slots=True)
class AuthenticationProvider:
    """Bundle of optional authentication capabilities.

    Either capability may be None, meaning that aspect of the git command is
    left alone.

    Attributes:
        credentials_provider: Supplies username/password to git.
        transport_config_callback: Configures the SSH transport.
    """

    credentials_provider: UsernamePasswordCredentialsProvider | None = None
    transport_config_callback: SshTransportConfigCallback | None = None

    @contextmanager
    def git_environment(self) -> Iterator[dict[str, str]]:
        """Yield the combined git environment for one command.

        Yields:
            Environment variables contributed by every configured capability.
        """
        env: dict[str, str] = {}
        with ExitStack() as stack:
            if self.credentials_provider is not None:
                env.update(self.credentials_provider.environment())
            if self.transport_config_callback is not None:
                env.update(
                    stack.enter_context(self.transport_config_callback.configure())
                )
            yield env
