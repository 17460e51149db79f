"""SSH key transport configuration."""

from __future__ import annotations

import os
import shlex
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from gitvcs.constants import SSH_PASSPHRASE_ENV_VAR
from gitvcs.logging import get_logger

__all__ = ["SshTransportConfigCallback"]

logger = get_logger(__name__)

_ASKPASS_SCRIPT = f'#!/bin/sh\nprintf \'%s\\n\' "${SSH_PASSPHRASE_ENV_VAR}"\n'


@dataclass(frozen=True, slots=True)
class SshTransportConfigCallback:
    """Points git's SSH transport at a specific identity file.

    Attributes:
        passphrase: Passphrase for the private key, or None if unprotected.
        key_file: Path to the private key.
    """

    passphrase: str | None = field(repr=False)
    key_file: Path

    def ssh_command(self) -> str:
        """Return the ssh command line git should use."""
        return shlex.join(
            ["ssh", "-i", str(self.key_file), "-o", "IdentitiesOnly=yes"]
        )

    @contextmanager
    def configure(self) -> Iterator[dict[str, str]]:
        """Yield the git environment for one SSH-backed command.

        When a passphrase is set, a throwaway askpass script is written to a
        private temporary directory and removed once the command is done.

        Yields:
            Environment variables to merge into the git process environment.
        """
        env = {"GIT_SSH_COMMAND": self.ssh_command()}
        if not self.passphrase:
            yield env
            return

        with tempfile.TemporaryDirectory(prefix="gitvcs-askpass-") as tmpdir:
            script = Path(tmpdir) / "askpass.sh"
            script.write_text(_ASKPASS_SCRIPT)
            script.chmod(0o700)
            logger.debug("ssh_askpass_created", key_file=str(self.key_file))

            env.update(
                {
                    SSH_PASSPHRASE_ENV_VAR: self.passphrase,
                    "SSH_ASKPASS": str(script),
                    "SSH_ASKPASS_REQUIRE": "force",
                    # Older OpenSSH only consults SSH_ASKPASS with a display set
                    "DISPLAY": os.environ.get("DISPLAY", ":0"),
                }
            )
            yield env
