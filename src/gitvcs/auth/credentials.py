"""Username/password credentials for HTTP(S) remotes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from gitvcs.constants import CREDENTIAL_PASSWORD_ENV_VAR, CREDENTIAL_USERNAME_ENV_VAR

__all__ = ["UsernamePasswordCredentialsProvider"]

# Answers git's "get" request from the environment; other actions are ignored.
# printf, not echo: sh's echo rewrites backslashes in the values.
_CREDENTIAL_HELPER = (
    "!f() { test \"$1\" = get || exit 0; "
    "printf '%s\\n' "
    f'"username=${{{CREDENTIAL_USERNAME_ENV_VAR}}}" '
    f'"password=${{{CREDENTIAL_PASSWORD_ENV_VAR}}}"; '
    "}; f"
)


@dataclass(frozen=True, slots=True)
class UsernamePasswordCredentialsProvider:
    """Supplies a fixed username/password pair to git.

    Missing values are passed through rather than rejected; git receives them
    as empty strings.

    Attributes:
        username: Account name, or None.
        password: Password or access token, or None.
    """

    username: str | None
    password: str | None = field(default=None, repr=False)

    def environment(self, base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Build the git environment that answers credential requests.

        The helper entries are appended after any ``GIT_CONFIG_KEY_n`` entries
        already present in ``base``. The first of them is an empty
        ``credential.helper``, which clears helpers inherited from earlier
        config so the configured pair wins.

        Args:
            base: Environment the git process inherits; defaults to
                ``os.environ``.

        Returns:
            Environment variables to merge into the git process environment.

        Raises:
            ValueError: If ``GIT_CONFIG_COUNT`` in ``base`` is not a number.
        """
        if base is None:
            base = os.environ
        offset = int(base.get("GIT_CONFIG_COUNT") or 0)

        return {
            "GIT_TERMINAL_PROMPT": "0",
            "GIT_CONFIG_COUNT": str(offset + 2),
            f"GIT_CONFIG_KEY_{offset}": "credential.helper",
            f"GIT_CONFIG_VALUE_{offset}": "",
            f"GIT_CONFIG_KEY_{offset + 1}": "credential.helper",
            f"GIT_CONFIG_VALUE_{offset + 1}": _CREDENTIAL_HELPER,
            CREDENTIAL_USERNAME_ENV_VAR: self.username or "",
            CREDENTIAL_PASSWORD_ENV_VAR: self.password or "",
        }
