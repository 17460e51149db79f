"""Pluggable authentication for git commands.

A provider bundles up to two capabilities: a credentials supplier for
password-style remotes and a transport hook for SSH keys. The factory picks
one from configuration.
"""

from __future__ import annotations

from gitvcs.auth.credentials import UsernamePasswordCredentialsProvider
from gitvcs.auth.factory import AuthenticationImpl, create_authentication_provider
from gitvcs.auth.provider import AuthenticationProvider
from gitvcs.auth.ssh import SshTransportConfigCallback

__all__ = [
    "AuthenticationImpl",
    "AuthenticationProvider",
    "SshTransportConfigCallback",
    "UsernamePasswordCredentialsProvider",
    "create_authentication_provider",
]
