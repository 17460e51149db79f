"""Constants shared across gitvcs.

Configuration bundle keys, the shadow copy naming convention, and the
environment variable names handed to the git subprocess live here so that
every module agrees on them.
"""

from __future__ import annotations

# =============================================================================
# Implementation
# =============================================================================

#: Name reported by the Git version control system implementation
IMPLEMENTATION_NAME: str = "Git"

#: Suffix appended to a working copy's directory name to locate its shadow copy
SHADOW_COPY_SUFFIX: str = "_copy_doNotEdit"

# =============================================================================
# Configuration Bundle Keys
# =============================================================================

#: Selects the authentication strategy ("UsernamePassword" or "SSH")
VCS_AUTHENTICATION_IMPL_KEY: str = "vcs.auth.impl"

#: Username for password-style authentication
VCS_USERNAME_KEY: str = "vcs.username"

#: Password for password-style authentication
VCS_PASSWORD_KEY: str = "vcs.password"

#: Passphrase protecting the SSH private key
VCS_SSH_PASSPHRASE_KEY: str = "vcs.ssh.passphrase"

#: Path or file: URL of the SSH private key
VCS_SSH_KEYFILE_URL_KEY: str = "vcs.ssh.keyfile.url"

# =============================================================================
# Git Subprocess Environment
# =============================================================================

#: Environment variables read by the injected credential helper
CREDENTIAL_USERNAME_ENV_VAR: str = "GITVCS_USERNAME"
CREDENTIAL_PASSWORD_ENV_VAR: str = "GITVCS_PASSWORD"

#: Environment variable read by the generated SSH askpass script
SSH_PASSPHRASE_ENV_VAR: str = "GITVCS_SSH_PASSPHRASE"

# =============================================================================
# Network
# =============================================================================

#: Default number of attempts for clone/pull/push/fetch (1 means no retry)
DEFAULT_NETWORK_ATTEMPTS: int = 1

#: Default upper bound in seconds for the exponential wait between attempts
DEFAULT_RETRY_WAIT_MAX: float = 10.0
