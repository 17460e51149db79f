"""CLI context and exit codes for gitvcs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import click

from gitvcs.config import GitVcsConfig
from gitvcs.vcs import VersionControlSystem, create_from_config

__all__ = [
    "CLIContext",
    "ExitCode",
    "get_cli_context",
]


class ExitCode(IntEnum):
    """Standard exit codes for the gitvcs CLI.

    Click itself exits with 2 on usage errors.
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Type-safe CLI context containing global options and configuration.

    Attributes:
        config: Loaded gitvcs configuration.
        config_path: Path to config file (if specified via --config).
        verbosity: Verbosity level (0=default, 1=INFO, 2+=DEBUG).
        quiet: Suppress non-essential output.
    """

    config: GitVcsConfig
    config_path: Path | None = None
    verbosity: int = 0
    quiet: bool = False

    def create_vcs(self) -> VersionControlSystem:
        """Build the version control system described by the configuration.

        Raises:
            AuthenticationConfigError: If the authentication settings are invalid.
        """
        return create_from_config(self.config)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root command."""
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    return cli_ctx
