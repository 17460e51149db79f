"""CLI entry point for gitvcs.

This module defines the Click-based command-line interface for gitvcs.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import click
from dotenv import load_dotenv

from gitvcs import __version__
from gitvcs.cli.commands.checkout import checkout, test_connection
from gitvcs.cli.commands.commit import add, commit
from gitvcs.cli.commands.revision import history, remote_revision, revision
from gitvcs.cli.commands.update import update
from gitvcs.cli.context import CLIContext, ExitCode
from gitvcs.cli.output import format_error
from gitvcs.config import load_config
from gitvcs.exceptions import ConfigError
from gitvcs.logging import bind_context, clear_context, configure_logging

_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gitvcs")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=str),
    default=None,
    help="Path to config file (overrides project/user config).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress non-essential output (ERROR level only).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    verbose: int,
    quiet: bool,
) -> None:
    """gitvcs - keep deployment configuration in a Git remote."""
    # Credentials are commonly supplied through GITVCS_AUTH__* in a local .env
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    ctx.ensure_object(dict)

    try:
        config_path = Path(config_file) if config_file else None
        config = load_config(config_path)
    except ConfigError as e:
        # Can't use logging yet, just output error
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details or None), err=True)
        ctx.exit(ExitCode.FAILURE)

    ctx.obj["cli_ctx"] = CLIContext(
        config=config,
        config_path=config_path,
        verbosity=verbose,
        quiet=quiet,
    )

    # Priority: quiet > verbose > config
    if quiet:
        level = logging.ERROR
    elif verbose > 0:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    else:
        level = _VERBOSITY_LEVELS.get(config.verbosity, logging.WARNING)

    configure_logging(level=level)
    clear_context()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    # Every log line of this run names the command that produced it
    bind_context(command=ctx.invoked_subcommand)

    if shutil.which("git") is None:
        click.echo(
            format_error(
                "git is not available",
                suggestion="Install from https://git-scm.com/downloads",
            ),
            err=True,
        )
        ctx.exit(ExitCode.FAILURE)


# Register commands
cli.add_command(test_connection)
cli.add_command(checkout)
cli.add_command(update)
cli.add_command(add)
cli.add_command(commit)
cli.add_command(revision)
cli.add_command(remote_revision)
cli.add_command(history)

if __name__ == "__main__":
    cli()
