from __future__ import annotations

from pathlib import Path

import click

from gitvcs.cli.common import cli_error_handler
from gitvcs.cli.context import get_cli_context

_PATH = click.Path(file_okay=False, path_type=Path)


@click.command("test-connection")
@click.argument("remote_url")
@click.argument("path", type=_PATH)
@click.pass_context
def test_connection(ctx: click.Context, remote_url: str, path: Path) -> None:
    """Check that REMOTE_URL is reachable by cloning its metadata into PATH.

    Examples:
        gitvcs test-connection https://git.example.com/config.git /tmp/probe
    """
    cli_ctx = get_cli_context(ctx)
    with cli_error_handler():
        cli_ctx.create_vcs().test_connection(remote_url, path)
    if not cli_ctx.quiet:
        click.echo(f"Connected to {remote_url}")


@click.command()
@click.argument("remote_url")
@click.argument("path", type=_PATH)
@click.option(
    "-r",
    "--revision",
    default=None,
    help="Tag, branch, or commit to check out after cloning.",
)
@click.pass_context
def checkout(
    ctx: click.Context, remote_url: str, path: Path, revision: str | None
) -> None:
    """Create a working copy of REMOTE_URL at PATH.

    A hidden shadow copy is created next to PATH and kept in step with the
    remote. Prints the resulting revision.

    Examples:
        gitvcs checkout https://git.example.com/config.git ./config
        gitvcs checkout https://git.example.com/config.git ./config -r v1.2
    """
    cli_ctx = get_cli_context(ctx)
    with cli_error_handler():
        result = cli_ctx.create_vcs().checkout(remote_url, path, revision)
    click.echo(result)
