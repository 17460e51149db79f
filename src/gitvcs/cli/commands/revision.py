from __future__ import annotations

from pathlib import Path

import click

from gitvcs.cli.common import cli_error_handler
from gitvcs.cli.console import console
from gitvcs.cli.context import get_cli_context
from gitvcs.cli.output import OutputFormat, history_json, history_table

_EXISTING_DIR = click.Path(exists=True, file_okay=False, path_type=Path)


@click.command()
@click.argument("path", type=_EXISTING_DIR)
@click.pass_context
def revision(ctx: click.Context, path: Path) -> None:
    """Print the revision the working copy at PATH is on."""
    cli_ctx = get_cli_context(ctx)
    with cli_error_handler():
        result = cli_ctx.create_vcs().get_local_revision(path)
    click.echo(result)


@click.command("remote-revision")
@click.argument("remote_url")
@click.argument("path", type=_EXISTING_DIR)
@click.pass_context
def remote_revision(ctx: click.Context, remote_url: str, path: Path) -> None:
    """Print the latest revision of REMOTE_URL, read via PATH's shadow copy."""
    cli_ctx = get_cli_context(ctx)
    with cli_error_handler():
        result = cli_ctx.create_vcs().get_remote_revision(remote_url, path)
    click.echo(result)


@click.command()
@click.argument("remote_url")
@click.argument("path", type=_EXISTING_DIR)
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help="Maximum number of revisions to list.",
)
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format.",
)
@click.pass_context
def history(
    ctx: click.Context, remote_url: str, path: Path, limit: int, fmt: str
) -> None:
    """List recent revisions of REMOTE_URL, newest first.

    Examples:
        gitvcs history https://git.example.com/config.git ./config
        gitvcs history https://git.example.com/config.git ./config -n 5 -f json
    """
    cli_ctx = get_cli_context(ctx)
    with cli_error_handler():
        items = cli_ctx.create_vcs().get_remote_revision_history(
            remote_url, path, limit
        )

    if fmt == OutputFormat.JSON.value:
        click.echo(history_json(items))
    else:
        console.print(history_table(items))
