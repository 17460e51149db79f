from __future__ import annotations

from pathlib import Path

import click

from gitvcs.cli.common import cli_error_handler
from gitvcs.cli.context import get_cli_context

_EXISTING_DIR = click.Path(exists=True, file_okay=False, path_type=Path)


@click.command()
@click.argument("path", type=_EXISTING_DIR)
@click.pass_context
def add(ctx: click.Context, path: Path) -> None:
    """Stage every change in the working copy at PATH."""
    cli_ctx = get_cli_context(ctx)
    with cli_error_handler():
        cli_ctx.create_vcs().recursive_add(path)


@click.command()
@click.argument("path", type=_EXISTING_DIR)
@click.option("-m", "--message", required=True, help="Commit message.")
@click.option(
    "-a",
    "--add",
    "add_all",
    is_flag=True,
    default=False,
    help="Stage new and deleted files before committing.",
)
@click.pass_context
def commit(ctx: click.Context, path: Path, message: str, add_all: bool) -> None:
    """Commit changes in PATH and push them to the remote.

    Modified tracked files are always included; pass --add to pick up new
    and deleted files too. Prints the new revision.

    Examples:
        gitvcs commit ./config -m "Raise pool size"
        gitvcs commit ./config -a -m "Add staging adapter"
    """
    cli_ctx = get_cli_context(ctx)
    with cli_error_handler():
        vcs = cli_ctx.create_vcs()
        if add_all:
            vcs.recursive_add(path)
        vcs.commit(path, message)
        result = vcs.get_local_revision(path)
    click.echo(result)
