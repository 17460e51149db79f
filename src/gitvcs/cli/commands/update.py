from __future__ import annotations

from pathlib import Path

import click

from gitvcs.cli.common import cli_error_handler
from gitvcs.cli.context import get_cli_context


@click.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "-r",
    "--revision",
    default=None,
    help="Tag, branch, or commit to switch to instead of pulling.",
)
@click.pass_context
def update(ctx: click.Context, path: Path, revision: str | None) -> None:
    """Update the working copy at PATH from the remote.

    Without --revision the working copy pulls the latest changes; with it
    the working copy is switched to that revision. Prints the resulting
    revision.

    Examples:
        gitvcs update ./config
        gitvcs update ./config --revision v1.3
    """
    cli_ctx = get_cli_context(ctx)
    with cli_error_handler():
        result = cli_ctx.create_vcs().update(path, revision)
    click.echo(result)
