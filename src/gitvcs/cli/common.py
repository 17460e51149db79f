from __future__ import annotations

import contextlib
from collections.abc import Generator

import click

from gitvcs.cli.context import ExitCode
from gitvcs.cli.output import format_error
from gitvcs.exceptions import ConfigError, GitVcsError, VcsError
from gitvcs.logging import get_logger

__all__ = ["cli_error_handler"]


@contextlib.contextmanager
def cli_error_handler() -> Generator[None, None, None]:
    """Context manager for common CLI error handling.

    Handles common error patterns across CLI commands:
    - KeyboardInterrupt: Exit with code 130
    - VcsError: Format error with the failed operation
    - ConfigError: Format error with the offending field and value
    - GitVcsError / ValueError: Format error with message
    - Anything else: Log and format error

    Example:
        >>> with cli_error_handler():
        >>>     vcs.update(path)
    """
    logger = get_logger(__name__)

    try:
        yield
    except KeyboardInterrupt:
        click.echo("\n\nInterrupted by user.", err=True)
        raise SystemExit(ExitCode.INTERRUPTED) from None
    except VcsError as e:
        error_msg = format_error(
            e.message,
            details=[f"Operation: {e.operation}"] if e.operation else None,
        )
        click.echo(error_msg, err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        error_msg = format_error(
            e.message,
            details=details or None,
            suggestion=(
                "Check the auth section of gitvcs.yaml or GITVCS_AUTH__* variables"
            ),
        )
        click.echo(error_msg, err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except (GitVcsError, ValueError) as e:
        message = e.message if isinstance(e, GitVcsError) else str(e)
        click.echo(format_error(message), err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except Exception as e:
        logger.exception("Unexpected error in command")
        click.echo(f"Error: {e!s}", err=True)
        raise SystemExit(ExitCode.FAILURE) from e
