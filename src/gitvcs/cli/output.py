"""Output formatting utilities for the gitvcs CLI."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import asdict
from enum import Enum
from typing import Any

from rich.table import Table

from gitvcs.git.repository import RevisionHistoryItem

__all__ = [
    "OutputFormat",
    "format_error",
    "format_json",
    "history_json",
    "history_table",
]


class OutputFormat(str, Enum):
    """Supported output formats for CLI commands."""

    TEXT = "text"
    JSON = "json"


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Args:
        message: Primary error message.
        details: Optional list of detail lines to include.
        suggestion: Optional suggestion for resolving the error.

    Returns:
        Formatted error string.

    Example:
        >>> print(format_error("Checkout failed", details=["Operation: checkout"]))
        Error: Checkout failed
          Operation: checkout
    """
    lines = [f"Error: {message}"]

    if details:
        for detail in details:
            lines.append(f"  {detail}")

    if suggestion:
        lines.append(f"Suggestion: {suggestion}")

    return "\n".join(lines)


def format_json(data: Any) -> str:
    """Format data as indented JSON."""
    return json.dumps(data, indent=2)


def history_table(history: Sequence[RevisionHistoryItem]) -> Table:
    """Build a Rich table of revision history, one commit per row.

    Only the first line of each commit message is shown.
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Revision", style="cyan", no_wrap=True)
    table.add_column("Comment")
    for item in history:
        first_line = item.comment.split("\n", 1)[0]
        table.add_row(item.revision, first_line)
    return table


def history_json(history: Sequence[RevisionHistoryItem]) -> str:
    """Render revision history as a JSON array of objects."""
    return format_json([asdict(item) for item in history])
