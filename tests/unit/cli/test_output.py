"""Unit tests for CLI output formatting utilities."""

from __future__ import annotations

import json
from enum import Enum

from rich.console import Console

from gitvcs.cli.output import (
    OutputFormat,
    format_error,
    format_json,
    history_json,
    history_table,
)
from gitvcs.git import RevisionHistoryItem

HISTORY = [
    RevisionHistoryItem("a" * 40, "Raise pool size\n\nLoad tests need 50.\n"),
    RevisionHistoryItem("b" * 40, "Initial configuration\n"),
]


class TestOutputFormat:
    def test_enum_values(self) -> None:
        assert OutputFormat.TEXT.value == "text"
        assert OutputFormat.JSON.value == "json"

    def test_is_string_enum(self) -> None:
        assert issubclass(OutputFormat, str)
        assert issubclass(OutputFormat, Enum)


class TestFormatError:
    def test_message_only(self) -> None:
        assert format_error("Checkout failed") == "Error: Checkout failed"

    def test_details_and_suggestion(self) -> None:
        result = format_error(
            "Checkout failed",
            details=["Operation: checkout"],
            suggestion="Check the remote URL",
        )

        assert result.splitlines() == [
            "Error: Checkout failed",
            "  Operation: checkout",
            "Suggestion: Check the remote URL",
        ]


class TestFormatJson:
    def test_indented(self) -> None:
        assert format_json({"a": 1}) == '{\n  "a": 1\n}'


class TestHistoryRendering:
    def test_json_keeps_full_comment(self) -> None:
        data = json.loads(history_json(HISTORY))

        assert data == [
            {
                "revision": "a" * 40,
                "comment": "Raise pool size\n\nLoad tests need 50.\n",
            },
            {"revision": "b" * 40, "comment": "Initial configuration\n"},
        ]

    def test_json_empty(self) -> None:
        assert json.loads(history_json([])) == []

    def test_table_shows_first_line(self) -> None:
        console = Console(width=120, record=True, color_system=None)
        console.print(history_table(HISTORY))
        text = console.export_text()

        assert "a" * 40 in text
        assert "Raise pool size" in text
        assert "Load tests need 50." not in text
        assert "Initial configuration" in text
