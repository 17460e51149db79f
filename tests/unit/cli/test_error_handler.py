"""Unit tests for cli_error_handler context manager."""

from __future__ import annotations

import pytest

from gitvcs.cli.common import cli_error_handler
from gitvcs.cli.context import ExitCode
from gitvcs.exceptions import AuthenticationConfigError, GitVcsError, VcsError


def test_cli_error_handler_keyboard_interrupt(capfd):
    """Test cli_error_handler handles KeyboardInterrupt correctly."""
    with pytest.raises(SystemExit) as exc_info, cli_error_handler():
        raise KeyboardInterrupt()

    assert exc_info.value.code == ExitCode.INTERRUPTED

    captured = capfd.readouterr()
    assert "Interrupted by user" in captured.err


def test_cli_error_handler_vcs_error(capfd):
    """Test cli_error_handler reports the failed operation."""
    with pytest.raises(SystemExit) as exc_info, cli_error_handler():
        raise VcsError("Git push_shadow failed: rejected", operation="push_shadow")

    assert exc_info.value.code == ExitCode.FAILURE

    captured = capfd.readouterr()
    assert "Git push_shadow failed: rejected" in captured.err
    assert "Operation: push_shadow" in captured.err


def test_cli_error_handler_config_error(capfd):
    """Test cli_error_handler reports the offending field and value."""
    with pytest.raises(SystemExit) as exc_info, cli_error_handler():
        raise AuthenticationConfigError(
            "Authentication provider may be misconfigured; 'Bogus'",
            field="vcs.auth.impl",
            value="Bogus",
        )

    assert exc_info.value.code == ExitCode.FAILURE

    captured = capfd.readouterr()
    assert "misconfigured; 'Bogus'" in captured.err
    assert "Field: vcs.auth.impl" in captured.err
    assert "Suggestion:" in captured.err


def test_cli_error_handler_gitvcs_error(capfd):
    """Test cli_error_handler handles the base error."""
    with pytest.raises(SystemExit) as exc_info, cli_error_handler():
        raise GitVcsError("Something went wrong")

    assert exc_info.value.code == ExitCode.FAILURE

    captured = capfd.readouterr()
    assert "Error: Something went wrong" in captured.err


def test_cli_error_handler_value_error(capfd):
    """Test cli_error_handler reports invalid arguments."""
    with pytest.raises(SystemExit) as exc_info, cli_error_handler():
        raise ValueError("Invalid revision: --force")

    assert exc_info.value.code == ExitCode.FAILURE

    captured = capfd.readouterr()
    assert "Invalid revision: --force" in captured.err


def test_cli_error_handler_generic_exception(capfd):
    """Test cli_error_handler handles unexpected exceptions."""
    with pytest.raises(SystemExit) as exc_info, cli_error_handler():
        raise RuntimeError("Unexpected error")

    assert exc_info.value.code == ExitCode.FAILURE

    captured = capfd.readouterr()
    assert "Unexpected error" in captured.err


def test_cli_error_handler_success_case():
    """Test cli_error_handler allows successful execution."""
    result = None
    with cli_error_handler():
        result = "ok"

    assert result == "ok"
