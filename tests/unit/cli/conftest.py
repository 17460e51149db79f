"""Shared fixtures for CLI command tests.

Common fixtures available from parent conftest.py:
- cli_runner: Click CLI test runner
- temp_dir: Temporary directory for test files
- clean_env: Clean environment without GITVCS_ vars
- remote_repo: Bare remote with one commit on main
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def isolated_cwd(
    temp_dir: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Run from an empty directory with no user config in reach."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setattr(Path, "home", lambda: temp_dir)
    return temp_dir
