from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from git import Repo

if TYPE_CHECKING:
    from click.testing import CliRunner


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for test environment.

    Logs go to stderr at WARNING level so they never mix with stdout that
    CLI tests assert on.
    """
    from gitvcs.logging import clear_context, configure_logging

    configure_logging(level=logging.WARNING)
    yield
    clear_context()


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files.

    Also saves and restores the current working directory to prevent
    tests that use os.chdir() from affecting other tests.
    """
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
    os.chdir(original_cwd)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove all GITVCS_ environment variables for clean testing."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("GITVCS_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


# =============================================================================
# Git fixtures
# =============================================================================


@pytest.fixture
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every git process a committer identity, whatever the host config."""
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")


@dataclass
class RemoteRepo:
    """A bare remote plus a seed clone used to publish commits and tags to it.

    Attributes:
        path: Bare repository acting as the remote server.
        seed: Non-bare repository whose ``origin`` is the bare remote.
    """

    path: Path
    seed: Repo

    @property
    def url(self) -> str:
        return str(self.path)

    def push_commit(
        self, message: str, filename: str = "adapter.xml", content: str | None = None
    ) -> str:
        """Commit a file in the seed repository and push it to ``main``."""
        file_path = Path(self.seed.working_dir) / filename
        file_path.write_text(content if content is not None else f"{message}\n")
        self.seed.index.add([filename])
        commit = self.seed.index.commit(message)
        self.seed.git.push("origin", "HEAD:refs/heads/main")
        return commit.hexsha

    def tag(self, name: str, ref: str = "HEAD") -> str:
        """Create a lightweight tag in the seed and push it."""
        tag = self.seed.create_tag(name, ref=ref)
        self.seed.git.push("origin", f"refs/tags/{name}")
        return tag.commit.hexsha

    def head(self) -> str:
        """Current tip of ``main`` on the remote."""
        with Repo(self.path) as bare:
            return bare.commit("refs/heads/main").hexsha


@pytest.fixture
def remote_repo(tmp_path: Path, git_identity: None) -> Iterator[RemoteRepo]:
    """Create a bare remote whose ``main`` branch has one commit.

    Yields:
        RemoteRepo wrapping the bare remote and its seed clone.
    """
    bare_path = tmp_path / "remote.git"
    with Repo.init(bare_path, bare=True) as bare:
        # Independent of init.defaultBranch on the host
        bare.git.symbolic_ref("HEAD", "refs/heads/main")

    seed = Repo.init(tmp_path / "seed")
    seed.create_remote("origin", str(bare_path))

    remote = RemoteRepo(path=bare_path, seed=seed)
    remote.push_commit("Initial configuration")

    yield remote

    seed.close()


@pytest.fixture
def working_copy_path(tmp_path: Path) -> Path:
    """Location for a working copy; its parent holds the shadow copy too."""
    parent = tmp_path / "workspace"
    parent.mkdir()
    return parent / "config"
