"""GitPython-based version control operations for gitvcs.

Every working copy the user sees is paired with a hidden *shadow copy*: a
sibling clone named ``<working copy>_copy_doNotEdit`` that tracks the real
remote. The working copy is cloned from the shadow copy, so:

- checkouts and updates resolve tags and branches against the shadow copy,
  which is pulled from the remote first;
- history and "remote revision" queries read the shadow copy, leaving the
  working copy pinned wherever the user put it;
- commits are pushed from the working copy to the shadow copy, then from the
  shadow copy to the remote.

Example:
    ```python
    from gitvcs.git import GitVersionControlSystem

    vcs = GitVersionControlSystem()
    revision = vcs.checkout("https://git.example.com/config.git", "/srv/config")
    vcs.update("/srv/config", "release-1.2")
    for item in vcs.get_remote_revision_history(url, "/srv/config", limit=5):
        print(item.revision, item.comment)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from git import GitCommandError, Repo
from git.exc import GitError
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from gitvcs.auth.provider import AuthenticationProvider
from gitvcs.constants import (
    DEFAULT_NETWORK_ATTEMPTS,
    DEFAULT_RETRY_WAIT_MAX,
    IMPLEMENTATION_NAME,
    SHADOW_COPY_SUFFIX,
)
from gitvcs.exceptions import VcsError
from gitvcs.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "GitVersionControlSystem",
    "RevisionHistoryItem",
    "WorkingCopy",
]

T = TypeVar("T")

#: Failures of the git engine or filesystem that surface as VcsError.
#: ValueError covers GitPython's unresolvable refs and empty repositories.
_ENGINE_ERRORS: tuple[type[Exception], ...] = (GitError, OSError, ValueError)


# =============================================================================
# Value Objects
# =============================================================================


@dataclass(frozen=True, slots=True)
class WorkingCopy:
    """A working copy and the shadow copy that mirrors its remote.

    Attributes:
        path: Absolute path of the user-facing working copy.
        shadow_path: Absolute path of the hidden shadow copy (a sibling).
    """

    path: Path
    shadow_path: Path

    @classmethod
    def for_path(cls, path: Path | str) -> WorkingCopy:
        """Pair a working copy path with its shadow copy path.

        Args:
            path: Working copy location, absolute or relative to the cwd.

        Returns:
            WorkingCopy whose shadow path is ``<name>_copy_doNotEdit``.

        Raises:
            ValueError: If the path has no final component (e.g. ``/``).
        """
        working = Path(path).expanduser().absolute()
        return cls(
            path=working,
            shadow_path=working.with_name(working.name + SHADOW_COPY_SUFFIX),
        )


@dataclass(frozen=True, slots=True)
class RevisionHistoryItem:
    """A single entry of remote history.

    Attributes:
        revision: Full 40-character commit SHA.
        comment: Full commit message.
    """

    revision: str
    comment: str


# =============================================================================
# Helper Functions
# =============================================================================


def _convert_git_error(exc: Exception, operation: str) -> VcsError:
    """Wrap a GitPython or filesystem exception in a VcsError.

    Args:
        exc: Original exception.
        operation: Name of the operation that failed.

    Returns:
        VcsError carrying the operation and the original cause.
    """
    return VcsError(f"Git {operation} failed: {exc}", operation=operation, cause=exc)


def _validate_revision(revision: str) -> None:
    """Reject revisions git would parse as options.

    Raises:
        ValueError: If revision is empty or starts with '-'.
    """
    if not revision or revision.isspace():
        raise ValueError("Revision cannot be empty")
    if revision.startswith("-"):
        raise ValueError(f"Invalid revision: {revision}")


def _commit_message(message: str | bytes) -> str:
    if isinstance(message, bytes):
        return message.decode("utf-8", errors="replace")
    return message


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "git_network_retry",
        attempt=retry_state.attempt_number,
        error=str(exc),
    )


# =============================================================================
# Main Class: GitVersionControlSystem
# =============================================================================


class GitVersionControlSystem:
    """Git version control operations over a working copy / shadow copy pair.

    Holds no repository state between calls; everything lives on disk. Not
    safe for concurrent use against the same working copy.

    Network operations (clone, pull, fetch, push) run through a tenacity
    policy. With the default of one attempt, failures propagate immediately.
    """

    def __init__(
        self,
        authentication_provider: AuthenticationProvider | None = None,
        *,
        network_attempts: int = DEFAULT_NETWORK_ATTEMPTS,
        retry_wait_max: float = DEFAULT_RETRY_WAIT_MAX,
    ) -> None:
        """Initialize GitVersionControlSystem.

        Args:
            authentication_provider: Credentials and transport hooks for git
                commands. None means anonymous access.
            network_attempts: Attempts per network operation (1 = no retry).
            retry_wait_max: Upper bound in seconds for the wait between
                attempts.

        Raises:
            ValueError: If network_attempts is less than 1.
        """
        if network_attempts < 1:
            raise ValueError("network_attempts must be at least 1")

        self._authentication_provider = authentication_provider
        self._retrying = Retrying(
            retry=retry_if_exception_type(GitCommandError),
            stop=stop_after_attempt(network_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=retry_wait_max),
            before_sleep=_log_retry,
            reraise=True,
        )

    @property
    def implementation_name(self) -> str:
        """Name of this version control implementation."""
        return IMPLEMENTATION_NAME

    @property
    def authentication_provider(self) -> AuthenticationProvider | None:
        """Authentication applied to every git command, if any."""
        return self._authentication_provider

    @authentication_provider.setter
    def authentication_provider(self, provider: AuthenticationProvider | None) -> None:
        self._authentication_provider = provider

    # -------------------------------------------------------------------------
    # Connection and Checkout
    # -------------------------------------------------------------------------

    def test_connection(self, remote_url: str, working_copy_path: Path | str) -> None:
        """Verify the remote is reachable with a metadata-only clone.

        Args:
            remote_url: URL of the remote repository.
            working_copy_path: Empty directory to clone into.

        Raises:
            VcsError: If the clone fails.
        """
        path = Path(working_copy_path)
        try:
            with self._git_environment() as env:
                self._clone(remote_url, path, env, no_checkout=True)
        except _ENGINE_ERRORS as e:
            raise _convert_git_error(e, "test_connection") from e

        logger.info("connection_verified", remote_url=remote_url, path=str(path))

    def checkout(
        self,
        remote_url: str,
        working_copy_path: Path | str,
        revision: str | None = None,
    ) -> str:
        """Create the shadow copy and working copy, optionally at a revision.

        The remote is cloned into the shadow copy, then the shadow copy is
        cloned into the working copy. If a revision or tag is given, the
        working copy is then switched to it.

        Args:
            remote_url: URL of the remote repository.
            working_copy_path: Where to create the working copy.
            revision: Optional tag, branch, or commit to check out.

        Returns:
            The working copy's resulting revision.

        Raises:
            VcsError: If either clone or the revision checkout fails.
            ValueError: If revision is empty or looks like an option.
        """
        if revision is not None:
            _validate_revision(revision)

        working_copy = WorkingCopy.for_path(working_copy_path)
        log = logger.bind(working_copy=str(working_copy.path))

        try:
            with self._git_environment() as env:
                self._clone(remote_url, working_copy.shadow_path, env)
                with Repo(working_copy.shadow_path) as shadow:
                    # Accept pushes from the working copy onto the checked-out
                    # branch, updating the shadow's tree to match.
                    with shadow.config_writer() as writer:
                        writer.set_value(
                            "receive", "denyCurrentBranch", "updateInstead"
                        )
                log.info("shadow_copy_created", path=str(working_copy.shadow_path))

                self._clone(str(working_copy.shadow_path), working_copy.path, env)
        except _ENGINE_ERRORS as e:
            raise _convert_git_error(e, "checkout") from e

        log.info("working_copy_created")

        if revision is not None:
            return self.update(working_copy.path, revision)
        return self.get_local_revision(working_copy.path)

    # -------------------------------------------------------------------------
    # Updating
    # -------------------------------------------------------------------------

    def update(self, working_copy_path: Path | str, revision: str | None = None) -> str:
        """Bring the working copy up to date, or switch it to a revision.

        The shadow copy is pulled from the remote first. Without a revision
        the working copy then pulls from the shadow copy; with one it fetches
        the shadow's branches and tags and checks the revision out.

        Args:
            working_copy_path: Path of an existing working copy.
            revision: Optional tag, branch, or commit to switch to.

        Returns:
            The working copy's resulting revision.

        Raises:
            VcsError: If pulling, fetching, or checking out fails.
            ValueError: If revision is empty or looks like an option.
        """
        if revision is not None:
            _validate_revision(revision)

        working_copy = WorkingCopy.for_path(working_copy_path)
        self._update_shadow(working_copy)

        try:
            with self._git_environment() as env, Repo(working_copy.path) as repo:
                with repo.git.custom_environment(**env):
                    if revision is None:
                        self._network(repo.git.pull)
                    else:
                        self._network(repo.git.fetch, "--tags")
                        repo.git.checkout(revision)
        except _ENGINE_ERRORS as e:
            raise _convert_git_error(e, "update") from e

        new_revision = self.get_local_revision(working_copy.path)
        logger.info(
            "working_copy_updated",
            working_copy=str(working_copy.path),
            requested=revision,
            revision=new_revision,
        )
        return new_revision

    # -------------------------------------------------------------------------
    # Staging and Committing
    # -------------------------------------------------------------------------

    def recursive_add(self, working_copy_path: Path | str) -> None:
        """Stage every change under the working copy root.

        Raises:
            VcsError: If staging fails.
        """
        try:
            with Repo(Path(working_copy_path)) as repo:
                repo.git.add("-A")
        except _ENGINE_ERRORS as e:
            raise _convert_git_error(e, "add") from e

    def commit(self, working_copy_path: Path | str, message: str) -> None:
        """Commit modified tracked files and relay them to the remote.

        The commit is pushed from the working copy to the shadow copy, then
        from the shadow copy to the real remote. The two pushes are not
        atomic: if the second fails the shadow copy stays ahead of the remote
        until a later push succeeds.

        Args:
            working_copy_path: Path of an existing working copy.
            message: Commit message.

        Raises:
            VcsError: If there is nothing to commit or either push fails.
        """
        working_copy = WorkingCopy.for_path(working_copy_path)
        log = logger.bind(working_copy=str(working_copy.path))

        try:
            with self._git_environment() as env, Repo(working_copy.path) as repo:
                repo.git.commit("-a", "-m", message)
                sha = repo.head.commit.hexsha
                log.info("commit_created", revision=sha)

                with repo.git.custom_environment(**env):
                    self._network(repo.git.push)
        except _ENGINE_ERRORS as e:
            raise _convert_git_error(e, "commit") from e

        log.info("commit_pushed_to_shadow", revision=sha)
        self._push_shadow(working_copy)

    # -------------------------------------------------------------------------
    # Revision Queries
    # -------------------------------------------------------------------------

    def get_local_revision(self, working_copy_path: Path | str) -> str:
        """Return the working copy's current head revision.

        Raises:
            VcsError: If the path is not a repository or has no commits.
        """
        return self._head_revision(Path(working_copy_path), "get_local_revision")

    def get_remote_revision(
        self, remote_url: str, working_copy_path: Path | str
    ) -> str:
        """Return the remote's head revision, as seen by the shadow copy.

        Args:
            remote_url: URL of the remote repository (the shadow copy already
                tracks it).
            working_copy_path: Path of an existing working copy.

        Raises:
            VcsError: If the shadow copy cannot be pulled or read.
        """
        working_copy = WorkingCopy.for_path(working_copy_path)
        self._update_shadow(working_copy)
        revision = self._head_revision(working_copy.shadow_path, "get_remote_revision")
        logger.debug("remote_revision", remote_url=remote_url, revision=revision)
        return revision

    def get_remote_revision_history(
        self,
        remote_url: str,
        working_copy_path: Path | str,
        limit: int,
    ) -> list[RevisionHistoryItem]:
        """Return up to ``limit`` remote commits, most recent first.

        Args:
            remote_url: URL of the remote repository.
            working_copy_path: Path of an existing working copy.
            limit: Maximum number of entries.

        Returns:
            RevisionHistoryItem list walking ancestry from the remote head.

        Raises:
            ValueError: If limit is less than 1.
            VcsError: If the shadow copy cannot be pulled or read.
        """
        if limit < 1:
            raise ValueError("limit must be a positive integer")

        working_copy = WorkingCopy.for_path(working_copy_path)
        self._update_shadow(working_copy)

        try:
            with Repo(working_copy.shadow_path) as shadow:
                history = [
                    RevisionHistoryItem(
                        revision=commit.hexsha,
                        comment=_commit_message(commit.message),
                    )
                    for commit in shadow.iter_commits("HEAD", max_count=limit)
                ]
        except _ENGINE_ERRORS as e:
            raise _convert_git_error(e, "get_remote_revision_history") from e

        logger.debug(
            "remote_history_read",
            remote_url=remote_url,
            count=len(history),
            limit=limit,
        )
        return history

    # -------------------------------------------------------------------------
    # Shadow Copy
    # -------------------------------------------------------------------------

    def _update_shadow(self, working_copy: WorkingCopy) -> None:
        """Pull the shadow copy from the real remote."""
        try:
            with (
                self._git_environment() as env,
                Repo(working_copy.shadow_path) as shadow,
                shadow.git.custom_environment(**env),
            ):
                self._network(shadow.git.pull)
        except _ENGINE_ERRORS as e:
            raise _convert_git_error(e, "update_shadow") from e

        logger.debug("shadow_copy_updated", path=str(working_copy.shadow_path))

    def _push_shadow(self, working_copy: WorkingCopy) -> None:
        """Push the shadow copy to the real remote."""
        try:
            with (
                self._git_environment() as env,
                Repo(working_copy.shadow_path) as shadow,
                shadow.git.custom_environment(**env),
            ):
                self._network(shadow.git.push)
        except _ENGINE_ERRORS as e:
            logger.warning(
                "shadow_copy_ahead_of_remote",
                path=str(working_copy.shadow_path),
                error=str(e),
            )
            raise _convert_git_error(e, "push_shadow") from e

        logger.info("shadow_copy_pushed", path=str(working_copy.shadow_path))

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------

    @contextmanager
    def _git_environment(self) -> Iterator[dict[str, str]]:
        """Yield the authentication environment for one git command."""
        if self._authentication_provider is None:
            yield {}
            return
        with self._authentication_provider.git_environment() as env:
            yield env

    def _network(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run a network-bound git call under the retry policy."""
        return self._retrying.copy()(fn, *args, **kwargs)

    def _clone(
        self,
        url: str,
        target: Path,
        env: dict[str, str],
        **options: Any,
    ) -> None:
        repo = self._network(Repo.clone_from, url, target, env=env, **options)
        repo.close()

    def _head_revision(self, path: Path, operation: str) -> str:
        try:
            with Repo(path) as repo:
                return repo.head.commit.hexsha
        except _ENGINE_ERRORS as e:
            raise _convert_git_error(e, operation) from e
