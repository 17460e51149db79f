from __future__ import annotations


class GitVcsError(Exception):
    """Base exception class for all gitvcs-specific errors.

    Catching this at a CLI or host-tool boundary handles every failure the
    package raises on purpose, while system exceptions still propagate.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            vcs.update(working_copy)
        except GitVcsError as e:
            logger.error("update_failed", error=e.message)
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the GitVcsError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
