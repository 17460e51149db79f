from __future__ import annotations

from gitvcs.exceptions.base import GitVcsError


class VcsError(GitVcsError):
    """Exception for version control operation failures.

    Raised for any failure of the underlying git engine or filesystem while
    cloning, checking out, pulling, committing, pushing, or reading history.
    The original exception is kept both as ``cause`` and as ``__cause__``.

    Attributes:
        message: Human-readable error message.
        operation: Operation that failed (e.g., "checkout", "push_shadow").
        cause: Underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize the VcsError.

        Args:
            message: Human-readable error message.
            operation: Operation that failed.
            cause: Underlying exception.
        """
        self.operation = operation
        self.cause = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause
