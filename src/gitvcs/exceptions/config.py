from __future__ import annotations

from typing import Any

from gitvcs.exceptions.base import GitVcsError


class ConfigError(GitVcsError):
    """Exception for configuration loading, parsing, and validation errors.

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional field or key that caused the error (e.g., "auth.impl").
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        raise ConfigError(
            "Failed to parse gitvcs.yaml: invalid YAML syntax at line 10"
        )

        raise ConfigError(
            "Invalid configuration value",
            field="network.attempts",
            value=0,
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)


class AuthenticationConfigError(ConfigError):
    """Exception raised when an authentication provider cannot be built.

    Raised only while constructing a provider: the selected strategy name is
    unknown, or one of its inputs (such as the key file location) is malformed.
    The message always names the offending strategy value.
    """
