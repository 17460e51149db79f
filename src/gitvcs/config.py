from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from gitvcs.auth.factory import AuthenticationImpl
from gitvcs.constants import (
    DEFAULT_NETWORK_ATTEMPTS,
    DEFAULT_RETRY_WAIT_MAX,
    VCS_AUTHENTICATION_IMPL_KEY,
    VCS_PASSWORD_KEY,
    VCS_SSH_KEYFILE_URL_KEY,
    VCS_SSH_PASSPHRASE_KEY,
    VCS_USERNAME_KEY,
)
from gitvcs.exceptions import ConfigError
from gitvcs.logging import get_logger

__all__ = [
    "AuthConfig",
    "GitVcsConfig",
    "NetworkConfig",
    "get_project_config_path",
    "get_user_config_path",
    "load_config",
]

logger = get_logger(__name__)

PROJECT_CONFIG_FILENAME = "gitvcs.yaml"


class AuthConfig(BaseModel):
    """Settings for authenticating against the remote.

    Attributes:
        impl: Strategy name ("UsernamePassword" or "SSH"); None for anonymous.
        username: Username for password-style authentication.
        password: Password or token for password-style authentication.
        ssh_passphrase: Passphrase protecting the SSH key.
        ssh_keyfile_url: Path or file: URL of the SSH private key.

    Example gitvcs.yaml:
        auth:
          impl: SSH
          ssh_keyfile_url: file:///home/deploy/.ssh/id_ed25519
    """

    impl: str | None = None
    username: str | None = None
    password: SecretStr | None = None
    ssh_passphrase: SecretStr | None = None
    ssh_keyfile_url: str | None = None

    @field_validator("impl")
    @classmethod
    def check_impl_known(cls, v: str | None) -> str | None:
        """Warn early about strategy names the factory will reject."""
        known = {impl.value for impl in AuthenticationImpl}
        if v and v not in known:
            logger.warning(
                "unknown_auth_impl",
                impl=v,
                known=sorted(known),
            )
        return v


class NetworkConfig(BaseModel):
    """Settings for network-bound git commands.

    Attributes:
        attempts: Attempts per clone/pull/fetch/push (1 disables retry).
        retry_wait_max: Upper bound in seconds for the wait between attempts.
    """

    attempts: int = Field(default=DEFAULT_NETWORK_ATTEMPTS, ge=1, le=10)
    retry_wait_max: float = Field(default=DEFAULT_RETRY_WAIT_MAX, gt=0.0, le=300.0)


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
                    if loaded is None:
                        logger.warning("config_file_empty", path=str(yaml_file))
                    elif not isinstance(loaded, dict):
                        raise ConfigError(
                            message=f"Config file {yaml_file} must contain a mapping",
                            field=None,
                            value=type(loaded).__name__,
                        )
                    else:
                        self._config_data = loaded
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the complete config data."""
        return self._config_data


class GitVcsConfig(BaseSettings):
    """Root configuration object containing all gitvcs settings."""

    model_config = SettingsConfigDict(
        env_prefix="GITVCS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    auth: AuthConfig = Field(default_factory=AuthConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init arguments (used by load_config for an explicit --config file)
        2. Environment variables (GITVCS_*)
        3. Project YAML config (./gitvcs.yaml)
        4. User YAML config (~/.config/gitvcs/config.yaml)
        """
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, get_project_config_path()),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )

    def to_properties(self) -> dict[str, str | None]:
        """Render the authentication settings as a configuration bundle.

        Returns:
            Mapping of ``vcs.*`` keys as read by the authentication factory.
        """
        auth = self.auth
        return {
            VCS_AUTHENTICATION_IMPL_KEY: auth.impl,
            VCS_USERNAME_KEY: auth.username,
            VCS_PASSWORD_KEY: _secret(auth.password),
            VCS_SSH_PASSPHRASE_KEY: _secret(auth.ssh_passphrase),
            VCS_SSH_KEYFILE_URL_KEY: auth.ssh_keyfile_url,
        }


def _secret(value: SecretStr | None) -> str | None:
    return value.get_secret_value() if value is not None else None


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/gitvcs/config.yaml
    """
    return Path.home() / ".config" / "gitvcs" / "config.yaml"


def get_project_config_path() -> Path:
    """Get the path to the project configuration file in the cwd."""
    return Path.cwd() / PROJECT_CONFIG_FILENAME


def load_config(config_path: Path | None = None) -> GitVcsConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional explicit config file. Its values take priority
            over environment variables and the project/user files.

    Returns:
        GitVcsConfig instance with merged configuration.

    Raises:
        ConfigError: If a file cannot be parsed or a value is invalid.
    """
    overrides: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(
                f"Config file not found: {config_path}",
                field="config",
                value=str(config_path),
            )
        overrides = YamlConfigSource(GitVcsConfig, config_path)()
    elif not get_project_config_path().exists():
        logger.info("No project configuration found, using defaults.")

    try:
        return GitVcsConfig(**overrides)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
