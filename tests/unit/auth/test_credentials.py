"""Unit tests for username/password credentials."""

from __future__ import annotations

import os
import subprocess

import pytest

from gitvcs.auth import UsernamePasswordCredentialsProvider


def _credential_fill(env: dict[str, str]) -> dict[str, str]:
    """Ask git for credentials the way a fetch over HTTPS would."""
    result = subprocess.run(
        ["git", "credential", "fill"],
        input="protocol=https\nhost=git.example.com\n\n",
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )
    return dict(line.split("=", 1) for line in result.stdout.splitlines() if line)


@pytest.fixture
def git_env(tmp_path) -> dict[str, str]:
    """Inherited environment with no user or system git config in reach."""
    env = {
        k: v
        for k, v in os.environ.items()
        if not k.startswith(("GIT_CONFIG", "GITVCS_"))
    }
    env["HOME"] = str(tmp_path)
    env["GIT_CONFIG_NOSYSTEM"] = "1"
    env["GIT_CONFIG_GLOBAL"] = os.devnull
    return env


class TestUsernamePasswordCredentialsProvider:
    def test_environment_carries_credentials(self) -> None:
        env = UsernamePasswordCredentialsProvider("deploy", "s3cret").environment({})

        assert env["GITVCS_USERNAME"] == "deploy"
        assert env["GITVCS_PASSWORD"] == "s3cret"

    def test_environment_installs_credential_helper(self) -> None:
        env = UsernamePasswordCredentialsProvider("deploy", "s3cret").environment({})

        assert env["GIT_CONFIG_COUNT"] == "2"
        assert env["GIT_CONFIG_KEY_0"] == "credential.helper"
        assert env["GIT_CONFIG_VALUE_0"] == ""
        assert env["GIT_CONFIG_KEY_1"] == "credential.helper"
        helper = env["GIT_CONFIG_VALUE_1"]
        assert helper.startswith("!")
        assert "${GITVCS_USERNAME}" in helper
        assert "s3cret" not in helper

    def test_appends_after_existing_config_entries(self) -> None:
        inherited = {
            "GIT_CONFIG_COUNT": "1",
            "GIT_CONFIG_KEY_0": "http.sslVerify",
            "GIT_CONFIG_VALUE_0": "false",
        }

        env = UsernamePasswordCredentialsProvider("deploy", "pw").environment(
            inherited
        )

        assert env["GIT_CONFIG_COUNT"] == "3"
        assert "GIT_CONFIG_KEY_0" not in env
        assert env["GIT_CONFIG_KEY_1"] == "credential.helper"
        assert env["GIT_CONFIG_VALUE_1"] == ""
        assert env["GIT_CONFIG_KEY_2"] == "credential.helper"

    def test_reads_process_environment_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GIT_CONFIG_COUNT", "2")

        env = UsernamePasswordCredentialsProvider("deploy", "pw").environment()

        assert env["GIT_CONFIG_COUNT"] == "4"
        assert env["GIT_CONFIG_KEY_3"] == "credential.helper"

    def test_malformed_config_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            UsernamePasswordCredentialsProvider("deploy", "pw").environment(
                {"GIT_CONFIG_COUNT": "many"}
            )

    def test_disables_terminal_prompt(self) -> None:
        env = UsernamePasswordCredentialsProvider("deploy", None).environment({})
        assert env["GIT_TERMINAL_PROMPT"] == "0"

    def test_missing_values_become_empty(self) -> None:
        env = UsernamePasswordCredentialsProvider(None, None).environment({})

        assert env["GITVCS_USERNAME"] == ""
        assert env["GITVCS_PASSWORD"] == ""

    def test_repr_hides_password(self) -> None:
        provider = UsernamePasswordCredentialsProvider("deploy", "s3cret")
        assert "s3cret" not in repr(provider)
        assert "deploy" in repr(provider)

    def test_is_frozen(self) -> None:
        provider = UsernamePasswordCredentialsProvider("deploy", "s3cret")
        with pytest.raises(AttributeError):
            provider.username = "other"  # type: ignore[misc]


class TestCredentialHelperWithGit:
    @pytest.mark.parametrize(
        "password",
        [
            "s3cret",
            r"ab\\cd",
            r"tok\cen",
            r"C:\new\table",
            "with space and 'quotes' \"too\"",
            "$HOME-%s-`id`",
        ],
    )
    def test_git_receives_password_unchanged(
        self, git_env: dict[str, str], password: str
    ) -> None:
        provider = UsernamePasswordCredentialsProvider("deploy", password)
        git_env.update(provider.environment(git_env))

        answer = _credential_fill(git_env)

        assert answer["username"] == "deploy"
        assert answer["password"] == password

    def test_git_receives_username_with_backslash(
        self, git_env: dict[str, str]
    ) -> None:
        provider = UsernamePasswordCredentialsProvider(r"CORP\deploy", "pw")
        git_env.update(provider.environment(git_env))

        assert _credential_fill(git_env)["username"] == r"CORP\deploy"

    def test_inherited_config_entries_still_apply(
        self, git_env: dict[str, str]
    ) -> None:
        git_env.update(
            {
                "GIT_CONFIG_COUNT": "1",
                "GIT_CONFIG_KEY_0": "gitvcs.marker",
                "GIT_CONFIG_VALUE_0": "kept",
            }
        )
        git_env.update(
            UsernamePasswordCredentialsProvider("deploy", "pw").environment(git_env)
        )

        result = subprocess.run(
            ["git", "config", "--get", "gitvcs.marker"],
            env=git_env,
            capture_output=True,
            text=True,
            check=True,
        )

        assert result.stdout.strip() == "kept"
        assert _credential_fill(git_env)["password"] == "pw"
