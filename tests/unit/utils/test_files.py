"""Unit tests for file location helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitvcs.utils import to_path


class TestToPath:
    @pytest.mark.parametrize(
        ("location", "expected"),
        [
            ("/keys/id_rsa", Path("/keys/id_rsa")),
            ("keys/id_rsa", Path("keys/id_rsa")),
            ("  /keys/id_rsa  ", Path("/keys/id_rsa")),
            ("file:///keys/id_rsa", Path("/keys/id_rsa")),
            ("file:/keys/id_rsa", Path("/keys/id_rsa")),
            ("file://localhost/keys/id_rsa", Path("/keys/id_rsa")),
            ("file:///keys/my%20key", Path("/keys/my key")),
        ],
    )
    def test_resolves_paths_and_file_urls(self, location: str, expected: Path) -> None:
        assert to_path(location) == expected

    @pytest.mark.parametrize("location", [None, "", "   "])
    def test_empty_location_rejected(self, location: str | None) -> None:
        with pytest.raises(ValueError, match="empty"):
            to_path(location)

    def test_other_scheme_rejected(self) -> None:
        with pytest.raises(ValueError, match="scheme"):
            to_path("https://example.com/id_rsa")

    def test_remote_host_rejected(self) -> None:
        with pytest.raises(ValueError, match="local host"):
            to_path("file://fileserver/keys/id_rsa")

    def test_url_without_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="no path"):
            to_path("file://")
