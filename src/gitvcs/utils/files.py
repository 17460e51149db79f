"""Filesystem location helpers."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

__all__ = ["to_path"]

_LOCAL_HOSTS = ("", "localhost")


def to_path(location: str | None) -> Path:
    """Resolve a configured file location into a path.

    Accepts either a plain filesystem path or a ``file:`` URL, so that
    ``/keys/id_rsa``, ``file:///keys/id_rsa`` and ``file:/keys/id_rsa`` all
    name the same file. Windows drive paths (``C:\\keys\\id_rsa``) are treated
    as plain paths rather than URLs with a one-letter scheme.

    Args:
        location: Path or URL string.

    Returns:
        The resolved path (not checked for existence).

    Raises:
        ValueError: If the location is empty, uses a scheme other than
            ``file``, or names a non-local host.
    """
    if location is None or not location.strip():
        raise ValueError("File location is empty")

    location = location.strip()
    parts = urlsplit(location)

    if not parts.scheme or len(parts.scheme) == 1:
        return Path(location)

    if parts.scheme.lower() != "file":
        raise ValueError(f"Unsupported file URL scheme: {location}")

    if parts.netloc.lower() not in _LOCAL_HOSTS:
        raise ValueError(f"File URL must point at the local host: {location}")

    if not parts.path:
        raise ValueError(f"File URL has no path: {location}")

    return Path(url2pathname(parts.path))
