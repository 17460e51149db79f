"""Small helpers shared by gitvcs modules."""

from __future__ import annotations

from gitvcs.utils.files import to_path

__all__ = ["to_path"]
