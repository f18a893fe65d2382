"""Filesystem collaborator used by every resolver.

Resolvers touch the disk only through these four calls, so tests can swap
in an instrumented implementation and count lookups.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol


class Filesystem(Protocol):
    """Minimal read-only view of the filesystem."""

    def exists(self, path: Path) -> bool: ...

    def is_readable(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def list_entries(self, path: Path) -> list[str]: ...


class LocalFilesystem:
    """Filesystem backed by the local disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_readable(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_entries(self, path: Path) -> list[str]:
        """Return entry names in ``path``, or an empty list if it cannot be listed."""
        try:
            with os.scandir(path) as entries:
                return [entry.name for entry in entries]
        except OSError:
            return []

    def __repr__(self) -> str:
        return "LocalFilesystem()"
