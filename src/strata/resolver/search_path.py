"""Precedence-ordered registry of module roots for a single resolver."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from strata.exceptions import PathNotFoundError, UnknownModuleError
from strata.io import Filesystem, LocalFilesystem
from strata.model import SearchPathEntry


class SearchPath:
    """Module roots keyed by module name, searched in precedence order.

    Lower precedence values are searched first and win conflicts. Entries
    with equal precedence are ordered by their root path, so the order never
    depends on registration order.
    """

    def __init__(self, filesystem: Filesystem | None = None) -> None:
        self._fs: Filesystem = filesystem or LocalFilesystem()
        self._entries: dict[str, SearchPathEntry] = {}
        self._sorted: list[SearchPathEntry] | None = []

    def add(self, module: str, root: str | Path, precedence: int) -> None:
        """Register ``root`` for ``module``, replacing any earlier entry."""
        root = Path(root)
        if not self._fs.exists(root) or not self._fs.is_dir(root) or not self._fs.is_readable(root):
            raise PathNotFoundError(f"Path does not exist: {root}")

        self._entries[module] = SearchPathEntry(module=module, root=root, precedence=precedence)
        self._sorted = None

    def get_precedence(self, module: str) -> int:
        return self._entry(module).precedence

    def set_precedence(self, module: str, precedence: int) -> None:
        entry = self._entry(module)
        self._entries[module] = SearchPathEntry(module=module, root=entry.root, precedence=precedence)
        self._sorted = None

    def sorted(self) -> list[SearchPathEntry]:
        """Return entries in search order, sorting lazily after mutations."""
        if self._sorted is None:
            self._sorted = sorted(self._entries.values(), key=lambda entry: entry.sort_key)
        return list(self._sorted)

    def as_mapping(self) -> dict[str, Path]:
        """Return ``{module: root}`` in search order."""
        return {entry.module: entry.root for entry in self.sorted()}

    def clear(self) -> None:
        self._entries.clear()
        self._sorted = []

    def _entry(self, module: str) -> SearchPathEntry:
        entry = self._entries.get(module)
        if entry is None:
            raise UnknownModuleError(f"Unknown module: {module}")
        return entry

    def __contains__(self, module: object) -> bool:
        return module in self._entries

    def __iter__(self) -> Iterator[SearchPathEntry]:
        return iter(self.sorted())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        modules = ", ".join(entry.module for entry in self.sorted())
        return f"SearchPath([{modules}])"
