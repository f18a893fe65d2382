"""State and cache handling shared by the flat resolver and the router."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Self

from strata.cache import CacheStore
from strata.constants.cache import FINGERPRINT_KEY
from strata.io import Filesystem, LocalFilesystem
from strata.model import ResolverStats
from strata.resolver.fingerprint import search_path_fingerprint
from strata.resolver.search_path import SearchPath
from strata.types import JsonValue


class BaseResolver:
    """A named search path with an optional cache namespace of the same name.

    Cached data is only trusted while the fingerprint stored next to it
    matches the live search path. Any mismatch wipes the whole namespace.
    """

    def __init__(
        self,
        name: str,
        *,
        cache: CacheStore | None = None,
        filesystem: Filesystem | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.name = name
        self.cache = cache
        self.authoritative = False
        self.stats = ResolverStats()
        self.filesystem: Filesystem = filesystem or LocalFilesystem()
        self.search_path = SearchPath(self.filesystem)
        self.logger = logger or logging.getLogger(type(self).__module__)

    def add_to_search_path(self, module: str, root: str | Path, precedence: int) -> Self:
        self.search_path.add(module, root, precedence)
        self.logger.debug("Added %s (%s, precedence %d) to resolver %s", module, root, precedence, self.name)
        return self

    def get_search_path(self) -> dict[str, Path]:
        return self.search_path.as_mapping()

    def get_precedence(self, module: str) -> int:
        return self.search_path.get_precedence(module)

    def set_precedence(self, module: str, precedence: int) -> Self:
        self.search_path.set_precedence(module, precedence)
        return self

    def clear_search_path(self) -> Self:
        """Forget every module and reset this resolver's cache namespace."""
        self.search_path.clear()
        return self.clear_cache()

    def clear_cache(self) -> Self:
        """Drop everything cached for this resolver."""
        if self.cache is not None:
            self.cache.clear(self.name)
        return self

    def fingerprint(self) -> str:
        return search_path_fingerprint(self.search_path.sorted())

    def _validate_cache(self, fingerprint: str) -> None:
        """Clear the namespace when it was populated under another search path."""
        assert self.cache is not None
        stored = self.cache.get(self.name, FINGERPRINT_KEY)
        if stored == fingerprint:
            return
        if stored is not None:
            self.logger.debug("Search path of resolver %s changed, invalidating cache", self.name)
        self.cache.clear(self.name)

    def _store(self, key: str, value: JsonValue, fingerprint: str) -> None:
        """Write ``value`` and the fingerprint, skipping entries that already match."""
        assert self.cache is not None
        if self.cache.get(self.name, key) != value:
            self.cache.set(self.name, key, value)
        if self.cache.get(self.name, FINGERPRINT_KEY) != fingerprint:
            self.cache.set(self.name, FINGERPRINT_KEY, fingerprint)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, modules={len(self.search_path)})"
