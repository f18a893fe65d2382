"""Cached resolution of flat references such as template and asset names."""

from __future__ import annotations

import logging
from pathlib import Path

from strata.cache import CacheStore
from strata.io import Filesystem
from strata.model import ResolveRecord
from strata.resolver.base import BaseResolver


class FlatResolver(BaseResolver):
    """Resolve ``reference`` to the first ``<root>/<reference>`` in search order.

    Outcomes are cached per reference. In authoritative mode cached results
    are trusted without touching the disk, including negative results and
    positives whose file has since disappeared; call :meth:`clear_cache` to
    pick up changes. Otherwise negatives and stale positives are re-checked.
    """

    def __init__(
        self,
        name: str,
        extension: str = "",
        *,
        cache: CacheStore | None = None,
        filesystem: Filesystem | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(name, cache=cache, filesystem=filesystem, logger=logger)
        self.extension = extension

    def resolve(self, reference: str) -> Path | None:
        """Return the winning file for ``reference``, or ``None`` when no module has it."""
        reference = self.normalize_reference(reference)
        if not reference:
            return None

        fingerprint = self.fingerprint()
        if self.cache is not None:
            self._validate_cache(fingerprint)
            record = ResolveRecord.from_cache(self.cache.get(self.name, reference))

            if record.is_not_found and self.authoritative:
                self.stats.hits += 1
                self.logger.debug("Resolved %s %s to nothing (cached)", self.name, reference)
                return None

            if record.is_found:
                assert record.path is not None
                if self._is_usable(record.path):
                    self.stats.hits += 1
                    self.logger.debug(
                        "Resolved %s %s to path %s (module: %s) (cached)",
                        self.name,
                        reference,
                        record.path,
                        record.module,
                    )
                    return record.path

                if self.authoritative:
                    self.stats.hits += 1
                    return None

                self.logger.warning(
                    "Cached path for %s %s from module %s cannot be read: %s",
                    self.name,
                    reference,
                    record.module,
                    record.path,
                )

        self.stats.misses += 1
        record = self._search(reference)
        if self.cache is not None:
            self._store(reference, record.to_cache(), fingerprint)

        if not record.is_found:
            self.logger.debug("Could not resolve %s %s", self.name, reference)
            return None

        self.logger.debug("Resolved %s %s to path %s (module: %s)", self.name, reference, record.path, record.module)
        return record.path

    def normalize_reference(self, reference: str) -> str:
        """Strip leading slashes and append the required extension when missing."""
        reference = reference.lstrip("/")
        if reference and self.extension and not reference.endswith(self.extension):
            reference += self.extension
        return reference

    def _search(self, reference: str) -> ResolveRecord:
        self.stats.scans += 1
        for entry in self.search_path:
            candidate = entry.root / reference
            if self._is_usable(candidate):
                return ResolveRecord.found(entry.module, candidate)
        return ResolveRecord.not_found()

    def _is_usable(self, path: Path) -> bool:
        return self.filesystem.exists(path) and self.filesystem.is_readable(path) and not self.filesystem.is_dir(path)
