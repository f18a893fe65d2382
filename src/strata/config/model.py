"""Config data model for Strata."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from strata.constants.config import DEFAULT_AUTHORITATIVE, DEFAULT_CACHE_PATH
from strata.types.config import ModuleConfig, ResolverTypeConfig, default_resolver_types


@dataclass(frozen=True)
class StrataConfig:
    """Resolved project config."""

    cache_path: str | None = DEFAULT_CACHE_PATH
    authoritative: bool = DEFAULT_AUTHORITATIVE
    vendor_dir: str | None = None
    resolvers: tuple[ResolverTypeConfig, ...] = field(default_factory=default_resolver_types)
    modules: tuple[ModuleConfig, ...] = ()

    def cache_file(self, root: Path) -> Path | None:
        """Absolute cache file location, or ``None`` for an in-memory cache."""
        if self.cache_path is None:
            return None
        return root / self.cache_path

    def vendor_path(self, root: Path) -> Path | None:
        if self.vendor_dir is None:
            return None
        return root / self.vendor_dir

    @property
    def resolver_names(self) -> tuple[str, ...]:
        return tuple(resolver.name for resolver in self.resolvers)
