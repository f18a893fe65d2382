"""Build a configured resolver registry for a project root."""

from __future__ import annotations

import logging
from pathlib import Path

from strata.cache import CacheStore, JsonFileCache, MemoryCache
from strata.config import StrataConfig
from strata.resolver import ResolverRegistry

logger = logging.getLogger(__name__)


def build_registry(root: Path, config: StrataConfig, *, no_cache: bool = False) -> ResolverRegistry:
    """Wire a registry from ``config``: cache, resolver types, modules, vendor scan.

    Explicit modules are registered before the vendor scan, so a vendor
    package reusing an explicit module's name replaces its search-path entry.
    """
    root = root.resolve()
    cache = _open_cache(root, config, no_cache=no_cache)

    registry = ResolverRegistry(cache, logger=logger)
    for resolver in config.resolvers:
        registry.add_resolver_type(
            resolver.name,
            resolver.path,
            resolver.extension,
            kind=resolver.kind,
            suffix=resolver.suffix,
        )

    for module in config.modules:
        registry.register_module(module.name, root / module.path, module.precedence)

    vendor_path = config.vendor_path(root)
    if vendor_path is not None:
        registry.auto_configure_from_vendor(vendor_path)

    registry.authoritative = config.authoritative
    logger.debug("Built registry for %s with %d modules", root, len(registry.get_modules()))
    return registry


def _open_cache(root: Path, config: StrataConfig, *, no_cache: bool) -> CacheStore:
    cache_file = config.cache_file(root)
    if no_cache or cache_file is None:
        return MemoryCache()
    return JsonFileCache(cache_file)
