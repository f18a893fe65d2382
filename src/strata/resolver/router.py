"""Hierarchical resolver mapping request paths to route files."""

from __future__ import annotations

import logging
from typing import Self

from strata.cache import CacheStore
from strata.constants.cache import ROUTES_KEY
from strata.constants.resolving import DEFAULT_ROUTE_SUFFIX
from strata.io import Filesystem
from strata.model import RouteResult
from strata.resolver.base import BaseResolver
from strata.resolver.trie import RouteNode, build_trie, deserialize_trie, serialize_trie


class Router(BaseResolver):
    """Resolve slash-separated requests against a trie of route files.

    The trie is built lazily from every module on the search path and kept
    both in memory and, when a cache is attached, in the cache so that other
    instances with the same search path can skip the directory scan.
    """

    def __init__(
        self,
        name: str = "router",
        suffix: str = DEFAULT_ROUTE_SUFFIX,
        *,
        cache: CacheStore | None = None,
        filesystem: Filesystem | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(name, cache=cache, filesystem=filesystem, logger=logger)
        self.suffix = suffix
        self._root: RouteNode | None = None
        self._root_fingerprint: str | None = None

    def resolve(self, request: str, extension: str | None = None) -> RouteResult | None:
        """Match ``request`` against the routes.

        ``extension`` defaults to the extension of the last request segment,
        e.g. ``.json`` for ``/users/list.json``. Pass ``""`` to match without
        extension negotiation.
        """
        parts = [part for part in request.split("/") if part]
        ext = detect_extension(parts) if extension is None else extension

        route = self.get_routes().match(parts, ext)
        if route is not None and not self.authoritative and not self.filesystem.exists(route.path):
            self.logger.info("Route file %s for %s no longer exists, rebuilding routes", route.path, request)
            self.clear_cache()
            route = self.get_routes().match(parts, ext)
            if route is not None and not self.filesystem.exists(route.path):
                route = None

        if route is None:
            self.logger.info("Failed to resolve route for request to %s", request)
            return None

        self.logger.debug("Resolved route for %s to %s (module: %s)", route.route, route.path, route.module)
        return route

    def get_routes(self) -> RouteNode:
        """Return the route trie for the current search path, building it when needed."""
        fingerprint = self.fingerprint()
        if self._root is not None and self._root_fingerprint == fingerprint:
            self.stats.hits += 1
            return self._root

        root: RouteNode | None = None
        if self.cache is not None:
            self._validate_cache(fingerprint)
            root = deserialize_trie(self.cache.get(self.name, ROUTES_KEY))

        if root is None:
            self.stats.misses += 1
            self.stats.scans += 1
            root = build_trie(self.search_path.sorted(), self.filesystem, self.suffix, logger=self.logger)
            if self.cache is not None:
                self._store(ROUTES_KEY, serialize_trie(root), fingerprint)  # type: ignore[arg-type]
        else:
            self.stats.hits += 1
            self.logger.debug("Loaded routes for resolver %s from cache", self.name)

        self._root = root
        self._root_fingerprint = fingerprint
        return root

    def clear_cache(self) -> Self:
        self._root = None
        self._root_fingerprint = None
        return super().clear_cache()


def detect_extension(parts: list[str]) -> str:
    """Return the extension of the last segment, ignoring a leading dot."""
    if not parts:
        return ""
    last = parts[-1]
    dot = last.rfind(".")
    return last[dot:] if dot > 0 else ""
