"""Resolution engine: search paths, flat resolvers, route tries, and the registry."""

from __future__ import annotations

from .base import BaseResolver
from .fingerprint import search_path_fingerprint
from .flat import FlatResolver
from .listing import list_route_files
from .registry import Resolver, ResolverRegistry
from .router import Router, detect_extension
from .search_path import SearchPath
from .trie import RouteNode, build_trie, deserialize_trie, iter_bindings, serialize_trie

__all__ = [
    "BaseResolver",
    "FlatResolver",
    "Resolver",
    "ResolverRegistry",
    "RouteNode",
    "Router",
    "SearchPath",
    "build_trie",
    "deserialize_trie",
    "detect_extension",
    "iter_bindings",
    "list_route_files",
    "search_path_fingerprint",
    "serialize_trie",
]
