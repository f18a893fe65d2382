"""Constants shared by the flat resolver, route trie, and router."""

from __future__ import annotations

# Binding key used for files without a secondary extension (``bar.py``).
DEFAULT_EXTENSION_KEY: str = "_"

DEFAULT_ROUTE_SUFFIX: str = ".py"
INDEX_STEM: str = "index"
ROUTE_ROOT: str = "/"

TRIE_FORMAT_VERSION: int = 1

RESOLVER_KIND_FLAT: str = "flat"
RESOLVER_KIND_ROUTER: str = "router"
VALID_RESOLVER_KINDS: frozenset[str] = frozenset({RESOLVER_KIND_FLAT, RESOLVER_KIND_ROUTER})
