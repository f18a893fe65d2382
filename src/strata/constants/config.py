"""Configuration defaults and filenames."""

from __future__ import annotations

from strata.constants.cache import CACHE_FILENAME
from strata.constants.resolving import DEFAULT_ROUTE_SUFFIX, RESOLVER_KIND_FLAT, RESOLVER_KIND_ROUTER

CONFIG_FILENAME: str = "strata.yaml"
DEFAULT_CACHE_PATH: str = CACHE_FILENAME
DEFAULT_AUTHORITATIVE: bool = False
DEFAULT_MODULE_PRECEDENCE: int = 0

# (type name, sub path, kind, extension, suffix)
DEFAULT_RESOLVER_TYPES: tuple[tuple[str, str, str, str, str], ...] = (
    ("template", "template", RESOLVER_KIND_FLAT, "", DEFAULT_ROUTE_SUFFIX),
    ("assets", "assets", RESOLVER_KIND_FLAT, "", DEFAULT_ROUTE_SUFFIX),
    ("router", "app", RESOLVER_KIND_ROUTER, "", DEFAULT_ROUTE_SUFFIX),
)
