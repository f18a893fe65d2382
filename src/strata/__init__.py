"""Strata package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from strata.cache import JsonFileCache, MemoryCache
from strata.model import RouteResult
from strata.resolver import FlatResolver, ResolverRegistry, Router

__all__ = [
    "FlatResolver",
    "JsonFileCache",
    "MemoryCache",
    "ResolverRegistry",
    "RouteResult",
    "Router",
    "__version__",
]

try:
    __version__ = version("strata")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
