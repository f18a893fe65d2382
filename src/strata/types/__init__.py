"""Shared type aliases for Strata."""

from .cache import CachePayload, CachedRecord
from .common import JsonObject, JsonScalar, JsonValue
from .config import ModuleConfig, ResolverTypeConfig, default_resolver_types
from .trie import SerializedBinding, SerializedNode, SerializedTrie

__all__ = [
    "CachePayload",
    "CachedRecord",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "ModuleConfig",
    "ResolverTypeConfig",
    "SerializedBinding",
    "SerializedNode",
    "SerializedTrie",
    "default_resolver_types",
]
