"""Typed cache payload structures."""

from __future__ import annotations

from typing import NotRequired, TypedDict

from strata.types.common import JsonValue


class CachedRecord(TypedDict):
    """Cache encoding of a flat resolve outcome."""

    state: str
    module: NotRequired[str]
    path: NotRequired[str]


class CachePayload(TypedDict):
    """Top-level cache payload persisted to disk."""

    version: int
    namespaces: dict[str, dict[str, JsonValue]]
