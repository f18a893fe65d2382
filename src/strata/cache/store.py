"""Namespaced key-value stores used to remember resolve outcomes.

Each resolver owns one namespace (its type name). Values must be
JSON-compatible so the same data can live in memory or on disk.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Protocol

from strata.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX, CACHE_VERSION
from strata.types import CachePayload, JsonValue

logger = logging.getLogger(__name__)


class CacheStore(Protocol):
    """Get/set/has/clear contract the resolvers rely on."""

    def get(self, namespace: str, key: str) -> JsonValue | None: ...

    def set(self, namespace: str, key: str, value: JsonValue) -> None: ...

    def has(self, namespace: str, key: str) -> bool: ...

    def clear(self, namespace: str) -> None: ...


class MemoryCache:
    """In-process cache. Values are copied on the way in and out."""

    def __init__(self) -> None:
        self._namespaces: dict[str, dict[str, JsonValue]] = {}

    def get(self, namespace: str, key: str) -> JsonValue | None:
        value = self._namespaces.get(namespace, {}).get(key)
        return copy.deepcopy(value)

    def set(self, namespace: str, key: str, value: JsonValue) -> None:
        self._namespaces.setdefault(namespace, {})[key] = copy.deepcopy(value)

    def has(self, namespace: str, key: str) -> bool:
        return key in self._namespaces.get(namespace, {})

    def clear(self, namespace: str) -> None:
        self._namespaces.pop(namespace, None)

    def namespaces(self) -> tuple[str, ...]:
        return tuple(sorted(self._namespaces))

    def __repr__(self) -> str:
        return f"MemoryCache(namespaces={len(self._namespaces)})"


class JsonFileCache(MemoryCache):
    """Memory cache mirrored to a JSON file after every change.

    Setting a key to the value it already holds does not rewrite the file.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self._namespaces = load_cache(path)["namespaces"]

    def set(self, namespace: str, key: str, value: JsonValue) -> None:
        entries = self._namespaces.get(namespace, {})
        if key in entries and entries[key] == value:
            return
        super().set(namespace, key, value)
        self._flush()

    def clear(self, namespace: str) -> None:
        if namespace not in self._namespaces:
            return
        super().clear(namespace)
        self._flush()

    def _flush(self) -> None:
        save_cache(self.path, {"version": CACHE_VERSION, "namespaces": self._namespaces})

    def __repr__(self) -> str:
        return f"JsonFileCache({self.path})"


def new_cache() -> CachePayload:
    """Return an empty cache payload."""
    return {
        "version": CACHE_VERSION,
        "namespaces": {},
    }


def load_cache(cache_path: Path) -> CachePayload:
    """Load cache file if valid, otherwise return a new cache payload."""
    if not cache_path.is_file():
        return new_cache()

    try:
        payload = json.loads(cache_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable cache file %s: %s", cache_path, exc)
        return new_cache()

    if not isinstance(payload, dict) or payload.get("version") != CACHE_VERSION:
        return new_cache()

    raw_namespaces = payload.get("namespaces")
    if not isinstance(raw_namespaces, dict):
        return new_cache()

    namespaces: dict[str, dict[str, JsonValue]] = {}
    for name, entries in raw_namespaces.items():
        if not isinstance(name, str) or not isinstance(entries, dict):
            continue
        namespaces[name] = {key: value for key, value in entries.items() if isinstance(key, str)}

    return {
        "version": CACHE_VERSION,
        "namespaces": namespaces,
    }


def save_cache(cache_path: Path, payload: CachePayload) -> None:
    """Persist cache to disk atomically.

    The payload goes to a sibling temp file that replaces ``cache_path``
    once fully written. A failed write leaves no temp file behind.
    """
    cache_path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=cache_path.parent,
            prefix=CACHE_TEMP_PREFIX,
            suffix=CACHE_TEMP_SUFFIX,
            delete=False,
        ) as handle:
            temp_name = handle.name
            json.dump(payload, handle, sort_keys=True, separators=(",", ":"))
            handle.write("\n")
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, cache_path)
