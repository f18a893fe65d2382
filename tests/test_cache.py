"""Tests for in-memory and JSON-file cache stores."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from strata.cache import JsonFileCache, MemoryCache, load_cache, new_cache, save_cache
from strata.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX, CACHE_VERSION
from strata.resolver import FlatResolver


def test_memory_cache_get_set_has_clear() -> None:
    cache = MemoryCache()
    cache.set("template", "layout.php", {"state": "not_found"})

    assert cache.has("template", "layout.php")
    assert not cache.has("assets", "layout.php")
    assert cache.get("template", "layout.php") == {"state": "not_found"}
    assert cache.get("template", "missing") is None

    cache.clear("template")

    assert not cache.has("template", "layout.php")
    assert cache.namespaces() == ()


def test_memory_cache_copies_values() -> None:
    cache = MemoryCache()
    value = {"items": [1, 2]}
    cache.set("ns", "key", value)
    value["items"].append(3)

    loaded = cache.get("ns", "key")
    assert loaded == {"items": [1, 2]}
    assert isinstance(loaded, dict)
    loaded["items"] = []
    assert cache.get("ns", "key") == {"items": [1, 2]}


def test_json_file_cache_persists_every_mutation(tmp_path: Path) -> None:
    path = tmp_path / "cache.json"
    cache = JsonFileCache(path)
    cache.set("template", "layout.php", {"state": "found", "module": "app", "path": "/app/layout.php"})

    reloaded = JsonFileCache(path)
    assert reloaded.get("template", "layout.php") == {
        "state": "found",
        "module": "app",
        "path": "/app/layout.php",
    }

    reloaded.clear("template")
    assert JsonFileCache(path).namespaces() == ()


def test_json_file_cache_clear_of_absent_namespace_does_not_write(tmp_path: Path) -> None:
    path = tmp_path / "cache.json"

    JsonFileCache(path).clear("template")

    assert not path.exists()


def test_save_cache_writes_versioned_payload(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "cache.json"
    payload = new_cache()
    payload["namespaces"]["router"] = {"/fingerprint": "abc"}

    save_cache(path, payload)

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "namespaces": {"router": {"/fingerprint": "abc"}},
        "version": CACHE_VERSION,
    }
    assert load_cache(path) == payload


def test_cache_invalid_payload_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "cache.json"
    path.write_text('{"version": 999, "namespaces": "bad"}', encoding="utf-8")

    assert load_cache(path)["namespaces"] == {}


def test_cache_unreadable_file_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "cache.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_cache(path) == new_cache()


def test_cache_drops_malformed_namespaces(tmp_path: Path) -> None:
    path = tmp_path / "cache.json"
    path.write_text(
        json.dumps({"version": CACHE_VERSION, "namespaces": {"good": {"k": 1}, "bad": [1, 2]}}),
        encoding="utf-8",
    )

    assert load_cache(path)["namespaces"] == {"good": {"k": 1}}


class CountingFileCache(JsonFileCache):
    """JSON file cache that counts how often it rewrites its file."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.flushes = 0

    def _flush(self) -> None:
        self.flushes += 1
        super()._flush()


def test_json_file_cache_skips_write_for_unchanged_value(tmp_path: Path) -> None:
    cache = CountingFileCache(tmp_path / "cache.json")

    cache.set("template", "layout.php", {"state": "not_found"})
    cache.set("template", "layout.php", {"state": "not_found"})
    assert cache.flushes == 1

    cache.set("template", "layout.php", {"state": "found", "module": "app", "path": "/app/layout.php"})
    assert cache.flushes == 2


def test_repeated_miss_does_not_rewrite_cache_file(tmp_path: Path, two_modules: tuple[Path, Path]) -> None:
    app, lib = two_modules
    cache = CountingFileCache(tmp_path / "cache.json")
    resolver = FlatResolver("template", cache=cache)
    resolver.add_to_search_path("app", app, 1).add_to_search_path("lib", lib, 2)

    assert resolver.resolve("missing.php") is None
    assert cache.flushes == 2

    assert resolver.resolve("missing.php") is None
    assert resolver.stats.scans == 2
    assert cache.flushes == 2


def test_save_cache_cleans_temp_file_on_error(tmp_path: Path) -> None:
    path = tmp_path / "cache.json"
    payload = new_cache()
    payload["namespaces"]["bad"] = {"key": object()}  # type: ignore[dict-item]

    with pytest.raises(TypeError):
        save_cache(path, payload)

    leftovers = [
        item
        for item in tmp_path.iterdir()
        if item.name.startswith(CACHE_TEMP_PREFIX) and item.name.endswith(CACHE_TEMP_SUFFIX)
    ]
    assert not leftovers
    assert not path.exists()


def test_save_cache_replaces_existing_file_compactly(tmp_path: Path) -> None:
    path = tmp_path / "cache.json"
    path.write_text('{"old": true}', encoding="utf-8")
    payload = new_cache()
    payload["namespaces"]["router"] = {"b": 1, "a": 2}

    save_cache(path, payload)

    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert " " not in text
    assert text.index('"a"') < text.index('"b"')
    assert json.loads(text) == {"namespaces": {"router": {"a": 2, "b": 1}}, "version": CACHE_VERSION}
