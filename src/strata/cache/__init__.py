"""Cache collaborators for resolver state."""

from .store import CacheStore, JsonFileCache, MemoryCache, load_cache, new_cache, save_cache

__all__ = ["CacheStore", "JsonFileCache", "MemoryCache", "load_cache", "new_cache", "save_cache"]
