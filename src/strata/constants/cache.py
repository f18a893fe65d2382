"""Constants used by the resolve cache and its persisted payload."""

from __future__ import annotations

CACHE_VERSION: int = 1
CACHE_FILENAME: str = ".strata-cache.json"
CACHE_TEMP_PREFIX: str = ".cache-"
CACHE_TEMP_SUFFIX: str = ".tmp"

# Reserved keys inside a resolver namespace. References are stored without
# leading slashes, so these never collide with a cached reference.
FINGERPRINT_KEY: str = "/fingerprint"
ROUTES_KEY: str = "/routes"

RECORD_STATE_FOUND: str = "found"
RECORD_STATE_NOT_FOUND: str = "not_found"
