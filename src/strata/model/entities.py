"""Dataclasses shared by the search path, resolvers, and route trie."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from strata.constants.cache import RECORD_STATE_FOUND, RECORD_STATE_NOT_FOUND
from strata.types import CachedRecord, JsonObject


@dataclass(frozen=True)
class SearchPathEntry:
    """A module root registered with one resolver."""

    module: str
    root: Path
    precedence: int

    @property
    def sort_key(self) -> tuple[int, str]:
        """Lower precedence first, ties broken by root path."""
        return (self.precedence, str(self.root))


class RecordState(Enum):
    """Outcome of a flat lookup as remembered by the cache."""

    FOUND = RECORD_STATE_FOUND
    NOT_FOUND = RECORD_STATE_NOT_FOUND
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ResolveRecord:
    """Tri-state cache record: found, confirmed absent, or never looked up."""

    state: RecordState
    module: str | None = None
    path: Path | None = None

    @classmethod
    def found(cls, module: str, path: Path) -> ResolveRecord:
        return cls(RecordState.FOUND, module, path)

    @classmethod
    def not_found(cls) -> ResolveRecord:
        return cls(RecordState.NOT_FOUND)

    @classmethod
    def unknown(cls) -> ResolveRecord:
        return cls(RecordState.UNKNOWN)

    @property
    def is_found(self) -> bool:
        return self.state is RecordState.FOUND

    @property
    def is_not_found(self) -> bool:
        return self.state is RecordState.NOT_FOUND

    def to_cache(self) -> CachedRecord:
        """Encode for the cache. Unknown records are never stored."""
        if self.state is RecordState.FOUND:
            return {"state": RECORD_STATE_FOUND, "module": str(self.module), "path": str(self.path)}
        if self.state is RecordState.NOT_FOUND:
            return {"state": RECORD_STATE_NOT_FOUND}
        raise ValueError("Unknown records cannot be cached")

    @classmethod
    def from_cache(cls, value: object) -> ResolveRecord:
        """Decode a cached value; absent or malformed values are unknown."""
        if not isinstance(value, dict):
            return cls.unknown()

        state = value.get("state")
        if state == RECORD_STATE_NOT_FOUND:
            return cls.not_found()
        if state != RECORD_STATE_FOUND:
            return cls.unknown()

        module = value.get("module")
        path = value.get("path")
        if not isinstance(module, str) or not isinstance(path, str):
            return cls.unknown()
        return cls.found(module, Path(path))


@dataclass(frozen=True)
class AppBinding:
    """A route file bound to a trie node for one extension slot."""

    path: Path
    module: str
    route: str
    ext: str
    depth: int


@dataclass(frozen=True)
class RouteResult:
    """A matched route plus the request segments it did not consume."""

    path: Path
    module: str
    route: str
    ext: str | None
    depth: int
    remainder: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        return {
            "path": str(self.path),
            "module": self.module,
            "route": self.route,
            "ext": self.ext,
            "depth": self.depth,
            "remainder": list(self.remainder),
        }


@dataclass
class ResolverStats:
    """Cache effectiveness counters for one resolver."""

    hits: int = 0
    misses: int = 0
    scans: int = 0
