"""Core data models for Strata."""

from .entities import (
    AppBinding,
    RecordState,
    ResolverStats,
    ResolveRecord,
    RouteResult,
    SearchPathEntry,
)

__all__ = [
    "AppBinding",
    "RecordState",
    "ResolveRecord",
    "ResolverStats",
    "RouteResult",
    "SearchPathEntry",
]
