"""Typed configuration structures for resolver and module declarations."""

from __future__ import annotations

from dataclasses import dataclass

from strata.constants.config import DEFAULT_MODULE_PRECEDENCE, DEFAULT_RESOLVER_TYPES
from strata.constants.resolving import DEFAULT_ROUTE_SUFFIX, RESOLVER_KIND_FLAT


@dataclass(frozen=True)
class ResolverTypeConfig:
    """One resolver type: where it looks inside each module and how it matches."""

    name: str
    path: str
    kind: str = RESOLVER_KIND_FLAT
    extension: str = ""
    suffix: str = DEFAULT_ROUTE_SUFFIX


@dataclass(frozen=True)
class ModuleConfig:
    """A module declared explicitly in ``strata.yaml``."""

    name: str
    path: str
    precedence: int = DEFAULT_MODULE_PRECEDENCE


def default_resolver_types() -> tuple[ResolverTypeConfig, ...]:
    """Resolver types used when ``strata.yaml`` declares none."""
    return tuple(
        ResolverTypeConfig(name=name, path=path, kind=kind, extension=extension, suffix=suffix)
        for name, path, kind, extension, suffix in DEFAULT_RESOLVER_TYPES
    )
