"""Config loading and normalization for Strata projects."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from strata.config.model import StrataConfig
from strata.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_AUTHORITATIVE,
    DEFAULT_CACHE_PATH,
    DEFAULT_MODULE_PRECEDENCE,
)
from strata.constants.resolving import DEFAULT_ROUTE_SUFFIX, RESOLVER_KIND_FLAT, VALID_RESOLVER_KINDS
from strata.exceptions import ConfigError
from strata.types.config import ModuleConfig, ResolverTypeConfig, default_resolver_types


def load_config(root: Path, config_path: Path | None = None) -> StrataConfig:
    """Load and validate project config from ``strata.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return StrataConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    cache_path = raw.get("cache", DEFAULT_CACHE_PATH)
    if cache_path is not None and (not isinstance(cache_path, str) or not cache_path.strip()):
        raise ConfigError("cache must be a non-empty string or null")

    authoritative = raw.get("authoritative", DEFAULT_AUTHORITATIVE)
    if not isinstance(authoritative, bool):
        raise ConfigError("authoritative must be a boolean")

    vendor_dir = raw.get("vendor_dir")
    if vendor_dir is not None and (not isinstance(vendor_dir, str) or not vendor_dir.strip()):
        raise ConfigError("vendor_dir must be a non-empty string")

    resolvers_raw = raw.get("resolvers")
    resolvers = default_resolver_types() if resolvers_raw is None else _build_resolvers(resolvers_raw)

    return StrataConfig(
        cache_path=cache_path,
        authoritative=authoritative,
        vendor_dir=vendor_dir,
        resolvers=resolvers,
        modules=_build_modules(raw.get("modules", [])),
    )


def _build_resolvers(raw: Any) -> tuple[ResolverTypeConfig, ...]:
    """Build resolver types from the ``resolvers`` mapping, keeping declaration order."""
    if not isinstance(raw, dict):
        raise ConfigError("resolvers must be a mapping")

    resolvers: list[ResolverTypeConfig] = []
    for name, settings in raw.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigError("resolvers keys must be non-empty strings")
        if settings is None:
            settings = {}
        if not isinstance(settings, dict):
            raise ConfigError(f"resolvers.{name} must be a mapping")

        kind = settings.get("kind", RESOLVER_KIND_FLAT)
        if kind not in VALID_RESOLVER_KINDS:
            raise ConfigError(f"resolvers.{name}.kind must be one of {sorted(VALID_RESOLVER_KINDS)}, got {kind!r}")

        resolvers.append(
            ResolverTypeConfig(
                name=name,
                path=_ensure_string(settings.get("path", name), f"resolvers.{name}.path"),
                kind=kind,
                extension=_ensure_string(
                    settings.get("extension", ""), f"resolvers.{name}.extension", allow_empty=True
                ),
                suffix=_ensure_string(settings.get("suffix", DEFAULT_ROUTE_SUFFIX), f"resolvers.{name}.suffix"),
            )
        )
    return tuple(resolvers)


def _build_modules(raw: Any) -> tuple[ModuleConfig, ...]:
    """Build explicit module declarations from the ``modules`` list."""
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigError("modules must be a list of mappings")

    modules: list[ModuleConfig] = []
    seen: set[str] = set()
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ConfigError(f"modules[{index}] must be a mapping")

        name = _ensure_string(item.get("name"), f"modules[{index}].name")
        if name in seen:
            raise ConfigError(f"modules[{index}].name duplicates module {name!r}")
        seen.add(name)

        precedence = item.get("precedence", DEFAULT_MODULE_PRECEDENCE)
        if isinstance(precedence, bool) or not isinstance(precedence, int):
            raise ConfigError(f"modules[{index}].precedence must be an integer")

        modules.append(
            ModuleConfig(
                name=name,
                path=_ensure_string(item.get("path"), f"modules[{index}].path"),
                precedence=precedence,
            )
        )
    return tuple(modules)


def _ensure_string(value: Any, key_name: str, *, allow_empty: bool = False) -> str:
    """Return ``value`` when it is a string, raising ConfigError otherwise."""
    if not isinstance(value, str) or (not allow_empty and not value.strip()):
        qualifier = "a string" if allow_empty else "a non-empty string"
        raise ConfigError(f"{key_name} must be {qualifier}")
    return value
