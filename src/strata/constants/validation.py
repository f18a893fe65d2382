"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # configured module or vendor path not found
CFG008: str = "CFG008"  # duplicate module name
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # root directory not found

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    CFG010,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "authoritative",
        "cache",
        "modules",
        "resolvers",
        "vendor_dir",
    }
)

ALLOWED_RESOLVER_KEYS: frozenset[str] = frozenset({"path", "kind", "extension", "suffix"})
ALLOWED_MODULE_KEYS: frozenset[str] = frozenset({"name", "path", "precedence"})
