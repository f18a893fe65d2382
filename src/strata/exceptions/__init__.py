"""Shared exception hierarchy for Strata."""

from __future__ import annotations

from .base import StrataError
from .config import ConfigError
from .resolve import (
    DuplicateResolverTypeError,
    InvalidPathError,
    PathNotFoundError,
    UnknownModuleError,
    UnknownResolverTypeError,
)

__all__ = [
    "ConfigError",
    "DuplicateResolverTypeError",
    "InvalidPathError",
    "PathNotFoundError",
    "StrataError",
    "UnknownModuleError",
    "UnknownResolverTypeError",
]
