"""Configuration-related exceptions."""

from __future__ import annotations

from strata.exceptions.base import StrataError


class ConfigError(StrataError, ValueError):
    """Raised when ``strata.yaml`` is invalid."""
