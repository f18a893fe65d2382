"""Configuration loading and validation for ``strata.yaml``.

This package facade re-exports all public names so that callers can use
``from strata.config import ...``.
"""

from __future__ import annotations

from strata.config.loader import load_config
from strata.config.model import StrataConfig
from strata.config.validator import suggest_key, validate_config_file

__all__ = [
    "StrataConfig",
    "load_config",
    "suggest_key",
    "validate_config_file",
]
