"""Module-name derivation for directories found under a vendor tree."""

from __future__ import annotations

from strata.constants.discovery import MODULE_NAME_SEPARATOR
from strata.constants.naming import COLLAPSE_DASH_PATTERN, NON_MODULE_NAME_PATTERN


def normalize_module_segment(raw_name: str) -> str:
    """Lowercase a directory name and replace characters unsafe in module names."""
    normalized = raw_name.strip().lower()
    normalized = NON_MODULE_NAME_PATTERN.sub("-", normalized)
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized)
    return normalized.strip("-")


def join_module_name(prefix: str, directory_name: str) -> str:
    """Append a directory to a dotted module name: ``("acme", "Blog")`` -> ``"acme.blog"``."""
    segment = normalize_module_segment(directory_name)
    if not prefix:
        return segment
    return f"{prefix}{MODULE_NAME_SEPARATOR}{segment}"
