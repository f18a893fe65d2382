"""Root of the Strata exception hierarchy."""

from __future__ import annotations


class StrataError(Exception):
    """Base for all strata-specific errors."""
