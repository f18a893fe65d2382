"""Shared utility helpers."""

from __future__ import annotations

from .naming import join_module_name, normalize_module_segment

__all__ = ["join_module_name", "normalize_module_segment"]
