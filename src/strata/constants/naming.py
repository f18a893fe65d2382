"""Regex patterns for module-name normalization."""

from __future__ import annotations

import re

NON_MODULE_NAME_PATTERN: re.Pattern[str] = re.compile(r"[^a-z0-9._-]+")
COLLAPSE_DASH_PATTERN: re.Pattern[str] = re.compile(r"-+")
