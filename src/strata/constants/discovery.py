"""Constants for vendor directory module discovery."""

from __future__ import annotations

BASE_MODULE_NAME: str = "base"
BASE_MODULE_PRECEDENCE: int = 0

# vendor/<org>/<package>: one level of organisations, then packages.
VENDOR_SCAN_DEPTH: int = 1
MODULE_NAME_SEPARATOR: str = "."
