"""Constants for stdout formatting."""

from __future__ import annotations

ROUTES_TITLE: str = "Routes"
MODULES_TITLE: str = "Modules"
NOT_FOUND_LABEL: str = "not found"
UNKNOWN_EXT_LABEL: str = "?"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"
