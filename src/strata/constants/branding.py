"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "STRATA"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ STRATA",
    "     // layered module file resolution",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} resolver"))
