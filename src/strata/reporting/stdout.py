"""Human-readable stdout rendering for resolver results."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from strata.constants.branding import ASCII_LOGO_LINES
from strata.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    MODULES_TITLE,
    NOT_FOUND_LABEL,
    ROUTES_TITLE,
    UNKNOWN_EXT_LABEL,
)
from strata.model import AppBinding, ResolverStats, RouteResult, SearchPathEntry


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats resolutions, route tables and module lists for the terminal."""

    def __init__(self, *, color: bool = True, verbose: bool = False) -> None:
        self._color = color
        self._verbose = verbose

    def render_resolution(
        self,
        type_name: str,
        reference: str,
        result: Path | RouteResult | None,
        stats: ResolverStats | None = None,
    ) -> str:
        """Render one ``resolve`` outcome, plus cache counters in verbose mode."""
        lines: list[str] = []
        if result is None:
            lines.append(f"{type_name} {reference}: {self._paint(NOT_FOUND_LABEL, ANSI_RED)}")
        elif isinstance(result, RouteResult):
            ext = UNKNOWN_EXT_LABEL if result.ext is None else (result.ext or '""')
            remainder = "/".join(result.remainder)
            lines.extend(
                [
                    self._paint(str(result.path), ANSI_GREEN),
                    f"  route      {result.route}",
                    f"  module     {result.module}",
                    f"  ext        {ext}",
                    f"  depth      {result.depth}",
                    f"  remainder  {remainder or '-'}",
                ]
            )
        else:
            lines.append(self._paint(str(result), ANSI_GREEN))

        if self._verbose and stats is not None:
            counters = f"{stats.hits} hits / {stats.misses} misses / {stats.scans} scans"
            lines.append(self._paint(f"  cache      {counters}", ANSI_DIM))
        return "\n".join(lines)

    def render_routes(self, type_name: str, bindings: Iterable[AppBinding]) -> str:
        """Render every route binding as ``route  ext  module  path``."""
        rows = [(binding.route, binding.ext or "-", binding.module, str(binding.path)) for binding in bindings]
        lines = [self._header(f"{ROUTES_TITLE} ({type_name})")]
        if not rows:
            lines.append("  (no routes)")
            return "\n".join(lines)

        w_route = max(len(row[0]) for row in rows)
        w_ext = max(len(row[1]) for row in rows)
        w_module = max(len(row[2]) for row in rows)
        for route, ext, module, path in rows:
            lines.append(f"  {route:<{w_route}}  {ext:<{w_ext}}  {module:<{w_module}}  {self._paint(path, ANSI_DIM)}")
        return "\n".join(lines)

    def render_modules(self, entries: Iterable[SearchPathEntry]) -> str:
        """Render registered modules in search order."""
        entries = list(entries)
        lines = [self._header(MODULES_TITLE)]
        if not entries:
            lines.append("  (no modules)")
            return "\n".join(lines)

        w_name = max(len(entry.module) for entry in entries)
        w_prec = max(len(str(entry.precedence)) for entry in entries)
        for entry in entries:
            root = self._paint(str(entry.root), ANSI_DIM)
            lines.append(f"  {entry.precedence:>{w_prec}}  {entry.module:<{w_name}}  {root}")
        return "\n".join(lines)

    def _header(self, title: str) -> str:
        return "\n".join([f"  {ASCII_LOGO_LINES[0]}", f"  {self._paint(title, ANSI_BOLD)}", "  " + "─" * 38])

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text
