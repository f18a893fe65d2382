"""Structured validation error model for ``strata.yaml`` checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One config problem with a stable code and the dotted field it concerns."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = f"{self.path}:{self.field}" if self.field else self.path
        parts = [f"[{self.code}]", location, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors deterministically by code, path, field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation errors as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))
