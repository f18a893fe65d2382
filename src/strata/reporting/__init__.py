"""Reporting package for Strata CLI output."""

from __future__ import annotations

from strata.reporting.stdout import StdoutReporter

__all__ = ["StdoutReporter"]
