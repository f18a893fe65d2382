"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import sys

from strata.bootstrap import build_registry
from strata.config import load_config
from strata.exceptions import ConfigError, StrataError
from strata.exceptions.validation import format_errors
from strata.reporting.stdout import StdoutReporter
from strata.resolver import Router, iter_bindings
from strata.validation import preflight_validate

logger = logging.getLogger(__name__)


def handle_resolve(args: argparse.Namespace) -> int:
    """Resolve one reference and print the winning file."""
    preflight = _preflight(args)
    if preflight is not None:
        return preflight

    try:
        registry = build_registry(args.root, load_config(args.root, args.config), no_cache=args.no_cache)
        if args.authoritative:
            registry.authoritative = True
        resolver = registry.get_resolver(args.type)
        if isinstance(resolver, Router):
            result = resolver.resolve(args.reference, extension=args.extension)
        else:
            if args.extension is not None:
                logger.warning("--extension only applies to router types; ignoring it for %s", args.type)
            result = resolver.resolve(args.reference)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except StrataError as exc:
        print(f"Resolver error: {exc}", file=sys.stderr)
        return 1

    reporter = StdoutReporter(color=_use_color(args), verbose=args.verbose)
    print(reporter.render_resolution(args.type, args.reference, result, resolver.stats))
    return 0 if result is not None else 1


def handle_routes(args: argparse.Namespace) -> int:
    """Print every binding of a router's trie."""
    preflight = _preflight(args)
    if preflight is not None:
        return preflight

    try:
        registry = build_registry(args.root, load_config(args.root, args.config), no_cache=args.no_cache)
        resolver = registry.get_resolver(args.type)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except StrataError as exc:
        print(f"Resolver error: {exc}", file=sys.stderr)
        return 1

    if not isinstance(resolver, Router):
        print(f"Resolver error: resolver type {args.type} is not a router", file=sys.stderr)
        return 1

    reporter = StdoutReporter(color=_use_color(args))
    print(reporter.render_routes(args.type, iter_bindings(resolver.get_routes())))
    return 0


def handle_modules(args: argparse.Namespace) -> int:
    """Print registered modules in search order."""
    preflight = _preflight(args)
    if preflight is not None:
        return preflight

    try:
        registry = build_registry(args.root, load_config(args.root, args.config), no_cache=True)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except StrataError as exc:
        print(f"Resolver error: {exc}", file=sys.stderr)
        return 1

    reporter = StdoutReporter(color=_use_color(args))
    print(reporter.render_modules(registry.get_module_entries()))
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _preflight(args: argparse.Namespace) -> int | None:
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2
    return None


def _use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and sys.stdout.isatty()
