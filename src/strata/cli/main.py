"""CLI entrypoint for Strata."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from strata import __version__
from strata.cli.handlers import handle_modules, handle_resolve, handle_routes, handle_validate_config
from strata.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="strata",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve a reference to the file that wins it")
    _add_project_arguments(resolve)
    resolve.add_argument(
        "-e",
        "--extension",
        default=None,
        help="Requested extension for router types, e.g. .json (default: taken from the reference)",
    )
    resolve.add_argument(
        "-a",
        "--authoritative",
        action="store_true",
        help="Trust cached results without re-checking the filesystem",
    )
    resolve.add_argument("-n", "--no-cache", action="store_true", help="Disable cache reads/writes")
    resolve.add_argument("-v", "--verbose", action="store_true", help="Show cache stats and debug logging")
    resolve.add_argument("type", help="Resolver type name, e.g. template or router")
    resolve.add_argument("reference", help="Reference to resolve, e.g. layout.php or /users/list.json")

    routes = subparsers.add_parser("routes", help="List every route binding of a router type")
    _add_project_arguments(routes)
    routes.add_argument("-t", "--type", default="router", help="Router type name (default: router)")
    routes.add_argument("-n", "--no-cache", action="store_true", help="Disable cache reads/writes")

    modules = subparsers.add_parser("modules", help="List registered modules in search order")
    _add_project_arguments(modules)

    validate = subparsers.add_parser("validate-config", help="Validate configuration without resolving")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_project_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "resolve":
        return handle_resolve(args)
    if args.command == "routes":
        return handle_routes(args)
    if args.command == "modules":
        return handle_modules(args)
    if args.command == "validate-config":
        return handle_validate_config(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
